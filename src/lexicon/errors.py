"""Errors raised while reading the source files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class MalformedRecordError(ValueError):
    """A source row could not be parsed.

    ``row_index`` is 0-based and counts the rows of the file that carry data,
    so the first row is row 0.
    """

    def __init__(self, row_index: int, reason: str, path: Optional[Path] = None) -> None:
        self.row_index = row_index
        self.reason = reason
        self.path = path
        location = f"{path}: row {row_index}" if path is not None else f"row {row_index}"
        super().__init__(f"{location}: {reason}")


__all__ = ["MalformedRecordError"]
