from __future__ import annotations

from typing import Any, List, Sequence


def to_stroke_count(value: Any) -> int:
    """Convert a stroke-count field to a non-negative int."""
    if value is None:
        raise ValueError("Expected a stroke count, received None")
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to a stroke count")
    if isinstance(value, str):
        # ASCII digits with an optional leading "+"; no spaces, underscores or other digit scripts.
        digits = value[1:] if value.startswith("+") else value
        if not (digits.isascii() and digits.isdigit()):
            raise ValueError(f"Cannot convert {value!r} to a stroke count")
    try:
        count = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Cannot convert {value!r} to a stroke count") from exc
    if count < 0:
        raise ValueError(f"Stroke count must be non-negative, got {count}")
    return count


def pad_row(row: Sequence[str], width: int) -> List[str]:
    """Return the first ``width`` fields of ``row``, filling missing ones with empty strings."""
    fields = [str(value) for value in row[:width]]
    fields.extend("" for _ in range(width - len(fields)))
    return fields


def unique_characters(text: str) -> List[str]:
    """Distinct characters of ``text`` in first-seen order."""
    return list(dict.fromkeys(text))


__all__ = ["pad_row", "to_stroke_count", "unique_characters"]
