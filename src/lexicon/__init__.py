from .catalog import CharacterCatalog, build_catalog, load_catalog
from .errors import MalformedRecordError
from .records import CharacterRecord, CompositionType, VocabularyEntry, parse_composition_type
from .vocabulary import VocabularyIndex, build_vocabulary_index, load_vocabulary_index

__all__ = [
    "CharacterCatalog",
    "CharacterRecord",
    "CompositionType",
    "MalformedRecordError",
    "VocabularyEntry",
    "VocabularyIndex",
    "build_catalog",
    "build_vocabulary_index",
    "load_catalog",
    "load_vocabulary_index",
    "parse_composition_type",
]
