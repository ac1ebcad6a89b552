"""Catalog parsing, storage and loading."""

from .loader import CatalogLoader, DocumentSource, InMemoryDocumentSource, YamlDocumentSource
from .parser import ParseResult, SkippedEntry, parse_catalog, parse_entry
from .registry import LEGACY_PATTERN_IDS, PatternRegistry, VanillaPatternRegistry
from .store import CatalogStore

__all__ = [
    "CatalogLoader",
    "CatalogStore",
    "DocumentSource",
    "InMemoryDocumentSource",
    "LEGACY_PATTERN_IDS",
    "ParseResult",
    "PatternRegistry",
    "SkippedEntry",
    "VanillaPatternRegistry",
    "YamlDocumentSource",
    "parse_catalog",
    "parse_entry",
]
