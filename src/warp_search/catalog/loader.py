"""Reads the ActionIcons document and publishes parsed entries to a store."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

import yaml

from warp_search.catalog.parser import ParseResult, parse_catalog
from warp_search.catalog.registry import KNOWN_ITEM_TYPES, LEGACY_PATTERN_IDS, PatternRegistry
from warp_search.catalog.store import CatalogStore
from warp_search.errors import EmptyCatalogError, MissingSourceError, SourceDecodeError


class DocumentSource(Protocol):
    """Supplies the raw nested document to parse."""

    def read(self) -> Any:
        """Return the decoded document tree."""

    def describe(self) -> str:
        """Human-readable location used in logs and errors."""


class YamlDocumentSource:
    """Document source backed by a YAML file on disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def describe(self) -> str:
        return str(self._path.absolute())

    def read(self) -> Any:
        if not self._path.exists():
            raise MissingSourceError(f"ActionIcons document not found: {self.describe()}")
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                return yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise SourceDecodeError(f"Unable to decode {self.describe()}: {exc}") from exc


class InMemoryDocumentSource:
    """Document source returning a prepared tree (tests, embedding hosts)."""

    def __init__(self, document: Mapping[str, Any] | None, label: str = "<memory>") -> None:
        self._document = document
        self._label = label

    def describe(self) -> str:
        return self._label

    def read(self) -> Any:
        if self._document is None:
            raise MissingSourceError(f"ActionIcons document not found: {self._label}")
        return self._document


class CatalogLoader:
    """Loads the catalog outside the store lock and swaps it in on success.

    A failed load (missing file, undecodable YAML, zero usable entries) raises
    and leaves the previously published snapshot untouched.
    """

    def __init__(
        self,
        source: DocumentSource,
        store: CatalogStore,
        *,
        legacy_patterns: Mapping[str, str] = LEGACY_PATTERN_IDS,
        pattern_registry: PatternRegistry | None = None,
        item_types: frozenset[str] = KNOWN_ITEM_TYPES,
        logger: logging.Logger | None = None,
    ) -> None:
        self._source = source
        self._store = store
        self._legacy_patterns = legacy_patterns
        self._pattern_registry = pattern_registry
        self._item_types = item_types
        self._logger = logger or logging.getLogger("warp_search.catalog.loader")

    @property
    def store(self) -> CatalogStore:
        return self._store

    def load(self) -> ParseResult:
        self._logger.info("catalog_load_started", extra={"source": self._source.describe()})
        try:
            document = self._source.read()
        except (MissingSourceError, SourceDecodeError):
            self._logger.error("catalog_source_unavailable", extra={"source": self._source.describe()})
            raise

        result = parse_catalog(
            document,
            self._legacy_patterns,
            pattern_registry=self._pattern_registry,
            item_types=self._item_types,
            logger=self._logger,
        )
        if not result.entries:
            self._logger.error(
                "catalog_empty",
                extra={"source": self._source.describe(), "skipped": result.skipped_count},
            )
            raise EmptyCatalogError(
                f"No usable entries in {self._source.describe()} (skipped {result.skipped_count} invalid entries)"
            )

        self._store.replace(result.entries)
        self._logger.info(
            "catalog_loaded",
            extra={"entries": len(result.entries), "skipped": result.skipped_count},
        )
        return result

    def reload(self) -> ParseResult:
        return self.load()
