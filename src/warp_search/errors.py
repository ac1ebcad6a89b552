"""Catalog-level failures surfaced to operators and callers."""


class CatalogError(RuntimeError):
    """Base class for whole-catalog failures."""


class MissingSourceError(CatalogError):
    """Raised when the ActionIcons document does not exist."""


class SourceDecodeError(CatalogError):
    """Raised when the ActionIcons document cannot be decoded as YAML."""


class EmptyCatalogError(CatalogError):
    """Raised when a load produced zero usable entries."""


class CatalogUnavailableError(CatalogError):
    """Raised when browsing or searching is requested while no entries are loaded."""
