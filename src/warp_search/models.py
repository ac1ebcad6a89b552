from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_ITEM_TYPE = "ender_pearl"


class SortMode(str, Enum):
    """Ordering applied to a browsing session's result set."""

    ALPHABETICAL = "alphabetical"
    DISTANCE = "distance"

    def toggled(self) -> SortMode:
        return SortMode.DISTANCE if self is SortMode.ALPHABETICAL else SortMode.ALPHABETICAL


class DyeColor(str, Enum):
    WHITE = "white"
    ORANGE = "orange"
    MAGENTA = "magenta"
    LIGHT_BLUE = "light_blue"
    YELLOW = "yellow"
    LIME = "lime"
    PINK = "pink"
    GRAY = "gray"
    LIGHT_GRAY = "light_gray"
    CYAN = "cyan"
    PURPLE = "purple"
    BLUE = "blue"
    BROWN = "brown"
    GREEN = "green"
    RED = "red"
    BLACK = "black"


@dataclass(frozen=True, slots=True)
class DecorationLayer:
    """One banner layer: dye colour plus canonical pattern id."""

    color: DyeColor
    pattern: str


@dataclass(frozen=True, slots=True)
class Position:
    x: float
    y: float
    z: float
    world: str | None = None


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """A single warp icon loaded from the ActionIcons document.

    Instances are immutable: sequence fields are converted to tuples on
    construction, so later changes to the parse buffers never leak in.
    """

    name: str
    destination_id: str
    display_label: str | None = None
    description_lines: tuple[str, ...] = ()
    usage_count: int = 0
    category: str = ""
    icon_hint: str | None = None
    decoration_layers: tuple[DecorationLayer, ...] | None = None
    item_type: str = DEFAULT_ITEM_TYPE

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("CatalogEntry.name must be non-empty")
        if not self.destination_id:
            raise ValueError("CatalogEntry.destination_id must be non-empty")
        if self.usage_count < 0:
            raise ValueError("CatalogEntry.usage_count must be non-negative")

        if self.display_label is None:
            object.__setattr__(self, "display_label", self.name)
        object.__setattr__(self, "description_lines", tuple(self.description_lines))
        if self.decoration_layers is not None:
            layers = tuple(self.decoration_layers)
            object.__setattr__(self, "decoration_layers", layers or None)

    def __str__(self) -> str:
        return f"CatalogEntry(name={self.name!r}, destination_id={self.destination_id!r}, usage_count={self.usage_count})"
