"""Static lookup tables consulted while parsing ActionIcons entries."""

from __future__ import annotations

from types import MappingProxyType
from typing import Protocol

from warp_search.models import DyeColor

# Legacy short banner codes -> canonical pattern ids.
LEGACY_PATTERN_IDS = MappingProxyType(
    {
        "b": "base",
        "bs": "stripe_bottom",
        "ts": "stripe_top",
        "ls": "stripe_left",
        "rs": "stripe_right",
        "cs": "stripe_center",
        "ms": "stripe_middle",
        "drs": "stripe_downright",
        "dls": "stripe_downleft",
        "ss": "small_stripes",
        "cr": "cross",
        "sc": "square_bottom_left",
        "ld": "diagonal_left",
        "rud": "diagonal_up_right",
        "lud": "diagonal_up_left",
        "rd": "diagonal_right",
        "vh": "half_vertical",
        "vhr": "half_vertical_right",
        "hh": "half_horizontal",
        "hhb": "half_horizontal_bottom",
        "bl": "square_bottom_left",
        "br": "square_bottom_right",
        "tl": "square_top_left",
        "tr": "square_top_right",
        "bt": "triangle_bottom",
        "tt": "triangle_top",
        "bts": "triangles_bottom",
        "tts": "triangles_top",
        "mc": "circle",
        "mr": "rhombus",
        "bo": "border",
        "cbo": "curly_border",
        "bri": "bricks",
        "gra": "gradient",
        "gru": "gradient_up",
        "cre": "creeper",
        "sku": "skull",
        "flo": "flower",
        "moj": "mojang",
        "glb": "globe",
        "pig": "piglin",
    }
)

VANILLA_BANNER_PATTERNS = frozenset(
    {
        "base",
        "square_bottom_left",
        "square_bottom_right",
        "square_top_left",
        "square_top_right",
        "stripe_bottom",
        "stripe_top",
        "stripe_left",
        "stripe_right",
        "stripe_center",
        "stripe_middle",
        "stripe_downright",
        "stripe_downleft",
        "small_stripes",
        "cross",
        "straight_cross",
        "triangle_bottom",
        "triangle_top",
        "triangles_bottom",
        "triangles_top",
        "diagonal_left",
        "diagonal_up_right",
        "diagonal_up_left",
        "diagonal_right",
        "circle",
        "rhombus",
        "half_vertical",
        "half_horizontal",
        "half_vertical_right",
        "half_horizontal_bottom",
        "border",
        "curly_border",
        "gradient",
        "gradient_up",
        "bricks",
        "globe",
        "creeper",
        "skull",
        "flower",
        "mojang",
        "piglin",
        "flow",
        "guster",
    }
)

# Item ids commonly used for warp icons. Hosts with a full item registry can
# pass their own set to the parser.
KNOWN_ITEM_TYPES = frozenset(
    {
        "air",
        "anvil",
        "apple",
        "arrow",
        "barrel",
        "barrier",
        "beacon",
        "bed",
        "bell",
        "black_banner",
        "blue_banner",
        "blue_ice",
        "book",
        "bookshelf",
        "bow",
        "bread",
        "brewing_stand",
        "brick",
        "bricks",
        "brown_banner",
        "cactus",
        "cake",
        "campfire",
        "cartography_table",
        "chest",
        "chorus_fruit",
        "clock",
        "coal",
        "coal_ore",
        "cobblestone",
        "compass",
        "conduit",
        "crafting_table",
        "creeper_head",
        "crimson_nylium",
        "cyan_banner",
        "dark_oak_sapling",
        "diamond",
        "diamond_block",
        "diamond_ore",
        "diamond_pickaxe",
        "diamond_sword",
        "dirt",
        "dragon_egg",
        "dragon_head",
        "elytra",
        "emerald",
        "emerald_block",
        "enchanted_book",
        "enchanting_table",
        "end_crystal",
        "end_portal_frame",
        "end_stone",
        "ender_chest",
        "ender_eye",
        "ender_pearl",
        "experience_bottle",
        "feather",
        "filled_map",
        "fishing_rod",
        "flint_and_steel",
        "flower_pot",
        "furnace",
        "glass",
        "glowstone",
        "gold_block",
        "gold_ingot",
        "golden_apple",
        "grass_block",
        "gray_banner",
        "green_banner",
        "hay_block",
        "heart_of_the_sea",
        "honeycomb",
        "hopper",
        "ice",
        "iron_block",
        "iron_ingot",
        "iron_pickaxe",
        "iron_sword",
        "jukebox",
        "lantern",
        "lava_bucket",
        "lectern",
        "light_blue_banner",
        "light_gray_banner",
        "lime_banner",
        "lodestone",
        "magenta_banner",
        "map",
        "melon",
        "minecart",
        "nether_star",
        "netherite_ingot",
        "netherrack",
        "note_block",
        "oak_boat",
        "oak_log",
        "oak_sapling",
        "obsidian",
        "orange_banner",
        "painting",
        "paper",
        "pink_banner",
        "player_head",
        "poppy",
        "prismarine",
        "pumpkin",
        "purple_banner",
        "quartz_block",
        "red_banner",
        "red_bed",
        "redstone",
        "redstone_block",
        "respawn_anchor",
        "saddle",
        "sand",
        "sandstone",
        "sea_lantern",
        "shield",
        "skeleton_skull",
        "slime_ball",
        "snow_block",
        "spawner",
        "sponge",
        "spruce_log",
        "spyglass",
        "stone",
        "stone_bricks",
        "sunflower",
        "tnt",
        "torch",
        "totem_of_undying",
        "trident",
        "water_bucket",
        "wheat",
        "white_banner",
        "wither_skeleton_skull",
        "writable_book",
        "yellow_banner",
        "zombie_head",
    }
)


class PatternRegistry(Protocol):
    """Resolves canonical banner pattern ids."""

    def resolve(self, identifier: str) -> str | None:
        """Return the canonical pattern value, or ``None`` if unknown."""


class VanillaPatternRegistry:
    """Pattern registry backed by the vanilla banner pattern set."""

    def __init__(self, patterns: frozenset[str] = VANILLA_BANNER_PATTERNS) -> None:
        self._patterns = patterns

    def resolve(self, identifier: str) -> str | None:
        key = identifier.strip().lower().removeprefix("minecraft:")
        return key if key in self._patterns else None


def match_item_type(value: str, known: frozenset[str] = KNOWN_ITEM_TYPES) -> str | None:
    """Normalise an item tag (``"Ender Pearl"``, ``"minecraft:ENDER_PEARL"``) and look it up."""
    key = value.strip().lower().removeprefix("minecraft:").replace(" ", "_")
    return key if key in known else None


def match_dye_color(value: str) -> DyeColor | None:
    try:
        return DyeColor(value.strip().lower())
    except ValueError:
        return None
