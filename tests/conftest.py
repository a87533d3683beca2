"""
Pytest configuration and fixtures for vendor-regex tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing vendor_regex
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from vendor_regex.matcher import compile_pattern  # noqa: E402


GEM_NAMES = [
    "Fireball",
    "Vaal Fireball",
    "Frostbolt",
    "Frost Bomb",
    "Frost Blades",
    "Frostbite",
    "Arc",
    "Arctic Armour",
    "Ice Nova",
    "Ice Shot",
    "Ice Spear",
    "Ice Crash",
    "Spectral Throw",
    "Vaal Breach",
    "Vaal Grace",
    "Fire Trap",
    "Flame Dash",
    "Flameblast",
    "Flame Wall",
    "Molten Strike",
    "Lightning Arrow",
    "Lightning Strike",
    "Leap Slam",
    "Cleave",
    "Ground Slam",
    "Added Cold Damage Support",
    "Added Fire Damage Support",
    "Cold Snap",
    "Storm Brand",
    "Storm Call",
    "Shield Charge",
    "Split Arrow",
    "Rain of Arrows",
    "Burning Arrow",
    "Caustic Arrow",
    "Toxic Rain",
    "Blade Vortex",
    "Bladefall",
    "Sunder",
    "Earthquake",
]

DESCRIPTIONS = [
    "Unleashes a ball of fire towards a target which explodes, damaging nearby enemies.",
    "Fires a missile that explodes in a burst of cold, damaging enemies around it.",
    "An icy blast explodes around the player, dealing cold damage to enemies.",
    "Throws a spectral copy of your melee weapon.",
    "Performs a leaping slam, knocking back enemies where you land.",
]

BASE_NAMES = [
    "Iron Ring",
    "Coral Amulet",
    "Leather Belt",
    "Rusted Sword",
    "Crude Bow",
]


@pytest.fixture
def gem_names() -> list[str]:
    """Sibling catalog of gem names."""
    return list(GEM_NAMES)


@pytest.fixture
def descriptions() -> list[str]:
    """A handful of gem description texts."""
    return list(DESCRIPTIONS)


@pytest.fixture
def base_names() -> list[str]:
    """A handful of equipment base names."""
    return list(BASE_NAMES)


@pytest.fixture(autouse=True)
def clear_matcher_cache():
    """Keep matcher memoization from leaking between tests."""
    compile_pattern.cache_clear()
    yield
    compile_pattern.cache_clear()
