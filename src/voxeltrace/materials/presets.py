# materials/presets.py
from typing import Callable, Dict, List
from voxeltrace.core.color import Color
from voxeltrace.materials.material import Material

class MaterialPresets:
    """Fixed catalog of diorama surface materials."""

    @staticmethod
    def grass() -> Material:
        return Material(Color(0.4, 0.8, 0.2), 10.0, (0.9, 0.1), 1.0, 0.0, 0.0)

    @staticmethod
    def dirt() -> Material:
        return Material(Color(0.55, 0.4, 0.25), 5.0, (0.95, 0.05), 1.0, 0.0, 0.0)

    @staticmethod
    def cherry_wood() -> Material:
        return Material(Color(0.8, 0.5, 0.5), 15.0, (0.85, 0.15), 1.0, 0.0, 0.0)

    @staticmethod
    def cherry_leaves() -> Material:
        # Semi-transparent canopy
        return Material(Color(1.0, 0.7, 0.8), 8.0, (0.8, 0.2), 1.0, 0.3, 0.0)

    @staticmethod
    def water() -> Material:
        # The only preset that both reflects and refracts
        return Material(Color(0.3, 0.5, 0.8), 50.0, (0.3, 0.7), 1.33, 0.9, 0.4)

    @staticmethod
    def stone() -> Material:
        return Material(Color(0.5, 0.5, 0.5), 20.0, (0.8, 0.2), 1.0, 0.0, 0.1)

    @staticmethod
    def black() -> Material:
        return Material(Color.black(), 0.0, (0.0, 0.0), 1.0, 0.0, 0.0)

PRESETS: Dict[str, Callable[[], Material]] = {
    "grass": MaterialPresets.grass,
    "dirt": MaterialPresets.dirt,
    "cherry_wood": MaterialPresets.cherry_wood,
    "cherry_leaves": MaterialPresets.cherry_leaves,
    "water": MaterialPresets.water,
    "stone": MaterialPresets.stone,
    "black": MaterialPresets.black,
}

def preset_names() -> List[str]:
    return sorted(PRESETS)

def get_material(name: str) -> Material:
    """
    Looks up a preset by name.

    Raises:
        ValueError: If the name is not in the catalog.
    """
    try:
        factory = PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown material preset {name!r}; expected one of {', '.join(preset_names())}"
        ) from None
    return factory()
