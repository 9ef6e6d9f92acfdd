from voxeltrace.materials.material import Material
from voxeltrace.materials.presets import MaterialPresets, get_material

__all__ = ["Material", "MaterialPresets", "get_material"]
