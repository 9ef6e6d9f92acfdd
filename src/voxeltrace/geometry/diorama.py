# geometry/diorama.py
import logging
import random
from typing import List, Set, Tuple
from voxeltrace.core.vector import Vector3
from voxeltrace.geometry.cube import Cube
from voxeltrace.geometry.world import Scene
from voxeltrace.materials.presets import MaterialPresets

logger = logging.getLogger(__name__)

GROUND_RANGE = range(-5, 6)
RIVER_ROWS = range(2, 5)

ROCK_SIZE = 0.5
FLOWER_SIZE = 0.3

def create_diorama() -> Scene:
    """
    Builds the cherry tree diorama out of unit cubes.

    Layout: an 11x11 ground floor at y=0 with a water river across
    z in [2, 4], a cherry tree at the origin with a 5x5x3 leaf canopy, a
    small dirt hill and two stones. The cube order is fixed so repeated
    builds produce identical scenes.
    """
    scene = Scene()
    grass = MaterialPresets.grass()
    water = MaterialPresets.water()
    wood = MaterialPresets.cherry_wood()
    leaves = MaterialPresets.cherry_leaves()
    dirt = MaterialPresets.dirt()
    stone = MaterialPresets.stone()

    # Grass floor, leaving the river bed free so the water is not hidden
    for x in GROUND_RANGE:
        for z in GROUND_RANGE:
            if z not in RIVER_ROWS:
                scene.add(Cube(Vector3(x, 0, z), 1.0, grass))

    # Trunk
    for y in range(1, 5):
        scene.add(Cube(Vector3(0, y, 0), 1.0, wood))

    # Canopy, skipping the cells the trunk passes through
    for x in range(-2, 3):
        for z in range(-2, 3):
            for y in range(4, 7):
                if not (x == 0 and z == 0 and y < 6):
                    scene.add(Cube(Vector3(x, y, z), 1.0, leaves))

    # River
    for x in GROUND_RANGE:
        for z in RIVER_ROWS:
            scene.add(Cube(Vector3(x, 0, z), 1.0, water))

    # Dirt hill
    for y in range(1, 3):
        for x in range(3, 5):
            scene.add(Cube(Vector3(x, y, -3), 1.0, dirt))

    scene.add(Cube(Vector3(-3, 1, -3), 1.0, stone))
    scene.add(Cube(Vector3(-4, 1, -2), 1.0, stone))

    logger.info("Diorama built with %d cubes", len(scene))
    return scene

def _occupied_columns(scene: Scene) -> Set[Tuple[int, int]]:
    """(x, z) cells that already have something standing on the ground."""
    columns = set()
    for obj in scene:
        center = obj.center
        if center.y >= 1:
            columns.add((round(center.x), round(center.z)))
    return columns

def free_grass_cells(scene: Scene) -> List[Tuple[int, int]]:
    occupied = _occupied_columns(scene)
    return [
        (x, z)
        for x in GROUND_RANGE
        for z in GROUND_RANGE
        if z not in RIVER_ROWS and (x, z) not in occupied
    ]

def scatter_decorations(scene: Scene, seed: int, count: int) -> List[Cube]:
    """
    Places small rocks and flowers on free grass cells.

    Uses its own random.Random(seed), never the global generator, so the same
    seed and count always give the same decorations. At most one decoration
    goes on a cell; count is capped by the number of free cells.

    Returns:
        The cubes that were added, in insertion order.
    """
    rng = random.Random(seed)
    cells = free_grass_cells(scene)
    picks = rng.sample(cells, min(count, len(cells)))

    rock = MaterialPresets.stone()
    flower = MaterialPresets.cherry_leaves()
    added = []
    for x, z in picks:
        # Sit on top of the grass block (top face at y=0.5)
        if rng.random() < 0.5:
            size, material = ROCK_SIZE, rock
        else:
            size, material = FLOWER_SIZE, flower
        jitter_x = rng.uniform(-0.25, 0.25)
        jitter_z = rng.uniform(-0.25, 0.25)
        cube = Cube(Vector3(x + jitter_x, 0.5 + size / 2.0, z + jitter_z), size, material)
        added.append(cube)

    scene.extend(added)
    logger.debug("Scattered %d decorations with seed %d", len(added), seed)
    return added
