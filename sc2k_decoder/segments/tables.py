"""Lookup tables shared by the terrain and underground segments."""
from types import MappingProxyType
from typing import Tuple

from ..constants import WaterLevel
from ..models import WaterEdges

# Codes 0xE and 0xF are not defined
SLOPE_MAP = MappingProxyType({
    0x0: (0, 0, 0, 0),
    0x1: (1, 1, 0, 0),
    0x2: (0, 1, 0, 1),
    0x3: (0, 0, 1, 1),
    0x4: (1, 0, 1, 0),
    0x5: (1, 1, 0, 1),
    0x6: (0, 1, 1, 1),
    0x7: (1, 0, 1, 1),
    0x8: (1, 1, 1, 0),
    0x9: (0, 1, 0, 0),
    0xA: (0, 0, 0, 1),
    0xB: (0, 0, 1, 0),
    0xC: (1, 0, 0, 0),
    0xD: (1, 1, 1, 1),
})

FLAT = SLOPE_MAP[0x0]

WATER_EDGE_MAP = MappingProxyType({
    0x0: WaterEdges(top=False, left=True, right=True, bottom=False),   # left-right canal
    0x1: WaterEdges(top=True, left=False, right=False, bottom=True),   # top-bottom canal
    0x2: WaterEdges(top=False, left=False, right=True, bottom=False),  # bay open right
    0x3: WaterEdges(top=False, left=True, right=False, bottom=False),  # bay open left
    0x4: WaterEdges(top=True, left=False, right=False, bottom=False),  # bay open top
    0x5: WaterEdges(top=False, left=False, right=False, bottom=True),  # bay open bottom
})

WATER_LEVELS: Tuple[WaterLevel, ...] = (
    WaterLevel.DRY,
    WaterLevel.SUBMERGED,
    WaterLevel.SHORE,
    WaterLevel.SURFACE,
    WaterLevel.WATERFALL,
)
