"""XTER (terrain) interpreter.

Each byte packs slope and water state, discriminated by range:

- below 0x3E: low nibble is the slope code, high nibble the water level
- 0x3E: flat waterfall
- 0x40 and above: flat surface water, low nibble is the water shape
"""
from typing import Optional

from ..constants import WaterLevel
from ..models import CityBuilder, Terrain
from .base import BaseSegment
from .tables import FLAT, SLOPE_MAP, WATER_EDGE_MAP, WATER_LEVELS

WATERFALL = 0x3E
SURFACE_WATER = 0x40


def decode_terrain(value: int) -> Optional[Terrain]:
    """Decode one XTER byte; returns None for the unused value 0x3F."""
    if value < WATERFALL:
        return Terrain(
            slope=SLOPE_MAP.get(value & 0x0F),
            water_level=WATER_LEVELS[(value >> 4) & 0x0F],
        )
    if value == WATERFALL:
        return Terrain(slope=FLAT, water_level=WaterLevel.WATERFALL)
    if value >= SURFACE_WATER:
        return Terrain(
            slope=FLAT,
            water_level=WaterLevel.SURFACE,
            surface_water_edges=WATER_EDGE_MAP.get(value & 0x0F),
        )
    return None


class XterSegment(BaseSegment):
    TITLE = 'XTER'

    def apply(self, city: CityBuilder) -> None:
        for i, value in self._tile_values(self.data):
            city.update_tile(i, terrain=decode_terrain(value))
