# sc2k_decoder/segments/xzon.py
from enum import IntFlag

from ..models import CityBuilder, Zone
from .base import BaseSegment

ZONE_TYPE_MASK = 0x0F
CORNER_MASK = 0xF0


class ZoneCorner(IntFlag):
    """Corner bits of an XZON byte."""
    TOP_RIGHT = 0x10
    BOTTOM_RIGHT = 0x20
    BOTTOM_LEFT = 0x40
    TOP_LEFT = 0x80


def decode_zone(value: int) -> Zone:
    corners = ZoneCorner(value & CORNER_MASK)
    return Zone(
        top_left=bool(corners & ZoneCorner.TOP_LEFT),
        bottom_left=bool(corners & ZoneCorner.BOTTOM_LEFT),
        bottom_right=bool(corners & ZoneCorner.BOTTOM_RIGHT),
        top_right=bool(corners & ZoneCorner.TOP_RIGHT),
        type=value & ZONE_TYPE_MASK,
    )


class XzonSegment(BaseSegment):
    """XZON (zoning) interpreter, one byte per tile."""

    TITLE = 'XZON'

    def apply(self, city: CityBuilder) -> None:
        for i, value in self._tile_values(self.data):
            city.update_tile(i, zone=decode_zone(value))
