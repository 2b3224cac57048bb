"""XUND (underground) interpreter."""
from typing import Optional

from ..models import CityBuilder, Underground
from .base import BaseSegment
from .tables import FLAT, SLOPE_MAP

SLOPED_LIMIT = 0x1E
SUBWAY_LEFT_RIGHT = 0x1F
SUBWAY_TOP_BOTTOM = 0x20
SUBWAY_STATION = 0x23


def decode_underground(value: int) -> Optional[Underground]:
    """Decode one XUND byte.

    Sloped subway (high nibble 0x0) and sloped pipes (high nibble 0x1) are
    stored below 0x1E. 0x1F and 0x20 are subway/pipe crossings. Values
    outside the documented ranges decode to None.
    """
    if value < SLOPED_LIMIT:
        kind = value & 0xF0
        return Underground(
            slope=SLOPE_MAP.get(value & 0x0F),
            subway=kind == 0x00,
            pipes=kind == 0x10,
        )
    if value in (SUBWAY_LEFT_RIGHT, SUBWAY_TOP_BOTTOM):
        return Underground(
            slope=FLAT,
            subway=True,
            pipes=True,
            subway_left_right=value == SUBWAY_LEFT_RIGHT,
        )
    if value == SUBWAY_STATION:
        return Underground(slope=FLAT, station=True)
    return None


class XundSegment(BaseSegment):
    TITLE = 'XUND'

    def apply(self, city: CityBuilder) -> None:
        for i, value in self._tile_values(self.data):
            city.update_tile(i, underground=decode_underground(value))
