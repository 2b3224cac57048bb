# sc2k_decoder/segments/xbit.py
from enum import IntFlag

from ..models import CityBuilder
from .base import BaseSegment


class TileFlags(IntFlag):
    """Flags stored in the XBIT segment."""
    SALTWATER = 0x01
    UNKNOWN_02 = 0x02
    WATER_COVER = 0x04
    UNKNOWN_08 = 0x08
    WATER_SUPPLIED = 0x10
    PIPED = 0x20
    POWER_SUPPLIED = 0x40
    CONDUCTIVE = 0x80


def decode_flags(value: int) -> dict:
    """Split an XBIT byte into named tile fields."""
    flags = TileFlags(value)
    return {
        'saltwater': bool(flags & TileFlags.SALTWATER),
        'water_cover': bool(flags & TileFlags.WATER_COVER),
        'water_supplied': bool(flags & TileFlags.WATER_SUPPLIED),
        'piped': bool(flags & TileFlags.PIPED),
        'power_supplied': bool(flags & TileFlags.POWER_SUPPLIED),
        'conductive': bool(flags & TileFlags.CONDUCTIVE),
    }


class XbitSegment(BaseSegment):
    """XBIT (tile flags) interpreter, one byte per tile."""

    TITLE = 'XBIT'

    def apply(self, city: CityBuilder) -> None:
        for i, value in self._tile_values(self.data):
            city.update_tile(i, **decode_flags(value))
