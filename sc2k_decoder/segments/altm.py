# sc2k_decoder/segments/altm.py
from construct import Array, Int16ub
import logging

from ..constants import ALTITUDE_STEP
from ..models import CityBuilder
from .base import BaseSegment

logger = logging.getLogger(__name__)

ALTITUDE_MASK = 0x001F
WATER_MASK = 0x0080


class AltmSegment(BaseSegment):
    """ALTM (altitude map) interpreter.

    One big-endian 16-bit word per tile. Stored uncompressed.
    """

    TITLE = 'ALTM'
    ENTRY_SIZE = 2

    def apply(self, city: CityBuilder) -> None:
        count = len(self.data) // self.ENTRY_SIZE
        if len(self.data) % self.ENTRY_SIZE:
            logger.warning(f"ALTM segment has odd length {len(self.data)}, dropping last byte")

        words = Array(count, Int16ub).parse(self.data[:count * self.ENTRY_SIZE])
        for i, word in self._tile_values(words):
            city.update_tile(
                i,
                altitude=(word & ALTITUDE_MASK) * ALTITUDE_STEP,
                has_water=(word & WATER_MASK) != 0,
            )
