# sc2k_decoder/segments/misc.py
from construct import Array, ConstructError, Int32sb
import logging

from ..exceptions import MalformedSegment
from ..models import CityBuilder
from .base import BaseSegment

logger = logging.getLogger(__name__)

# Word index of each classified field; the rest of MISC is not yet mapped
MISC_FIELDS = {
    'founded': 3,
    'days_elapsed': 4,
    'money': 5,
    'population': 20,
}


class MiscSegment(BaseSegment):
    """MISC (city statistics) interpreter.

    A sequence of big-endian signed 32-bit words.
    """

    TITLE = 'MISC'
    WORD_SIZE = 4
    MIN_WORDS = max(MISC_FIELDS.values()) + 1

    def apply(self, city: CityBuilder) -> None:
        try:
            words = Array(self.MIN_WORDS, Int32sb).parse(self.data)
        except ConstructError as e:
            raise MalformedSegment(
                f"expected at least {self.MIN_WORDS * self.WORD_SIZE} bytes, "
                f"got {len(self.data)}",
                self.TITLE,
            ) from e

        for name, index in MISC_FIELDS.items():
            city.attributes[name] = words[index]
        logger.debug(f"MISC: {len(self.data) // self.WORD_SIZE} words, "
                     f"{len(MISC_FIELDS)} classified")
