"""Base segment interpreter."""
from typing import Iterable, Iterator, Tuple
import logging

from ..constants import TILE_COUNT
from ..models import CityBuilder

logger = logging.getLogger(__name__)


def decode_text(raw: bytes) -> str:
    """Decode a text field byte-for-byte; ASCII is unchanged."""
    return raw.decode('latin-1')


class BaseSegment:
    """Base class for segment interpreters.

    An interpreter receives one segment's decompressed payload and writes
    what it decodes into a CityBuilder. Interpreters never read fields set
    by other interpreters, so segments can be applied in any order.
    """

    TITLE = ''

    def __init__(self, data: bytes):
        """Initialize segment interpreter.

        Args:
            data: Decompressed segment payload
        """
        self.data = data

    def apply(self, city: CityBuilder) -> None:
        """Decode the payload into city.

        Raises:
            MalformedSegment: If a fixed-layout payload is truncated
        """
        raise NotImplementedError("Subclasses must implement apply()")

    def _tile_values(self, values: Iterable[int]) -> Iterator[Tuple[int, int]]:
        """Pair per-tile values with tile indices, stopping at the grid size."""
        for index, value in enumerate(values):
            if index >= TILE_COUNT:
                logger.warning(
                    f"{self.TITLE} segment holds more than {TILE_COUNT} tiles; "
                    "ignoring the rest"
                )
                return
            yield index, value
