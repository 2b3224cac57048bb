"""Save file decoder."""
from typing import Iterable, Mapping, Optional
import logging

from construct import Const, ConstructError, Int32ub, Struct

from ..constants import FORM_MAGIC, HEADER_SIZE, SCDH_MAGIC
from ..exceptions import NotASaveFile
from ..models import CityBuilder, DecodedCity
from .registry import SegmentRegistry, default_registry
from .splitter import RawSegment, split_segments

logger = logging.getLogger(__name__)

FileHeader = Struct(
    "form" / Const(FORM_MAGIC),
    "length" / Int32ub,   # historically the total file length, not checked
    "scdh" / Const(SCDH_MAGIC),
)


def is_save_file(data: bytes) -> bool:
    """Check the IFF and SimCity 2000 header magic."""
    try:
        FileHeader.parse(data[:HEADER_SIZE])
    except ConstructError:
        return False
    return True


class Sc2kFileParser:
    """Main parser for SimCity 2000 save files."""

    def __init__(self,
                 building_names: Optional[Mapping[int, str]] = None,
                 registry: Optional[SegmentRegistry] = None):
        """Initialize parser.

        Args:
            building_names: Building code to display name table, read-only
            registry: Segment interpreters to use; defaults to all known ones
        """
        self.building_names = building_names or {}
        self.registry = registry if registry is not None else default_registry()

    def parse(self, data: bytes) -> DecodedCity:
        """Decode a complete save file.

        Raises:
            NotASaveFile: If the header magic does not match
            MalformedFile: If the segment stream is truncated
            MalformedSegment: If a segment payload is truncated
        """
        if not is_save_file(data):
            raise NotASaveFile(
                f"Missing {FORM_MAGIC.decode()}/{SCDH_MAGIC.decode()} header "
                f"(got {bytes(data[:HEADER_SIZE])!r})"
            )

        segments = split_segments(data[HEADER_SIZE:])
        return self.interpret_segments(segments)

    def interpret_segments(self, segments: Iterable[RawSegment]) -> DecodedCity:
        """Apply decompressed segments in order and build the city."""
        city = CityBuilder(self.building_names)

        for title, payload in segments:
            parser_class = self.registry.get_parser(title)
            if parser_class is None:
                logger.debug(f"No interpreter registered for segment {title}, skipping")
                continue

            logger.debug(f"Applying {title} segment ({len(payload)} bytes)")
            parser_class(payload).apply(city)

        return city.build()


def decode(data: bytes,
           building_names: Optional[Mapping[int, str]] = None) -> DecodedCity:
    """Decode save file bytes into a DecodedCity."""
    return Sc2kFileParser(building_names=building_names).parse(data)
