# sc2k_decoder/segments/cnam.py
from ..constants import MAX_CITY_NAME
from ..exceptions import MalformedSegment
from ..models import CityBuilder
from .base import BaseSegment, decode_text

LENGTH_MASK = 0x3F


class CnamSegment(BaseSegment):
    """CNAM (city name) interpreter: length byte followed by ASCII text."""

    TITLE = 'CNAM'

    def apply(self, city: CityBuilder) -> None:
        if not self.data:
            raise MalformedSegment("missing name length byte", self.TITLE)

        length = min(self.data[0] & LENGTH_MASK, MAX_CITY_NAME)
        if len(self.data) < 1 + length:
            raise MalformedSegment(
                f"name length {length} exceeds payload of {len(self.data)} bytes",
                self.TITLE,
            )
        city.attributes['city_name'] = decode_text(self.data[1:1 + length])
