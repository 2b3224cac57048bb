# sc2k_decoder/segments/xtxt.py
from ..models import CityBuilder
from .base import BaseSegment


class XtxtSegment(BaseSegment):
    """XTXT (sign) interpreter. Zero means no sign on the tile."""

    TITLE = 'XTXT'

    def apply(self, city: CityBuilder) -> None:
        for i, value in self._tile_values(self.data):
            if value != 0:
                city.update_tile(i, sign=value)
