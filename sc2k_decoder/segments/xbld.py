# sc2k_decoder/segments/xbld.py
from ..models import CityBuilder
from .base import BaseSegment


class XbldSegment(BaseSegment):
    """XBLD (building) interpreter.

    One building code per tile. Names come from the caller-supplied
    building table; codes missing from it leave building_name unset.
    """

    TITLE = 'XBLD'

    def apply(self, city: CityBuilder) -> None:
        names = city.building_names
        for i, code in self._tile_values(self.data):
            city.update_tile(i, building_code=code, building_name=names.get(code))
