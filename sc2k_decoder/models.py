"""Decoded city structures.

Segments are applied to a mutable CityBuilder while a file is decoded; the
builder is then frozen into a DecodedCity. No single segment defines a whole
Tile, so every tile field starts out as None and is filled in by whichever
segments the file contains.
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Tuple

from .constants import GRID_HEIGHT, GRID_WIDTH, LABEL_COUNT, TILE_COUNT, WaterLevel

# Corner height deltas: top-left, top-right, bottom-left, bottom-right
Slope = Tuple[int, int, int, int]


class WaterEdges(NamedTuple):
    """Sides of a surface water tile open to adjoining water."""
    top: bool
    left: bool
    right: bool
    bottom: bool


@dataclass(frozen=True)
class Terrain:
    """XTER record."""
    slope: Optional[Slope]
    water_level: WaterLevel
    surface_water_edges: Optional[WaterEdges] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert terrain to dictionary."""
        result = {
            'slope': list(self.slope) if self.slope is not None else None,
            'water_level': self.water_level.value,
        }
        if self.surface_water_edges is not None:
            result['surface_water_edges'] = self.surface_water_edges._asdict()
        return result


@dataclass(frozen=True)
class Underground:
    """XUND record."""
    slope: Optional[Slope]
    subway: bool = False
    pipes: bool = False
    subway_left_right: Optional[bool] = None
    station: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert underground record to dictionary."""
        result = {
            'slope': list(self.slope) if self.slope is not None else None,
            'subway': self.subway,
            'pipes': self.pipes,
        }
        if self.subway_left_right is not None:
            result['subway_left_right'] = self.subway_left_right
        if self.station is not None:
            result['station'] = self.station
        return result


@dataclass(frozen=True)
class Zone:
    """XZON record: corner flags of a zoned lot plus the zone type."""
    top_left: bool
    bottom_left: bool
    bottom_right: bool
    top_right: bool
    type: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'top_left': self.top_left,
            'top_right': self.top_right,
            'bottom_left': self.bottom_left,
            'bottom_right': self.bottom_right,
            'type': self.type,
        }


@dataclass(frozen=True)
class Tile:
    """One cell of the city grid."""
    altitude: Optional[int] = None
    has_water: Optional[bool] = None
    saltwater: Optional[bool] = None
    water_cover: Optional[bool] = None
    water_supplied: Optional[bool] = None
    piped: Optional[bool] = None
    power_supplied: Optional[bool] = None
    conductive: Optional[bool] = None
    building_code: Optional[int] = None
    building_name: Optional[str] = None
    terrain: Optional[Terrain] = None
    underground: Optional[Underground] = None
    zone: Optional[Zone] = None
    sign: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert tile to dictionary, leaving out unset fields."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if hasattr(value, 'to_dict'):
                value = value.to_dict()
            result[f.name] = value
        return result


TILE_FIELDS = frozenset(f.name for f in fields(Tile))


def _empty_labels() -> Tuple[str, ...]:
    return ('',) * LABEL_COUNT


@dataclass(frozen=True)
class DecodedCity:
    """Structured contents of one save file."""
    tiles: Tuple[Tile, ...]
    city_name: Optional[str] = None
    founded: Optional[int] = None
    days_elapsed: Optional[int] = None
    money: Optional[int] = None
    population: Optional[int] = None
    labels: Tuple[str, ...] = field(default_factory=_empty_labels)

    def tile_at(self, row: int, col: int) -> Tile:
        """Return the tile at grid position (row, col)."""
        if not (0 <= row < GRID_HEIGHT and 0 <= col < GRID_WIDTH):
            raise IndexError(f"Tile position ({row}, {col}) outside the city grid")
        return self.tiles[row * GRID_WIDTH + col]

    def to_dict(self) -> Dict[str, Any]:
        """Convert city to JSON-serializable dictionary."""
        return {
            'city_name': self.city_name,
            'founded': self.founded,
            'days_elapsed': self.days_elapsed,
            'money': self.money,
            'population': self.population,
            'labels': list(self.labels),
            'tiles': [tile.to_dict() for tile in self.tiles],
        }


class CityBuilder:
    """In-progress city state that segment interpreters write into.

    Tiles are held as plain dicts of Tile field values so that several
    segments can contribute to the same tile; build() freezes them.
    """

    def __init__(self, building_names: Optional[Mapping[int, str]] = None):
        self.building_names: Mapping[int, str] = building_names or {}
        self.attributes: Dict[str, Any] = {}
        self.tiles: List[Dict[str, Any]] = [{} for _ in range(TILE_COUNT)]

    def update_tile(self, index: int, **values: Any) -> None:
        """Set fields on one tile, later writes win."""
        unknown = set(values) - TILE_FIELDS
        if unknown:
            raise AttributeError(f"Unknown tile fields: {sorted(unknown)}")
        self.tiles[index].update(values)

    def build(self) -> DecodedCity:
        """Freeze the accumulated state into a DecodedCity."""
        attributes = dict(self.attributes)
        if 'labels' in attributes:
            attributes['labels'] = tuple(attributes['labels'])
        return DecodedCity(
            tiles=tuple(Tile(**values) for values in self.tiles),
            **attributes
        )
