# sc2k_decoder/__init__.py
"""SimCity 2000 save file decoder package."""
from .compression import decompress_segment
from .constants import WaterLevel
from .exceptions import MalformedFile, MalformedSegment, NotASaveFile, Sc2kDecodeError
from .models import DecodedCity, Terrain, Tile, Underground, WaterEdges, Zone
from .parser import Sc2kFileParser, SegmentRegistry, decode, is_save_file, split_segments

__version__ = '0.1.0'

__all__ = [
    'decode',
    'is_save_file',
    'decompress_segment',
    'split_segments',
    'Sc2kFileParser',
    'SegmentRegistry',
    'DecodedCity',
    'Tile',
    'Terrain',
    'Underground',
    'Zone',
    'WaterEdges',
    'WaterLevel',
    'Sc2kDecodeError',
    'NotASaveFile',
    'MalformedFile',
    'MalformedSegment',
]
