# sc2k_decoder/segments/__init__.py
"""Segment interpreters package."""
from .base import BaseSegment
from .altm import AltmSegment
from .cnam import CnamSegment
from .xbit import XbitSegment, TileFlags
from .xbld import XbldSegment
from .xter import XterSegment, decode_terrain
from .xund import XundSegment, decode_underground
from .xzon import XzonSegment, ZoneCorner, decode_zone
from .xtxt import XtxtSegment
from .xlab import XlabSegment
from .misc import MiscSegment

SEGMENT_TYPES = (
    AltmSegment,
    CnamSegment,
    XbitSegment,
    XbldSegment,
    XterSegment,
    XundSegment,
    XzonSegment,
    XtxtSegment,
    XlabSegment,
    MiscSegment,
)

__all__ = [
    'BaseSegment',
    'AltmSegment',
    'CnamSegment',
    'XbitSegment',
    'XbldSegment',
    'XterSegment',
    'XundSegment',
    'XzonSegment',
    'XtxtSegment',
    'XlabSegment',
    'MiscSegment',
    'TileFlags',
    'ZoneCorner',
    'decode_terrain',
    'decode_underground',
    'decode_zone',
    'SEGMENT_TYPES',
]
