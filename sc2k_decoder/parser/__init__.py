# sc2k_decoder/parser/__init__.py
"""Save file parser module."""
from .file_parser import Sc2kFileParser, decode, is_save_file
from .registry import SegmentRegistry, default_registry
from .splitter import RawSegment, split_segments

__all__ = [
    'Sc2kFileParser',
    'decode',
    'is_save_file',
    'SegmentRegistry',
    'default_registry',
    'RawSegment',
    'split_segments',
]
