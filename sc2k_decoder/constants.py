# sc2k_decoder/constants.py
from enum import Enum

# IFF container header
FORM_MAGIC = b'FORM'
SCDH_MAGIC = b'SCDH'
HEADER_SIZE = 12          # FORM, total length (unchecked), SCDH

SEGMENT_HEADER_SIZE = 8   # title + big-endian length

# City grid
GRID_WIDTH = 128
GRID_HEIGHT = 128
TILE_COUNT = GRID_WIDTH * GRID_HEIGHT

ALTITUDE_STEP = 50        # metres per altitude unit
MAX_CITY_NAME = 32
LABEL_COUNT = 256
LABEL_TEXT_SIZE = 24

# Segments stored without run-length compression
UNCOMPRESSED_SEGMENTS = frozenset({'ALTM', 'CNAM'})


class WaterLevel(str, Enum):
    """Wetness of a tile, indexed by the high nibble of an XTER byte."""
    DRY = 'dry'
    SUBMERGED = 'submerged'
    SHORE = 'shore'
    SURFACE = 'surface'
    WATERFALL = 'waterfall'
