"""Split the post-header byte stream into segments."""
from typing import List, NamedTuple
import logging

from construct import Bytes, Int32ub, Struct

from ..compression import decompress_segment
from ..constants import SEGMENT_HEADER_SIZE, UNCOMPRESSED_SEGMENTS
from ..exceptions import MalformedFile, MalformedSegment

logger = logging.getLogger(__name__)

SegmentHeader = Struct(
    "title" / Bytes(4),
    "length" / Int32ub,
)


class RawSegment(NamedTuple):
    """One segment as found in the file."""
    title: str
    payload: bytes


def split_segments(data: bytes, decompress: bool = True) -> List[RawSegment]:
    """Split segment stream into (title, payload) pairs in file order.

    Args:
        data: Bytes following the 12-byte file header
        decompress: Run-length decode payloads, except ALTM and CNAM

    Returns:
        List of segments; duplicate titles are kept

    Raises:
        MalformedFile: If the stream ends inside a segment
        MalformedSegment: If a compressed payload is truncated
    """
    segments = []
    size = len(data)
    offset = 0

    while offset < size:
        if offset + SEGMENT_HEADER_SIZE > size:
            raise MalformedFile(
                f"Truncated segment header at offset {offset}: "
                f"{size - offset} of {SEGMENT_HEADER_SIZE} bytes"
            )

        header = SegmentHeader.parse(data[offset:offset + SEGMENT_HEADER_SIZE])
        title = header.title.decode('ascii', 'replace')
        start = offset + SEGMENT_HEADER_SIZE
        end = start + header.length

        if end > size:
            raise MalformedFile(
                f"Segment {title} at offset {offset} declares {header.length} bytes, "
                f"only {size - start} available"
            )

        payload = bytes(data[start:end])
        if decompress and title not in UNCOMPRESSED_SEGMENTS:
            try:
                payload = decompress_segment(payload)
            except MalformedSegment as e:
                raise MalformedSegment(str(e), title) from e

        segments.append(RawSegment(title, payload))
        offset = end

    logger.debug(f"Split {len(segments)} segments")
    return segments
