"""Run-length decoding of segment payloads.

Most segments are stored as a series of chunks of two kinds. A chunk whose
first byte is 1..127 is a literal run: the first byte counts how many data
bytes follow. A chunk whose first byte is 129..255 is a repeat run: the
following single data byte is repeated (first byte - 127) times.
"""
import logging

from .exceptions import MalformedSegment

logger = logging.getLogger(__name__)

REPEAT_THRESHOLD = 128
REPEAT_BIAS = 127


def decompress_segment(data: bytes) -> bytes:
    """Decompress one segment payload.

    Args:
        data: Compressed payload

    Returns:
        Newly allocated decompressed bytes

    Raises:
        MalformedSegment: If a chunk needs more bytes than remain
    """
    output = bytearray()
    size = len(data)
    offset = 0

    while offset < size:
        control = data[offset]
        offset += 1

        if control < REPEAT_THRESHOLD:
            if control == 0:
                logger.debug(f"Empty literal chunk at offset {offset - 1}")
            end = offset + control
            if end > size:
                raise MalformedSegment(
                    f"Literal chunk at offset {offset - 1} needs {control} bytes, "
                    f"only {size - offset} left"
                )
            output += data[offset:end]
            offset = end
        else:
            if control == REPEAT_THRESHOLD:
                logger.debug(f"Repeat chunk with control byte 0x80 at offset {offset - 1}")
            if offset >= size:
                raise MalformedSegment(
                    f"Repeat chunk at offset {offset - 1} has no data byte"
                )
            output += bytes([data[offset]]) * (control - REPEAT_BIAS)
            offset += 1

    return bytes(output)
