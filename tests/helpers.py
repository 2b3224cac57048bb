"""Builders for synthetic save files."""
import struct
from typing import Iterable, Tuple


def create_test_segment(title: bytes, data: bytes) -> bytes:
    """Create a segment with a big-endian length field"""
    return title + struct.pack('>I', len(data)) + data


def compress_literal(data: bytes) -> bytes:
    """Encode data as run-length literal chunks of at most 127 bytes"""
    out = bytearray()
    for start in range(0, len(data), 127):
        chunk = data[start:start + 127]
        out.append(len(chunk))
        out += chunk
    return bytes(out)


def create_save_file(segments: Iterable[Tuple[bytes, bytes]]) -> bytes:
    """Create a FORM/SCDH file; payloads must already be encoded"""
    body = b''.join(create_test_segment(title, data) for title, data in segments)
    return b'FORM' + struct.pack('>I', len(body) + 4) + b'SCDH' + body
