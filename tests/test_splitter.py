"""
Tests for splitting the segment stream
"""

import struct

import pytest

from sc2k_decoder.exceptions import MalformedFile, MalformedSegment
from sc2k_decoder.parser.splitter import RawSegment, split_segments

from helpers import create_test_segment


class TestSplitSegments:
    """Test segment boundaries and ordering"""

    def test_single_segment(self):
        """Compressed payload is decompressed while splitting"""
        data = bytes([65, 66, 67, 68, 0, 0, 0, 4, 3, 1, 2, 3])
        assert split_segments(data) == [RawSegment('ABCD', bytes([1, 2, 3]))]

    def test_empty_stream(self):
        assert split_segments(b'') == []

    def test_file_order_and_duplicates(self):
        data = (
            create_test_segment(b'XTXT', bytes([1, 7])) +
            create_test_segment(b'XBLD', bytes([1, 8])) +
            create_test_segment(b'XTXT', bytes([1, 9]))
        )
        segments = split_segments(data)
        assert [s.title for s in segments] == ['XTXT', 'XBLD', 'XTXT']
        assert [s.payload for s in segments] == [b'\x07', b'\x08', b'\x09']

    def test_length_is_big_endian(self):
        payload = bytes([0x80, 0x00]) * 2
        data = b'ALTM' + struct.pack('>I', len(payload)) + payload + create_test_segment(b'CNAM', b'\x01a')
        segments = split_segments(data)
        assert len(segments) == 2
        assert segments[0].payload == payload
        assert segments[1].title == 'CNAM'

    @pytest.mark.parametrize('title', [b'ALTM', b'CNAM'])
    def test_uncompressed_segments_pass_through(self, title):
        payload = bytes([200, 1, 2, 3])  # not a valid RLE stream
        segments = split_segments(create_test_segment(title, payload))
        assert segments[0].payload == payload

    def test_decompress_disabled(self):
        data = create_test_segment(b'XZON', bytes([130, 0xF4]))
        assert split_segments(data, decompress=False)[0].payload == bytes([130, 0xF4])
        assert split_segments(data)[0].payload == bytes([0xF4]) * 3

    def test_empty_payload(self):
        assert split_segments(create_test_segment(b'XTHG', b'')) == [RawSegment('XTHG', b'')]


class TestMalformedStream:
    """Test truncation handling"""

    def test_partial_header(self):
        data = create_test_segment(b'XTXT', bytes([1, 0])) + b'XBL'
        with pytest.raises(MalformedFile):
            split_segments(data)

    def test_short_payload(self):
        data = b'XBIT' + struct.pack('>I', 10) + bytes([3, 1, 2, 3])
        with pytest.raises(MalformedFile):
            split_segments(data)

    def test_truncated_compressed_payload(self):
        data = create_test_segment(b'XTER', bytes([1, 0, 140]))
        with pytest.raises(MalformedSegment) as excinfo:
            split_segments(data)
        assert excinfo.value.title == 'XTER'
        assert str(excinfo.value).startswith('XTER:')
