"""Tests for the variable-length offset encoding."""

import pytest

from var_offset import OFFSET_BITS, encode_offset, n_bytes_for_offset, read_offset


class TestEncodeOffset:
    """Tests for encode_offset."""

    def test_small_values(self):
        assert encode_offset(0) == b"\x00"
        assert encode_offset(1) == b"\x01"
        assert encode_offset(127) == b"\x7f"

    def test_multi_byte_values(self):
        assert encode_offset(128) == b"\x80\x01"
        assert encode_offset(300) == b"\xac\x02"
        assert encode_offset(16384) == b"\x80\x80\x01"

    def test_length_matches_n_bytes(self):
        for value in (0, 1, 127, 128, 16383, 16384, 2**35, 2**63 - 1):
            assert len(encode_offset(value)) == n_bytes_for_offset(value)

    def test_largest_representable(self):
        assert encode_offset(2**63 - 1) == b"\xff" * 8 + b"\x7f"

    def test_too_large(self):
        with pytest.raises(ValueError):
            encode_offset(2**63)

    def test_negative(self):
        with pytest.raises(ValueError):
            encode_offset(-1)


class TestReadOffset:
    """Tests for read_offset."""

    def test_single_byte(self):
        assert read_offset(b"\x05") == (1, 5)

    def test_reads_from_position(self):
        assert read_offset(b"\x00\xac\x02\x07", 1) == (3, 300)

    def test_ignores_trailing_data(self):
        assert read_offset(b"\x80\x01rest") == (2, 128)

    def test_canonical_round_trip(self):
        """Re-encoding a decoded value gives back the same bytes."""
        for value in (0, 5, 127, 128, 255, 4096, 2**21, 2**49 + 3, 2**63 - 1):
            encoded = encode_offset(value)
            assert read_offset(encoded) == (len(encoded), value)
            assert encode_offset(read_offset(encoded)[1]) == encoded

    def test_empty(self):
        assert read_offset(b"") is None

    def test_position_at_end(self):
        assert read_offset(b"\x01", 1) is None

    def test_truncated(self):
        assert read_offset(b"\x80") is None
        assert read_offset(b"\xff\xff\xff") is None

    def test_too_many_bytes(self):
        """A tenth byte would shift past the native integer width."""
        assert (OFFSET_BITS // 7) == 9
        assert read_offset(b"\xff" * 9 + b"\x01") is None

    def test_nine_bytes_allowed(self):
        assert read_offset(b"\xff" * 8 + b"\x7f") == (9, 2**63 - 1)

    def test_accepts_bytearray_and_memoryview(self):
        assert read_offset(bytearray(b"\xac\x02")) == (2, 300)
        assert read_offset(memoryview(b"\xac\x02")) == (2, 300)
