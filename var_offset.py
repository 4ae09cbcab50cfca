"""Variable-length offsets used for every pointer field in the dictionary trie.

Each byte carries the next 7 least-significant bits of the value.  The top
bit (0x80) is set on every byte except the last one.
"""

from typing import Optional

OFFSET_BITS = 64  # width of the integer the decoder accumulates into


def read_offset(data, pos: int = 0) -> Optional[tuple[int, int]]:
    """Decode one offset starting at *pos*.

    Returns:
        ``(next_pos, value)`` where *next_pos* is the position just after the
        encoding, or ``None`` if the data ends before the final byte or the
        encoding needs more bits than ``OFFSET_BITS``.
    """
    value = 0
    end = len(data)
    byte_num = 0

    while pos + byte_num < end:
        if (byte_num + 1) * 7 > OFFSET_BITS:
            return None

        byte = data[pos + byte_num]
        value |= (byte & 0x7F) << (byte_num * 7)

        if byte & 0x80 == 0:
            return pos + byte_num + 1, value

        byte_num += 1

    return None


def n_bytes_for_offset(value: int) -> int:
    """Number of bytes the canonical encoding of *value* takes."""
    return max((value.bit_length() + 6) // 7, 1)


def encode_offset(value: int) -> bytes:
    """Return the canonical (minimal-length) encoding of *value*.

    Raises:
        ValueError: If *value* is negative or too large for ``read_offset``
            to decode again.
    """
    if value < 0:
        raise ValueError(f"Offset must be non-negative, got {value}")

    n_bytes = n_bytes_for_offset(value)
    if n_bytes * 7 > OFFSET_BITS:
        raise ValueError(f"Offset {value} does not fit in {OFFSET_BITS} bits")

    out = bytearray()
    for i in range(n_bytes):
        byte = (value >> (i * 7)) & 0x7F
        if i < n_bytes - 1:
            byte |= 0x80
        out.append(byte)
    return bytes(out)
