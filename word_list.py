"""Word list files: flat arrays of little-endian word indices."""

import array
import logging
import random
import sys
from typing import Iterable, Iterator, Optional

from codec_errors import WordListFramingError
from storage import read_bytes, write_bytes

log = logging.getLogger(__name__)

# Entry width in bytes -> array typecode
_TYPECODES = {4: "I", 8: "Q"}


def _typecode(entry_width: int) -> str:
    try:
        return _TYPECODES[entry_width]
    except KeyError:
        raise ValueError(
            f"Unsupported entry width {entry_width} (expected one of {sorted(_TYPECODES)})"
        ) from None


class WordList:
    """Sequence of word indices, one per accepted word.

    The on-disk form has no header and no delimiters; the number of entries
    is the file length divided by ``entry_width``.
    """

    def __init__(self, indices: Iterable[int] = (), entry_width: int = 8) -> None:
        self.entry_width = entry_width
        self._indices = array.array(_typecode(entry_width), indices)

    # ------------------------------------------------------------------ #
    #  Serialization                                                       #
    # ------------------------------------------------------------------ #

    @classmethod
    def from_bytes(cls, data: bytes, entry_width: int = 8) -> "WordList":
        """Parse a word list file.

        Raises:
            WordListFramingError: If ``len(data)`` is not a multiple of
                *entry_width*.  Nothing is decoded in that case.
        """
        _typecode(entry_width)
        if len(data) % entry_width != 0:
            raise WordListFramingError(
                f"{len(data)} bytes is not a multiple of {entry_width}"
            )

        word_list = cls(entry_width=entry_width)
        word_list._indices.frombytes(data)
        if sys.byteorder != "little":
            word_list._indices.byteswap()
        return word_list

    def to_bytes(self) -> bytes:
        _idx = self._indices
        if sys.byteorder != "little":
            _idx = array.array(_idx.typecode, _idx)
            _idx.byteswap()
        return _idx.tobytes()

    @classmethod
    def load(
        cls,
        url: str,
        storage_options: Optional[dict] = None,
        entry_width: int = 8,
    ) -> "WordList":
        """Load a word list file.

        Args:
            url: Path or URL to load from.
            storage_options: fsspec options. Set compression='gzip' if compressed.
            entry_width: Size of one entry in bytes (8, or 4 for 32-bit lists).
        """
        word_list = cls.from_bytes(read_bytes(url, storage_options), entry_width)
        log.info("Loaded %s word indices from %s", f"{len(word_list):,}", url)
        return word_list

    def serialize(self, url: str, storage_options: Optional[dict] = None) -> None:
        """Write the word list to *url*.

        Args:
            url: Path or URL where to save.
            storage_options: fsspec options. Set compression='gzip' for gzip.
        """
        write_bytes(url, self.to_bytes(), storage_options)

    # ------------------------------------------------------------------ #
    #  Sequence interface                                                  #
    # ------------------------------------------------------------------ #

    def append(self, index: int) -> None:
        self._indices.append(index)

    def __getitem__(self, i: int) -> int:
        return self._indices[i]

    def __iter__(self) -> Iterator[int]:
        return iter(self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordList):
            return NotImplemented
        return self.entry_width == other.entry_width and self._indices == other._indices

    def __repr__(self) -> str:
        return f"WordList({len(self)} words, entry_width={self.entry_width})"

    # ------------------------------------------------------------------ #
    #  Picking words                                                       #
    # ------------------------------------------------------------------ #

    def pick_word(self, dictionary, rng: Optional[random.Random] = None) -> str:
        """Decode a randomly chosen entry with *dictionary*.

        Raises:
            IndexError: If the word list is empty.
            CodecError: If the chosen entry can't be decoded.
        """
        if not self._indices:
            raise IndexError("Cannot pick a word from an empty word list")
        rng = rng or random
        index = self._indices[rng.randrange(len(self._indices))]
        return dictionary.extract_word(index, self.entry_width * 8)
