"""Read-only dictionary backed by a flattened trie blob."""

import logging
from typing import Iterator, Optional

from codec_errors import DictionaryCorrupt
from storage import read_bytes
from trie_node import descend, extract_or_raise, iter_siblings, next_sibling, root_children
from word_codec import WORD_INDEX_BITS, compress_word, decompress_word

log = logging.getLogger(__name__)


class Dictionary:
    """Word membership and word-index codec over an immutable trie blob.

    Two ways to create:

    * ``Dictionary(data)``     - wrap bytes already in memory (or an mmap).
    * ``Dictionary.load(url)`` - read the blob from storage.

    The blob is never modified, so one instance can be shared between
    threads without locking.
    """

    def __init__(self, data) -> None:
        """Wrap *data*, checking that the root node is usable.

        Raises:
            DictionaryCorrupt: If the root can't be decoded or has no
                children.
        """
        self._data = data
        self._first = root_children(data)

    @classmethod
    def load(cls, url: str, storage_options: Optional[dict] = None) -> "Dictionary":
        """Load a dictionary blob from a file.

        Args:
            url: Path or URL to load from.
            storage_options: fsspec options. Set compression='gzip' if compressed.
        """
        data = read_bytes(url, storage_options)
        log.info("Loaded %s byte dictionary from %s", f"{len(data):,}", url)
        return cls(data)

    @property
    def data(self):
        return self._data

    # ------------------------------------------------------------------ #
    #  Membership                                                          #
    # ------------------------------------------------------------------ #

    def contains(self, word: str) -> bool:
        """Return True if *word* (lower-cased) is stored in the dictionary.

        Unlike ``compress`` this places no limit on the word length.

        Raises:
            DictionaryCorrupt: If the blob is structurally invalid.
        """
        letters = word.lower()
        if "\0" in letters:
            return False

        data = self._data
        pos = self._first

        for letter in letters + "\0":
            for node in iter_siblings(data, pos):
                if node.letter == letter:
                    break
            else:
                return False

            if node.is_terminator:
                return True
            if node.child_offset == 0:
                return False
            pos = descend(data, node)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    # ------------------------------------------------------------------ #
    #  Word index codec                                                    #
    # ------------------------------------------------------------------ #

    def compress(self, word: str, index_bits: int = WORD_INDEX_BITS) -> int:
        """Return the word index of *word*.  See ``word_codec.compress_word``."""
        return compress_word(self._data, word, index_bits)

    def extract_word(self, index: int, index_bits: int = WORD_INDEX_BITS) -> str:
        """Return the word named by *index*.  See ``word_codec.decompress_word``."""
        return decompress_word(self._data, index, index_bits)

    # ------------------------------------------------------------------ #
    #  Enumeration                                                         #
    # ------------------------------------------------------------------ #

    def words(self) -> Iterator[str]:
        """Yield every stored word in trie order (depth first)."""
        data = self._data
        # Each entry: (position of the next node to visit, prefix above it)
        stack: list[tuple[int, str]] = [(self._first, "")]

        while stack:
            pos, prefix = stack.pop()
            node = extract_or_raise(data, pos)

            if node.sibling_offset != 0:
                stack.append((next_sibling(data, node), prefix))

            if node.is_terminator:
                yield prefix
            elif node.child_offset != 0:
                stack.append((descend(data, node), prefix + node.letter))
            else:
                raise DictionaryCorrupt(
                    f"{prefix + node.letter!r} ends without a terminator"
                )

    def __iter__(self) -> Iterator[str]:
        return self.words()

    def __repr__(self) -> str:
        return f"Dictionary({len(self._data)} bytes)"
