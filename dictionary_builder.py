"""Mutable builder that serializes a word list into a dictionary blob.

The blob layout is described in ``trie_node``.  Sibling lists are written
sorted by code point, so the ``"\\0"`` terminator is always the first entry
of a list.  The builder never touches an existing blob; ``Dictionary`` only
ever reads one.
"""

from typing import Iterable, Optional

from storage import write_bytes
from var_offset import encode_offset

ROOT_LETTER = "*"


class _BuildNode:
    __slots__ = ("letter", "children")

    def __init__(self, letter: str) -> None:
        self.letter = letter
        self.children: dict[str, "_BuildNode"] = {}


class DictionaryBuilder:
    """Collect words, then write them out as a flattened trie."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _BuildNode(ROOT_LETTER)
        self._n_words = 0
        self.add_words(words)

    def add_word(self, word: str) -> None:
        """Add *word*, lower-cased.  Adding a word twice has no effect.

        Raises:
            ValueError: If the word contains a NUL character.
        """
        word = word.lower()
        if "\0" in word:
            raise ValueError(f"Word contains a NUL character: {word!r}")

        node = self._root
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                child = _BuildNode(letter)
                node.children[letter] = child
            node = child

        if "\0" not in node.children:
            node.children["\0"] = _BuildNode("\0")
            self._n_words += 1

    def add_words(self, words: Iterable[str]) -> None:
        for word in words:
            self.add_word(word)

    def __len__(self) -> int:
        return self._n_words

    # ------------------------------------------------------------------ #
    #  Serialization                                                       #
    # ------------------------------------------------------------------ #

    def _serialize_node(self, node: _BuildNode, is_last: bool) -> bytes:
        letter = node.letter.encode("utf-8")
        below = self._serialize_list(node.children)

        # Both offsets count from the first byte of the letter
        sibling_offset = 0 if is_last else len(letter) + len(below)
        child_offset = len(letter) if below else 0

        return encode_offset(sibling_offset) + encode_offset(child_offset) + letter + below

    def _serialize_list(self, children: dict[str, _BuildNode]) -> bytes:
        out = bytearray()
        keys = sorted(children)
        for i, key in enumerate(keys):
            out += self._serialize_node(children[key], i == len(keys) - 1)
        return bytes(out)

    def to_bytes(self) -> bytes:
        """Return the dictionary blob."""
        return self._serialize_node(self._root, True)

    def serialize(self, url: str, storage_options: Optional[dict] = None) -> None:
        """Write the dictionary blob to *url*.

        Args:
            url: Path or URL where to save.
            storage_options: fsspec options. Set compression='gzip' for gzip.
        """
        write_bytes(url, self.to_bytes(), storage_options)
