"""Compress words found in a dictionary trie into fixed-width word indices.

A word index is split into 5-bit groups, least-significant group first.
Each group is the number of siblings to skip in the current sibling list
before taking a node.  Taking a letter descends to its children; taking the
``"\\0"`` terminator ends the word.  With 64-bit indices this allows an
alphabet of at most 32 letters and words of at most 11 letters (12 groups,
the last one being the terminator).

Indices are only meaningful for the dictionary blob they were made with.
"""

from codec_errors import DictionaryCorrupt, NotInDictionary, TooManyBits, TooManySkips
from trie_node import descend, extract_or_raise, next_sibling, root_children

BITS_PER_CHOICE = 5
WORD_INDEX_BITS = 64

_CHOICE_MASK = (1 << BITS_PER_CHOICE) - 1


def compress_word(data, word: str, index_bits: int = WORD_INDEX_BITS) -> int:
    """Return the word index for *word*.

    The word is lower-cased before matching.

    Args:
        data: Dictionary blob.
        word: Word to look up.
        index_bits: Width of the output integer.

    Raises:
        NotInDictionary: If no path in the trie spells *word*.
        TooManyBits: If the path needs more groups than *index_bits* holds.
        TooManySkips: If a sibling list is too long for one group.
        DictionaryCorrupt: If the blob is structurally invalid.
    """
    letters = iter(word.lower())
    next_letter = next(letters, None)

    choices = 0
    n_choices = 0
    skip_count = 0
    pos = root_children(data)

    while True:
        node = extract_or_raise(data, pos)

        if node.letter == (next_letter if next_letter is not None else "\0"):
            if (n_choices + 1) * BITS_PER_CHOICE > index_bits:
                raise TooManyBits()
            choices |= skip_count << (n_choices * BITS_PER_CHOICE)
            n_choices += 1
            skip_count = 0

            if next_letter is None:
                return choices

            if node.child_offset == 0:
                raise NotInDictionary()

            next_letter = next(letters, None)
            pos = descend(data, node)
        else:
            if node.sibling_offset == 0:
                raise NotInDictionary()

            skip_count += 1
            if skip_count.bit_length() > BITS_PER_CHOICE:
                raise TooManySkips()

            pos = next_sibling(data, node)


def decompress_word(data, index: int, index_bits: int = WORD_INDEX_BITS) -> str:
    """Return the word named by *index*.

    Raises:
        DictionaryCorrupt: If the index walks off the trie or the blob is
            structurally invalid.
        TooManyBits: If *index* is wider than *index_bits* or its path
            needs more groups than *index_bits* holds.
        ValueError: If *index* is negative.
    """
    if index < 0:
        raise ValueError(f"Word index must be non-negative, got {index}")
    if index.bit_length() > index_bits:
        raise TooManyBits(f"index {index:#x} is wider than {index_bits} bits")

    max_choices = index_bits // BITS_PER_CHOICE
    letters: list[str] = []
    pos = root_children(data)

    for _ in range(max_choices):
        to_skip = index & _CHOICE_MASK
        index >>= BITS_PER_CHOICE

        for _ in range(to_skip):
            node = extract_or_raise(data, pos)
            if node.sibling_offset == 0:
                raise DictionaryCorrupt(f"ran out of siblings after {''.join(letters)!r}")
            pos = next_sibling(data, node)

        node = extract_or_raise(data, pos)

        if node.is_terminator:
            return "".join(letters)

        letters.append(node.letter)

        if node.child_offset == 0:
            raise DictionaryCorrupt(f"{''.join(letters)!r} has no children")
        pos = descend(data, node)

    raise TooManyBits(f"no terminator within {max_choices} choices")
