"""Node decoder and traversal primitives for the flattened dictionary trie.

The dictionary is a single byte buffer.  Every node is stored as:

* the byte offset to the next sibling node (a variable-length offset),
* the byte offset to the first child node (a variable-length offset),
* 1-4 bytes of UTF-8 for the node's character.

Both offsets are counted from the first byte of the character and are 0 when
there is no sibling / child.  The buffer starts with a root node whose
character is ignored and whose children are the possible first letters.  A
``"\\0"`` node in a sibling list means the letters leading to it form a word.
"""

from typing import Iterator, NamedTuple, Optional

from codec_errors import DictionaryCorrupt
from var_offset import read_offset


class TrieNode(NamedTuple):
    """Decoded header of one node.  A view into the blob, owns nothing."""

    sibling_offset: int
    child_offset: int
    letter: str
    position: int  # blob index of the first character byte

    @property
    def is_terminator(self) -> bool:
        return self.letter == "\0"


def _utf8_length(lead: int) -> int:
    """Byte length announced by a UTF-8 lead byte (count of leading ones)."""
    n = 0
    mask = 0x80
    while n < 8 and lead & mask:
        n += 1
        mask >>= 1
    return max(n, 1)


def extract(data, pos: int = 0) -> Optional[TrieNode]:
    """Decode the node starting at *pos*.

    Returns ``None`` instead of raising when the node is truncated or its
    character is not valid UTF-8.
    """
    header = read_offset(data, pos)
    if header is None:
        return None
    pos, sibling_offset = header

    header = read_offset(data, pos)
    if header is None:
        return None
    pos, child_offset = header

    if pos >= len(data):
        return None
    end = pos + _utf8_length(data[pos])
    if end > len(data):
        return None

    try:
        letter = str(data[pos:end], "utf-8")
    except UnicodeDecodeError:
        return None

    return TrieNode(sibling_offset, child_offset, letter, pos)


def extract_or_raise(data, pos: int) -> TrieNode:
    node = extract(data, pos)
    if node is None:
        raise DictionaryCorrupt(f"undecodable node at byte {pos}")
    return node


def _follow(data, node: TrieNode, offset: int) -> int:
    target = node.position + offset
    if target >= len(data):
        raise DictionaryCorrupt(
            f"offset {offset} from byte {node.position} is out of bounds"
        )
    return target


def root_children(data) -> int:
    """Return the position of the first sibling list below the root.

    Raises:
        DictionaryCorrupt: If the root can't be decoded or has no children.
    """
    root = extract_or_raise(data, 0)
    if root.child_offset == 0:
        raise DictionaryCorrupt("root node has no children")
    return _follow(data, root, root.child_offset)


def descend(data, node: TrieNode) -> int:
    """Return the position of *node*'s first child."""
    if node.child_offset == 0:
        raise DictionaryCorrupt(f"node at byte {node.position} has no children")
    return _follow(data, node, node.child_offset)


def next_sibling(data, node: TrieNode) -> int:
    """Return the position of *node*'s next sibling."""
    if node.sibling_offset == 0:
        raise DictionaryCorrupt(f"node at byte {node.position} has no sibling")
    return _follow(data, node, node.sibling_offset)


def iter_siblings(data, pos: int) -> Iterator[TrieNode]:
    """Yield every node of the sibling list starting at *pos*.

    Offsets are never zero when followed and always count from after the
    node's header, so each step moves strictly forward and the walk ends.
    """
    while True:
        node = extract_or_raise(data, pos)
        yield node
        if node.sibling_offset == 0:
            return
        pos = next_sibling(data, node)
