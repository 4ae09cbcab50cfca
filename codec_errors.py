"""Exceptions raised by the dictionary trie codec."""


class CodecError(Exception):
    """Base class for every dictionary / word list failure."""

    message = "Codec error"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class DictionaryCorrupt(CodecError, ValueError):
    """The dictionary blob is structurally invalid."""

    message = "Dictionary corrupt"


class NotInDictionary(CodecError, KeyError):
    """The word has no path in the dictionary trie."""

    message = "Not in dictionary"


class TooManyBits(CodecError, OverflowError):
    """The word's path needs more choice groups than the word index holds."""

    message = "Too many bits"


class TooManySkips(CodecError, OverflowError):
    """A sibling list is too long for one choice group."""

    message = "Too many skips"


class WordListFramingError(CodecError, ValueError):
    """The word list length is not a multiple of the entry width."""

    message = "Word list framing error"
