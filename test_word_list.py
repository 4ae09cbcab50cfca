"""Tests for WordList."""

import random
import struct

import pytest

from codec_errors import WordListFramingError
from dictionary import Dictionary
from dictionary_builder import DictionaryBuilder
from word_list import WordList

WORDS = ["kato", "kate", "hundo", "ĉevalo", "ŝipo"]


class TestSerialization:
    """Tests for from_bytes / to_bytes / load / serialize."""

    def test_to_bytes_little_endian(self):
        word_list = WordList([1, 2**40, 2**64 - 1])
        assert word_list.to_bytes() == struct.pack("<3Q", 1, 2**40, 2**64 - 1)

    def test_to_bytes_32_bit(self):
        word_list = WordList([1, 0xDEADBEEF], entry_width=4)
        assert word_list.to_bytes() == struct.pack("<2I", 1, 0xDEADBEEF)

    def test_from_bytes(self):
        word_list = WordList.from_bytes(struct.pack("<2Q", 7, 2**63))
        assert list(word_list) == [7, 2**63]
        assert len(word_list) == 2
        assert word_list[1] == 2**63

    def test_from_bytes_empty(self):
        assert len(WordList.from_bytes(b"")) == 0

    def test_truncated_file_rejected(self):
        data = struct.pack("<3Q", 1, 2, 3)
        for n in range(1, 8):
            with pytest.raises(WordListFramingError):
                WordList.from_bytes(data[:-n])

    def test_truncated_32_bit_file_rejected(self):
        with pytest.raises(WordListFramingError):
            WordList.from_bytes(b"\x00" * 6, entry_width=4)

    def test_framing_error_is_value_error(self):
        with pytest.raises(ValueError):
            WordList.from_bytes(b"\x00" * 9)

    def test_unsupported_entry_width(self):
        with pytest.raises(ValueError, match="Unsupported entry width"):
            WordList(entry_width=3)
        with pytest.raises(ValueError, match="Unsupported entry width"):
            WordList.from_bytes(b"\x00" * 6, entry_width=2)

    def test_round_trip_file(self, tmp_path):
        path = str(tmp_path / "wordlist.bin")
        word_list = WordList([3, 1, 4, 1, 5])
        word_list.serialize(path)
        assert WordList.load(path) == word_list

    def test_round_trip_gzip(self, tmp_path):
        path = str(tmp_path / "wordlist.bin.gz")
        opts = {"compression": "gzip"}
        word_list = WordList([9, 2, 6], entry_width=4)
        word_list.serialize(path, opts)
        assert WordList.load(path, opts, entry_width=4) == word_list

    def test_repr(self):
        assert repr(WordList([1, 2])) == "WordList(2 words, entry_width=8)"


class TestPickWord:
    """Tests for WordList.pick_word."""

    @pytest.fixture
    def dictionary(self):
        return Dictionary(DictionaryBuilder(WORDS).to_bytes())

    def test_pick_word(self, dictionary):
        word_list = WordList(dictionary.compress(word) for word in WORDS)
        rng = random.Random(1234)
        picked = {word_list.pick_word(dictionary, rng) for _ in range(200)}
        assert picked <= set(WORDS)
        assert len(picked) > 1

    def test_pick_word_32_bit(self, dictionary):
        word_list = WordList([dictionary.compress("hundo", 32)], entry_width=4)
        assert word_list.pick_word(dictionary) == "hundo"

    def test_pick_from_empty(self, dictionary):
        with pytest.raises(IndexError):
            WordList().pick_word(dictionary)
