#!/usr/bin/env python3
"""Compress the words read from stdin into a word list file.

Usage
-----
  make_word_list.py dictionary.bin wordlist.bin < words.txt
  make_word_list.py dictionary.bin wordlist.bin --entry-width 4 < words.txt
  make_word_list.py dictionary.bin.gz wordlist.bin --dictionary-compression gzip < words.txt

Words that can't be compressed are reported on stderr and left out; the exit
status is 1 if that happened for any word.  Input that is not valid UTF-8
stops the tool with status 1 before anything is written.
"""

import argparse
import logging
import sys
from typing import Optional, TextIO

from codec_errors import CodecError
from dictionary import Dictionary
from storage import COMPRESSIONS, compression_options
from word_list import WordList

log = logging.getLogger(__name__)


def compress_words(dictionary: Dictionary, lines: TextIO, word_list: WordList) -> int:
    """Append the index of every word in *lines* to *word_list*.

    Returns:
        Number of words that failed.
    """
    n_failed = 0
    index_bits = word_list.entry_width * 8

    for line in lines:
        word = line.rstrip("\r\n")
        try:
            word_list.append(dictionary.compress(word, index_bits))
        except CodecError as e:
            log.debug("Failed to compress %r", word, exc_info=True)
            print(f"{word}: {e}", file=sys.stderr)
            n_failed += 1

    return n_failed


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compress words from stdin into a word list file",
    )
    parser.add_argument("dictionary", help="dictionary blob path or URL")
    parser.add_argument("output", help="word list file to write")
    parser.add_argument(
        "--entry-width",
        type=int,
        choices=[4, 8],
        default=8,
        help="bytes per word index (default: 8)",
    )
    parser.add_argument(
        "--dictionary-compression",
        choices=COMPRESSIONS,
        default=None,
        help="compression of the dictionary file",
    )
    parser.add_argument(
        "--word-list-compression",
        choices=COMPRESSIONS,
        default=None,
        help="compression of the output word list file",
    )
    args = parser.parse_args(argv)

    try:
        dictionary = Dictionary.load(
            args.dictionary, compression_options(args.dictionary_compression)
        )
    except (OSError, CodecError) as e:
        print(f"{args.dictionary}: {e}", file=sys.stderr)
        return 1

    word_list = WordList(entry_width=args.entry_width)
    try:
        ret = 1 if compress_words(dictionary, sys.stdin, word_list) else 0
    except UnicodeDecodeError as e:
        # Input can't be read any further, so don't write a partial list
        print(e, file=sys.stderr)
        return 1

    try:
        word_list.serialize(args.output, compression_options(args.word_list_compression))
    except OSError as e:
        print(f"{args.output}: {e}", file=sys.stderr)
        ret = 1

    return ret


if __name__ == "__main__":
    sys.exit(main())
