#!/usr/bin/env python3
"""Print every word of a word list file, one per line."""

import argparse
import sys
from typing import Optional

from codec_errors import CodecError
from dictionary import Dictionary
from storage import COMPRESSIONS, compression_options
from word_list import WordList


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("dictionary", help="dictionary blob path or URL")
    parser.add_argument("word_list", help="word list file path or URL")
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
        help="compression of the word list file",
    )
    args = parser.parse_args(argv)

    try:
        dictionary = Dictionary.load(
            args.dictionary, compression_options(args.dictionary_compression)
        )
    except (OSError, CodecError) as e:
        print(f"{args.dictionary}: {e}", file=sys.stderr)
        return 1

    try:
        word_list = WordList.load(
            args.word_list, compression_options(args.word_list_compression), args.entry_width
        )
    except (OSError, CodecError) as e:
        print(f"{args.word_list}: {e}", file=sys.stderr)
        return 1

    ret = 0
    index_bits = args.entry_width * 8

    for i, index in enumerate(word_list):
        try:
            print(dictionary.extract_word(index, index_bits))
        except CodecError as e:
            print(f"couldn't decode word at {i * args.entry_width}: {e}", file=sys.stderr)
            ret = 1

    return ret


if __name__ == "__main__":
    sys.exit(main())
