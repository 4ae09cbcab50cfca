"""Build script for the wordtrie dictionary codec.

The modules are plain top-level Python modules; there is no compiled
extension.  Install with ``pip install -e .[test]`` to run the test suite.
"""

from setuptools import setup

setup(
    name="wordtrie",
    version="0.1.0",
    description="Flattened trie dictionary and fixed-width word index codec",
    python_requires=">=3.9",
    py_modules=[
        "codec_errors",
        "dictionary",
        "dictionary_builder",
        "dump_word_list",
        "make_word_list",
        "storage",
        "trie_node",
        "var_offset",
        "word_codec",
        "word_list",
    ],
    install_requires=["fsspec"],
    extras_require={
        "test": ["pytest", "pytest-benchmark", "bitarray"],
    },
    entry_points={
        "console_scripts": [
            "make-word-list=make_word_list:main",
            "dump-word-list=dump_word_list:main",
        ],
    },
)
