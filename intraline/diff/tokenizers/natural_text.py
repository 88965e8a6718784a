"""
Simple word tokenizer using whitespace boundaries.

Suited to prose, where punctuation glued to a word should change together with it.
"""

import re
from typing import List


class WordTokenizer:
    """Splits on whitespace, keeping each whitespace run as its own token."""

    name = 'words'

    def __init__(self):
        self._pattern = re.compile(r'\s+|\S+')

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into words and whitespace runs.

        Examples:
            >>> WordTokenizer().tokenize("Hello world")
            ['Hello', ' ', 'world']
            >>> WordTokenizer().tokenize("one  two.")
            ['one', '  ', 'two.']
        """
        return self._pattern.findall(text)

    __call__ = tokenize


def tokenize_words(text: str) -> List[str]:
    return WordTokenizer().tokenize(text)
