"""
Tokenizer for source code and code-like text.

Splits a line into identifiers, numbers, quoted strings, operator runs, single
punctuation characters and whitespace runs. Anything else becomes a token of one
code point, so every character of the input lands in exactly one token and
``''.join(tokens) == text`` always holds.
"""

import re
from typing import List

# Order matters, the first alternative that matches at a position wins
CODE_TOKEN_PATTERN = (
    r'[a-zA-Z_][a-zA-Z0-9_]*|'   # identifiers
    r'[0-9]+(?:\.[0-9]+)?|'      # numbers
    r'"[^"]*"|\'[^\']*\'|'       # string literals
    r'[+\-*/=<>!&|^%:]+|'        # operators (including :)
    r'[(){}\[\];,.]|'            # punctuation
    r'\s+|'                      # whitespace
    r'.'                         # catch-all for any remaining character
)


class CodeTokenizer:
    """Holds the compiled token pattern, immutable once built."""

    name = 'code'

    def __init__(self):
        # DOTALL, the catch-all must be able to take "\n" too
        self._pattern = re.compile(CODE_TOKEN_PATTERN, re.DOTALL)

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into code tokens.

        Examples:
            >>> CodeTokenizer().tokenize("foo(1, 2)")
            ['foo', '(', '1', ',', ' ', '2', ')']
            >>> CodeTokenizer().tokenize("x := 42")
            ['x', ' ', ':=', ' ', '42']
        """
        return self._pattern.findall(text)

    __call__ = tokenize


def tokenize_code(text: str) -> List[str]:
    """Split text into code tokens with a freshly compiled pattern."""
    return CodeTokenizer().tokenize(text)
