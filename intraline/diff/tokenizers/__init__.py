"""
Tokenizers for word-level diff operations.

This module provides the tokenization strategies TokenDiffer can align on.
New tokenizers can be added by:
1. Creating a new module in this directory with a class exposing tokenize(text)
2. Registering the class in the TOKENIZERS dictionary below
"""

from ..base import UnknownTokenizerError
from .code import CodeTokenizer, tokenize_code
from .natural_text import WordTokenizer, tokenize_words

DEFAULT_TOKENIZER = 'code'

# Tokenizer registry - maps tokenizer names to tokenizer classes
TOKENIZERS = {
    'code': CodeTokenizer,
    'words': WordTokenizer,
}


def create_tokenizer(name: str = DEFAULT_TOKENIZER):
    """Instantiate the tokenizer registered under ``name``."""
    tokenizer_class = TOKENIZERS.get((name or '').lower())
    if tokenizer_class is None:
        available = ', '.join(TOKENIZERS.keys())
        raise UnknownTokenizerError(f"Unknown tokenizer: {name}. Available: {available}")
    return tokenizer_class()


__all__ = [
    'CodeTokenizer',
    'WordTokenizer',
    'tokenize_code',
    'tokenize_words',
    'create_tokenizer',
    'DEFAULT_TOKENIZER',
    'TOKENIZERS',
]
