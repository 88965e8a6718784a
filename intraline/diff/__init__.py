"""
Word-level diff module.

This module computes which portions of a modified line changed between its old and
new version, as ordered changed/unchanged segments for each side. Two interchangeable
strategies are provided: TokenDiffer aligns lexical tokens, CharDiffer runs a
character-level diff with semantic cleanup.
"""

from .aligner import MatchingBlock, align
from .base import (
    Segment,
    UnknownDifferError,
    UnknownTokenizerError,
    WordDiffError,
    WordDiffer,
)
from .char_differ import CharDiffer
from .factory import DIFFERS, create_word_differ, get_available_differs
from .pairing import Line, LineType, compute_line_pair_segments, has_significant_unchanged_content
from .segments import build_segments, merge_segments
from .similarity import DEFAULT_SIMILARITY_THRESHOLD, quick_ratio, real_quick_ratio
from .token_differ import TokenDiffer
from .tokenizers import TOKENIZERS, tokenize_code, tokenize_words

# Export main public API
__all__ = [
    'CharDiffer',
    'DEFAULT_SIMILARITY_THRESHOLD',
    'DIFFERS',
    'Line',
    'LineType',
    'MatchingBlock',
    'Segment',
    'TOKENIZERS',
    'TokenDiffer',
    'UnknownDifferError',
    'UnknownTokenizerError',
    'WordDiffError',
    'WordDiffer',
    'align',
    'build_segments',
    'compute_line_pair_segments',
    'create_word_differ',
    'get_available_differs',
    'has_significant_unchanged_content',
    'merge_segments',
    'quick_ratio',
    'real_quick_ratio',
    'tokenize_code',
    'tokenize_words',
]
