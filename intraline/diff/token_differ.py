"""
Token-based word differ.

Tokenizes both lines, gives up early when the quick similarity ratio says the lines
have little in common, otherwise aligns the tokens with difflib and turns the
matching blocks into merged segments.
"""

from loguru import logger

from intraline.config import load_settings

from .aligner import align
from .base import SegmentPair, WordDiffer
from .segments import build_segments, merge_segments, whole_line_segments
from .similarity import is_dissimilar, validate_threshold
from .tokenizers import create_tokenizer


class TokenDiffer(WordDiffer):
    """
    Word differ aligning on lexical tokens.

    Lines whose token similarity falls under ``similarity_threshold`` are reported
    as fully replaced, highlighting scattered matches in them would only add noise.
    """

    name = 'token'

    def __init__(self, tokenizer: str = None, similarity_threshold: float = None):
        """
        Args:
            tokenizer: Name of a tokenizer in the TOKENIZERS registry (default from settings)
            similarity_threshold: Quick ratio under which lines count as replaced (default from settings)
        """
        settings = None
        if tokenizer is None or similarity_threshold is None:
            settings = load_settings()

        self.tokenizer_name = tokenizer if tokenizer is not None else settings.tokenizer
        self._tokenizer = create_tokenizer(self.tokenizer_name)
        self.similarity_threshold = validate_threshold(
            similarity_threshold if similarity_threshold is not None else settings.similarity_threshold
        )
        logger.debug(f"Created TokenDiffer: tokenizer={self.tokenizer_name}, threshold={self.similarity_threshold}")

    def tokenize(self, text: str):
        return self._tokenizer.tokenize(text)

    def diff(self, old: str, new: str) -> SegmentPair:
        if old == new:
            logger.trace("Identical lines, skipping alignment")
            return whole_line_segments(old, new, changed=False)
        if not old or not new:
            return whole_line_segments(old, new)

        old_tokens = self.tokenize(old)
        new_tokens = self.tokenize(new)

        if is_dissimilar(old_tokens, new_tokens, self.similarity_threshold):
            logger.trace(f"Lines below similarity threshold {self.similarity_threshold}, marking whole line changed")
            return whole_line_segments(old, new)

        blocks = align(old_tokens, new_tokens)
        logger.trace(f"Aligned {len(old_tokens)}/{len(new_tokens)} tokens into {len(blocks)} matching blocks")

        old_segments, new_segments = build_segments(old_tokens, new_tokens, blocks)
        return merge_segments(old_segments), merge_segments(new_segments)
