"""
Character-level word differ using the diff-match-patch library.

diff_main() computes a Myers edit script over code points and diff_cleanupSemantic()
folds the small equalities and fragments it leaves behind into spans a reader can
follow. Without the cleanup "world" -> "universe" would highlight around a shared "r".
"""

from typing import List, Tuple

import diff_match_patch as dmp_module
from loguru import logger

from intraline.config import load_settings

from .base import Segment, SegmentPair, WordDiffer
from .segments import merge_segments, whole_line_segments


def diffs_to_segments(diffs: List[Tuple[int, str]], change_op: int) -> List[Segment]:
    """
    Project a diff-match-patch edit script onto one side.

    Args:
        diffs: List of (op, text) tuples from diff_main()
        change_op: DIFF_DELETE for the old side, DIFF_INSERT for the new side

    Returns:
        Merged segments for that side
    """
    segments = []
    for op, text in diffs:
        if op == dmp_module.diff_match_patch.DIFF_EQUAL:
            segments.append(Segment(text, False))
        elif op == change_op:
            segments.append(Segment(text, True))
        # The other side's operation is skipped, that text doesn't exist on this side

    return merge_segments(segments)


class CharDiffer(WordDiffer):
    """Word differ working on single characters with semantic cleanup."""

    name = 'char'

    def __init__(self, timeout: float = None):
        """
        Args:
            timeout: Seconds diff_main() may spend before settling for a non-minimal
                     diff, 0 for no limit (default from settings)
        """
        if timeout is None:
            timeout = load_settings().char_diff_timeout
        if timeout < 0:
            raise ValueError(f'Timeout must not be negative, got {timeout}')

        self.dmp = dmp_module.diff_match_patch()
        self.dmp.Diff_Timeout = float(timeout)
        logger.debug(f"Created CharDiffer: timeout={self.dmp.Diff_Timeout}")

    def diff(self, old: str, new: str) -> SegmentPair:
        if old == new:
            logger.trace("Identical lines, skipping diff")
            return whole_line_segments(old, new, changed=False)
        if not old or not new:
            return whole_line_segments(old, new)

        diffs = self.dmp.diff_main(old, new, False)
        # Modifies the list in place
        self.dmp.diff_cleanupSemantic(diffs)
        logger.trace(f"diff-match-patch produced {len(diffs)} operations")

        old_segments = diffs_to_segments(diffs, dmp_module.diff_match_patch.DIFF_DELETE)
        new_segments = diffs_to_segments(diffs, dmp_module.diff_match_patch.DIFF_INSERT)
        return old_segments, new_segments
