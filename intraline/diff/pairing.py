"""
Pairing removed and added lines of a hunk for word-level highlighting.

A run of deleted lines directly followed by a run of added lines is paired 1:1 in
order, each pair is diffed, and the segments are kept only when enough of both lines
survived unchanged for inline highlighting to be worth showing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence

from loguru import logger

from intraline.config import load_settings

from .base import Segment, WordDiffer


class LineType(Enum):
    CONTEXT = 'context'
    ADDED = 'added'
    DELETED = 'deleted'


@dataclass(frozen=True)
class Line:
    """A single line of a hunk, as handed over by the diff parser."""

    type: LineType
    content: str


def has_significant_unchanged_content(segments: Sequence[Segment], min_ratio: float = None) -> bool:
    """
    Check whether enough of a line is unchanged for word highlighting to be useful.

    Args:
        segments: Segments for one side of a line pair
        min_ratio: Required unchanged share of the text (default from settings)

    Returns:
        True when the unchanged share is at least min_ratio
    """
    if min_ratio is None:
        min_ratio = load_settings().min_unchanged_ratio

    total_len = sum(len(segment.text) for segment in segments)
    if not total_len:
        return False

    unchanged_len = sum(len(segment.text) for segment in segments if not segment.changed)
    return unchanged_len / total_len >= min_ratio


def _strip_newline(content: str) -> str:
    return content[:-1] if content.endswith('\n') else content


def compute_line_pair_segments(lines: Sequence[Line], word_differ: Optional[WordDiffer],
                               min_unchanged_ratio: float = None) -> Dict[int, List[Segment]]:
    """
    Compute word-level segments for paired deleted/added lines.

    Args:
        lines: Lines of one hunk in order
        word_differ: Strategy used to diff each pair, None disables pairing
        min_unchanged_ratio: Passed to has_significant_unchanged_content()

    Returns:
        Mapping of line index to segments, only for lines worth highlighting inline
    """
    if word_differ is None:
        return {}
    if min_unchanged_ratio is None:
        min_unchanged_ratio = load_settings().min_unchanged_ratio

    result = {}
    i = 0
    while i < len(lines):
        if lines[i].type != LineType.DELETED:
            i += 1
            continue

        delete_start = delete_end = i
        while delete_end < len(lines) and lines[delete_end].type == LineType.DELETED:
            delete_end += 1

        add_start = add_end = delete_end
        while add_end < len(lines) and lines[add_end].type == LineType.ADDED:
            add_end += 1

        pair_count = min(delete_end - delete_start, add_end - add_start)
        for j in range(pair_count):
            del_idx = delete_start + j
            add_idx = add_start + j
            old_segments, new_segments = word_differ.diff(_strip_newline(lines[del_idx].content),
                                                          _strip_newline(lines[add_idx].content))

            if has_significant_unchanged_content(old_segments, min_unchanged_ratio) and \
                    has_significant_unchanged_content(new_segments, min_unchanged_ratio):
                result[del_idx] = old_segments
                result[add_idx] = new_segments
            else:
                logger.trace(f"Skipping inline highlight for lines {del_idx}/{add_idx}, too little unchanged")

        i = add_end

    return result
