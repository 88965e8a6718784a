"""
Turning alignments into tagged segments.
"""

from typing import Iterable, List, Sequence

from .aligner import MatchingBlock
from .base import Segment, SegmentPair


def build_segments(old_tokens: Sequence[str], new_tokens: Sequence[str],
                   blocks: Iterable[MatchingBlock]) -> SegmentPair:
    """
    Convert matching blocks plus the gaps between them into raw segments.

    Gaps become ``changed`` segments on their own side, each block becomes one
    ``unchanged`` segment on both sides. The output is not merged, two neighbouring
    blocks give two neighbouring unchanged segments.

    Args:
        old_tokens: Tokens of the original line
        new_tokens: Tokens of the modified line
        blocks: Matching blocks ordered by offset

    Returns:
        Tuple of (old_segments, new_segments) in document order
    """
    old_segments = []
    new_segments = []
    old_pos = new_pos = 0

    for old_offset, new_offset, length in blocks:
        if old_offset > old_pos:
            old_segments.append(Segment(''.join(old_tokens[old_pos:old_offset]), True))
        if new_offset > new_pos:
            new_segments.append(Segment(''.join(new_tokens[new_pos:new_offset]), True))

        if length > 0:
            text = ''.join(old_tokens[old_offset:old_offset + length])
            old_segments.append(Segment(text, False))
            new_segments.append(Segment(text, False))

        old_pos = old_offset + length
        new_pos = new_offset + length

    if old_pos < len(old_tokens):
        old_segments.append(Segment(''.join(old_tokens[old_pos:]), True))
    if new_pos < len(new_tokens):
        new_segments.append(Segment(''.join(new_tokens[new_pos:]), True))

    return old_segments, new_segments


def merge_segments(segments: Iterable[Segment]) -> List[Segment]:
    """Combine neighbouring segments with the same ``changed`` flag, dropping empty ones."""
    merged = []
    for segment in segments:
        if not segment.text:
            continue
        if merged and merged[-1].changed == segment.changed:
            merged[-1] = Segment(merged[-1].text + segment.text, segment.changed)
        else:
            merged.append(segment)
    return merged


def whole_line_segments(old: str, new: str, changed: bool = True) -> SegmentPair:
    """One segment per non-empty side, covering all of its text."""
    old_segments = [Segment(old, changed)] if old else []
    new_segments = [Segment(new, changed)] if new else []
    return old_segments, new_segments
