"""
Matching-block alignment between two token sequences.

Wraps ``difflib.SequenceMatcher`` (Ratcliff/Obershelp): the longest common run is
matched first and the regions on either side of it are aligned recursively. Among
equally long candidates the one starting earliest in the old sequence wins, then
the one starting earliest in the new sequence.
"""

import difflib
from typing import List, NamedTuple, Sequence


class MatchingBlock(NamedTuple):
    old_offset: int
    new_offset: int
    length: int


def align(old_tokens: Sequence[str], new_tokens: Sequence[str]) -> List[MatchingBlock]:
    """
    Return the matching blocks between two token sequences.

    Blocks are ordered by offset on both sides, never overlap and all have a positive
    length. Adjacent blocks are already coalesced by SequenceMatcher.

    Args:
        old_tokens: Tokens of the original line
        new_tokens: Tokens of the modified line

    Returns:
        List of MatchingBlock, empty when nothing matches
    """
    if not old_tokens or not new_tokens:
        return []

    if list(old_tokens) == list(new_tokens):
        return [MatchingBlock(0, 0, len(old_tokens))]

    # autojunk=False, the popularity heuristic would drop repeated tokens like " " in long lines
    matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)

    # The last block is always the (len(a), len(b), 0) sentinel
    return [MatchingBlock(*block) for block in matcher.get_matching_blocks() if block.size]
