"""
Base classes and interfaces for word-level diff strategies.

This module defines the abstract base class that every diff strategy must implement,
the Segment value type they all produce, and the exceptions raised while selecting
or configuring a strategy.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple


# =============================================================================
# Exceptions
# =============================================================================


class WordDiffError(Exception):
    """Base exception for word diff configuration errors."""
    pass


class UnknownDifferError(WordDiffError, LookupError):
    """No diff strategy is registered under the requested name."""
    pass


class UnknownTokenizerError(WordDiffError, LookupError):
    """No tokenizer is registered under the requested name."""
    pass


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class Segment:
    """A contiguous span of one side of a comparison."""

    text: str
    changed: bool = False


SegmentPair = Tuple[List[Segment], List[Segment]]


# =============================================================================
# Abstract Base Class
# =============================================================================


class WordDiffer(ABC):
    """
    Abstract base class for word-level diff strategies.

    Implementations must be total over strings: for any ``old`` and ``new``,
    joining the text of the returned old segments gives back ``old`` (and the same
    for ``new``), and no two neighbouring segments share the same ``changed`` flag.
    Instances hold no per-call state and can be shared between threads.
    """

    # Strategy identification, used by the factory and in log lines
    name: str = "base"

    @abstractmethod
    def diff(self, old: str, new: str) -> SegmentPair:
        """
        Compute which portions of ``old`` and ``new`` changed.

        Args:
            old: Text before the change
            new: Text after the change

        Returns:
            Tuple of (old_segments, new_segments)
        """
        pass

    def __repr__(self):
        return f"<{self.__class__.__name__} name={self.name!r}>"
