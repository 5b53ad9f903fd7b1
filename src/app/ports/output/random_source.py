from __future__ import annotations

from abc import ABC, abstractmethod


class IRandomSource(ABC):
    """Port for a seedable, sequential source of uniform 64-bit integers.

    Instances hold mutable state and belong to a single worker.
    """

    @abstractmethod
    def random(self) -> int:
        """Return the next unsigned 64-bit integer and advance the state."""
