from __future__ import annotations

from abc import ABC, abstractmethod


class IOutputBuffer(ABC):
    """Port for the shared, append-mostly byte stream a document is written into.

    One writer at a time: offsets returned by ``len()`` go stale if another
    writer appends between a reservation and its patch-back.
    """

    @abstractmethod
    def __len__(self) -> int:
        """Current write cursor (number of bytes written so far)."""

    @abstractmethod
    def reserve(self) -> None:
        """Append a 4-byte placeholder to be filled later with ``write_at``."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Append raw bytes."""

    @abstractmethod
    def write_single_byte(self, value: int) -> None:
        """Append one byte given as an int in 0..255."""

    @abstractmethod
    def write_string(self, value: str) -> None:
        """Append the UTF-8 encoding of a string."""

    @abstractmethod
    def write_at(self, offset: int, data: bytes) -> None:
        """Overwrite already written bytes starting at ``offset``."""

    @abstractmethod
    def bytes(self) -> bytes:
        """Return a copy of everything written so far."""
