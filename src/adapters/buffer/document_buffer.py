from __future__ import annotations

from dataclasses import dataclass, field

from src.app.ports.output import IOutputBuffer
from src.domain.algorithms.bson_encoding import LENGTH_PREFIX_SIZE
from src.domain.exceptions import InvalidWriteOffset

_PLACEHOLDER = bytes(LENGTH_PREFIX_SIZE)


@dataclass(slots=True)
class DocumentBuffer(IOutputBuffer):
    """Growable in-memory buffer backed by a bytearray.

    Reserved bytes are zero-filled; callers must not rely on their content
    before the patch-back.
    """

    _data: bytearray = field(default_factory=bytearray)

    def __len__(self) -> int:
        return len(self._data)

    def reserve(self) -> None:
        self._data += _PLACEHOLDER

    def write(self, data: bytes) -> None:
        self._data += data

    def write_single_byte(self, value: int) -> None:
        self._data.append(value)

    def write_string(self, value: str) -> None:
        self._data += value.encode("utf-8")

    def write_at(self, offset: int, data: bytes) -> None:
        end = offset + len(data)
        if offset < 0 or end > len(self._data):
            raise InvalidWriteOffset(
                f"Cannot write {len(data)} bytes at offset {offset}; "
                f"buffer holds {len(self._data)}"
            )
        self._data[offset:end] = data

    def bytes(self) -> bytes:
        return bytes(self._data)
