from __future__ import annotations

import pytest

from src.adapters.buffer import DocumentBuffer
from src.domain.exceptions import InvalidWriteOffset


def test_appends_bytes_strings_and_single_bytes_in_order() -> None:
    buf = DocumentBuffer()
    buf.write(b"ab")
    buf.write_single_byte(0x2C)
    buf.write_string("cd")

    assert buf.bytes() == b"ab,cd"
    assert len(buf) == 5


def test_reserve_then_patch_leaves_later_bytes_untouched() -> None:
    buf = DocumentBuffer()
    buf.write(b"head")
    start = len(buf)
    buf.reserve()
    buf.write(b"body")

    buf.write_at(start, b"\x01\x02\x03\x04")

    assert buf.bytes() == b"head\x01\x02\x03\x04body"


@pytest.mark.parametrize("offset", [-1, 3, 10])
def test_write_at_rejects_offsets_outside_written_region(offset: int) -> None:
    buf = DocumentBuffer()
    buf.reserve()
    buf.write(b"xx")

    with pytest.raises(InvalidWriteOffset):
        buf.write_at(offset, b"\x00\x00\x00\x00")

def test_reserve_appends_a_zeroed_length_prefix() -> None:
    buf = DocumentBuffer()
    buf.write(b"x")
    buf.reserve()

    assert buf.bytes() == b"x\x00\x00\x00\x00"
