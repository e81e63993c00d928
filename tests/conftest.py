"""Test configuration and synthetic executable images."""

from __future__ import annotations

import sys
from io import BytesIO
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from drpakmap.parse.listing import OffsetTable  # noqa: E402
from drpakmap.parse.utils import INT32, SLOT_SIZE  # noqa: E402

SENTINEL = b"\xC0\x99\x65\x00"
# read as a pointer, this is negative and can't be seeked to
POISON = b"\xEF\xBE\xAD\xDE"
FILLER = 0xCC

Slots = Sequence[Optional[Sequence[str]]]


def make_table(slot_count: int, root_sentinel: bool = False) -> OffsetTable:
    root_offset = 0x10
    # with a root sentinel, leave room for the sentinel and a poison slot
    extra = 2 if root_sentinel else 0
    return OffsetTable(
        root_offset=root_offset,
        terminal_offset=root_offset + SLOT_SIZE * (slot_count + extra),
        data_delta=0x40_1C00,
        rdata_delta=0x40_1200,
    )


def build_image(
    slots: Slots,
    table: OffsetTable,
    sentinel: bytes = SENTINEL,
    root_sentinel: bool = False,
) -> bytes:
    """Lay out a listing the way the executables do.

    ``None`` slots are written as zero slots. String arrays and strings
    follow the root array (or the terminal offset, whichever is later).
    """
    root_end = table.root_offset + SLOT_SIZE * (len(slots) + 2)
    image = bytearray([FILLER]) * max(table.terminal_offset, root_end)

    array_offsets: List[Optional[int]] = []
    for files in slots:
        if files is None:
            array_offsets.append(None)
            continue
        array_offsets.append(len(image))
        image += bytes(SLOT_SIZE * (len(files) + 1))

    for index, files in enumerate(slots):
        slot_offset = table.root_offset + SLOT_SIZE * index
        array_offset = array_offsets[index]
        if files is None or array_offset is None:
            image[slot_offset : slot_offset + SLOT_SIZE] = bytes(SLOT_SIZE)
            continue

        INT32.pack_into(image, slot_offset, array_offset + table.data_delta)
        for k, name in enumerate(files):
            string_offset = len(image)
            image += name.encode("latin-1") + b"\0"
            pointer = string_offset + table.rdata_delta
            INT32.pack_into(image, array_offset + SLOT_SIZE * k, pointer)
        end = array_offset + SLOT_SIZE * len(files)
        image[end : end + SLOT_SIZE] = sentinel

    if root_sentinel:
        offset = table.root_offset + SLOT_SIZE * len(slots)
        image[offset : offset + SLOT_SIZE] = sentinel
        image[offset + SLOT_SIZE : offset + 2 * SLOT_SIZE] = POISON

    return bytes(image)


class RecordingIO(BytesIO):
    def __init__(self, data: bytes):
        super().__init__(data)
        self.seeks: List[int] = []

    def seek(self, offset: int, whence: int = 0) -> int:
        position = super().seek(offset, whence)
        self.seeks.append(position)
        return position


@pytest.fixture
def image_builder() -> Callable[..., bytes]:
    return build_image


@pytest.fixture
def table_factory() -> Callable[..., OffsetTable]:
    return make_table
