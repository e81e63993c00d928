"""Read the pak listing embedded in a Disaster Report executable.

The listing is a root array of 4-byte slots. Each slot is zero (unused), the
sentinel (end of the listing), or a pointer into the data section. A pointer
leads to an array of string pointers into the read-only data section, which
is also terminated by the sentinel. Every string is zero-terminated.

Pointers are virtual addresses; subtracting the build's delta for the section
gives the file offset. The walk also ends when the root cursor reaches the
build's terminal offset, without reading that slot.
"""
import logging
from dataclasses import dataclass
from typing import BinaryIO, List, Tuple

from ..errors import DRConfigError, assert_eq, assert_ge
from .utils import SLOT_SIZE, StreamReader, unpack_pointer

ZERO_SLOT = bytes(SLOT_SIZE)
PAK_PREFIX = "bg_"

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class OffsetTable:
    root_offset: int
    terminal_offset: int
    data_delta: int
    rdata_delta: int

    def __post_init__(self) -> None:
        assert_ge(
            "terminal offset", self.root_offset, self.terminal_offset, "offset table"
        )
        assert_eq(
            "root array alignment",
            0,
            (self.terminal_offset - self.root_offset) % SLOT_SIZE,
            "offset table",
        )


@dataclass(frozen=True)
class ArchiveEntry:
    index: int
    name: str
    files: Tuple[str, ...]


def pak_name(index: int) -> str:
    return f"{PAK_PREFIX}{index:03}"


def _read_files(
    reader: StreamReader, entry_offset: int, rdata_delta: int, sentinel: bytes
) -> Tuple[str, ...]:
    files = []
    slot_offset = entry_offset
    while True:
        reader.seek(slot_offset)
        slot = reader.read_slot()
        if slot == sentinel:
            break

        string_offset = unpack_pointer(slot) - rdata_delta
        reader.seek(string_offset)
        files.append(reader.read_zterm())
        LOG.debug("File %d at %d: '%s'", len(files) - 1, reader.prev, files[-1])
        slot_offset += SLOT_SIZE

    return tuple(files)


def read_listing(
    f: BinaryIO, table: OffsetTable, sentinel: bytes
) -> List[ArchiveEntry]:
    assert_eq("sentinel length", SLOT_SIZE, len(sentinel), "sentinel", DRConfigError)

    reader = StreamReader(f)
    LOG.debug("Reading pak listing from %d (size %d)...", table.root_offset, len(reader))

    entries = []
    cursor = table.root_offset
    index = 0
    while True:
        if cursor == table.terminal_offset:
            LOG.debug("Reached terminal offset %d", cursor)
            break

        reader.seek(cursor)
        slot = reader.read_slot()

        if slot == sentinel:
            LOG.debug("Found sentinel at %d", reader.prev)
            break

        if slot == ZERO_SLOT:
            LOG.debug("Skipping empty slot %d at %d", index, cursor)
            cursor += SLOT_SIZE
            index += 1
            continue

        entry_offset = unpack_pointer(slot) - table.data_delta
        name = pak_name(index)
        LOG.debug("Reading '%s' at %d, files from %d", name, cursor, entry_offset)
        files = _read_files(reader, entry_offset, table.rdata_delta, sentinel)
        LOG.debug("Read '%s' with %d files", name, len(files))
        entries.append(ArchiveEntry(index, name, files))

        cursor += SLOT_SIZE
        index += 1

    LOG.debug("Read pak listing, %d entries", len(entries))
    return entries
