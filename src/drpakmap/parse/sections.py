"""Compare an offset table's deltas with the executable's section table.

Only the section headers are consulted. A delta is the value that turns a
virtual address inside a section into a file offset.
"""
import logging
from typing import Any, Dict

from ..errors import DRConfigError, assert_eq
from .listing import OffsetTable

LOG = logging.getLogger(__name__)


def section_name(raw: bytes) -> str:
    return raw.rstrip(b"\0").decode("ascii", errors="replace")


def section_deltas(pe: Any) -> Dict[str, int]:
    image_base = pe.OPTIONAL_HEADER.ImageBase
    deltas = {}
    for section in pe.sections:
        name = section_name(section.Name)
        delta = image_base + section.VirtualAddress - section.PointerToRawData
        LOG.debug("Section '%s' delta 0x%X", name, delta)
        # the first section with a name wins
        deltas.setdefault(name, delta)
    return deltas


def check_section_deltas(pe: Any, table: OffsetTable) -> None:
    deltas = section_deltas(pe)
    for name, expected in ((".data", table.data_delta), (".rdata", table.rdata_delta)):
        if name not in deltas:
            raise DRConfigError(f"section '{name}' not found")
        assert_eq(f"{name} delta", expected, deltas[name], name, DRConfigError)
