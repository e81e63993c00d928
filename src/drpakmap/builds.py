from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping

from .errors import DRUnsupportedError
from .parse.listing import OffsetTable


class Build(Enum):
    Unsupported = 0
    DR1_US = 1
    DR2_US = 2

    def __str__(self) -> str:  # pylint: disable=invalid-str-returned
        return self.name

    # argparse shows choices and rejected values with repr
    def __repr__(self) -> str:
        return self.name

    @staticmethod
    def from_string(value: str) -> Build:
        try:
            return Build[value]
        except KeyError:
            raise ValueError(value)


@dataclass(frozen=True)
class BuildConfig:
    exe_name: str
    mapping_name: str
    table: OffsetTable
    sentinel: bytes


BUILDS: Mapping[Build, BuildConfig] = {
    Build.DR1_US: BuildConfig(
        exe_name="DR1_us.exe",
        mapping_name="dr1_us.mappings.json",
        table=OffsetTable(
            root_offset=0x28_AAB8,
            terminal_offset=0x28_B8D8,
            data_delta=0x40_1C00,
            rdata_delta=0x40_1200,
        ),
        sentinel=b"\xC0\x99\x65\x00",
    ),
    Build.DR2_US: BuildConfig(
        exe_name="DR2_us.exe",
        mapping_name="dr2_us.mappings.json",
        table=OffsetTable(
            root_offset=0x2F_DB78,
            terminal_offset=0x2F_E9A0,
            data_delta=0x40_1C00,
            rdata_delta=0x40_1600,
        ),
        sentinel=b"\xD0\x8D\x6C\x00",
    ),
}

SUPPORTED_BUILDS = list(BUILDS)


def identify_build(path: Path) -> Build:
    name = path.name.lower()
    for build, config in BUILDS.items():
        if config.exe_name.lower() == name:
            return build
    return Build.Unsupported


def get_config(build: Build) -> BuildConfig:
    try:
        return BUILDS[build]
    except KeyError:
        raise DRUnsupportedError(f"No offset table for build {build}") from None
