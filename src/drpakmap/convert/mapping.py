"""Extract the pak listing from 'DR*_us.exe' files to JSON mapping files.

The mapping lists the files of each 'bg_NNN.pak' archive. The conversion can
only be performed one-way.
"""
from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from time import perf_counter
from typing import Dict, Iterable, List

import pefile
from pydantic import RootModel

from ..builds import (
    SUPPORTED_BUILDS,
    Build,
    BuildConfig,
    get_config,
    identify_build,
)
from ..errors import DRConfigError, assert_eq
from ..parse.listing import ArchiveEntry, read_listing
from ..parse.sections import check_section_deltas
from .utils import dir_exists, json_dump, json_load, output_resolve, path_exists

UNSUPPORTED_MESSAGE = "Not a valid DR EXE (only the _us builds are supported)."

LOG = logging.getLogger(__name__)


class PakMapping(RootModel[Dict[str, List[str]]]):
    @classmethod
    def from_entries(cls, entries: Iterable[ArchiveEntry]) -> PakMapping:
        entry_list = list(entries)
        root = {entry.name: list(entry.files) for entry in entry_list}
        assert_eq("unique pak names", len(entry_list), len(root), "mapping", DRConfigError)
        return cls(root)


def read_mapping(input_exe: Path, config: BuildConfig) -> PakMapping:
    start = perf_counter()
    with input_exe.open("rb") as f:
        entries = read_listing(f, config.table, config.sentinel)
    elapsed = perf_counter() - start

    file_count = sum(len(entry.files) for entry in entries)
    LOG.info("Got %d paks, %d files in %.3fs", len(entries), file_count, elapsed)
    return PakMapping.from_entries(entries)


def load_mapping(input_json: Path) -> PakMapping:
    return PakMapping.model_validate(json_load(input_json))


def exe_to_json(
    input_exe: Path, output_json: Path, build: Build, check_sections: bool = False
) -> None:
    config = get_config(build)
    LOG.info("Extracting %s listing from '%s'", build, input_exe.name)

    if check_sections:
        try:
            pe = pefile.PE(str(input_exe.resolve(strict=True)), fast_load=True)
        except pefile.PEFormatError as e:
            raise DRConfigError(f"'{input_exe.name}' is not a PE file: {e}") from e
        try:
            check_section_deltas(pe, config.table)
        finally:
            pe.close()
        LOG.debug("Section deltas match %s", build)

    mapping = read_mapping(input_exe, config)
    json_dump(output_json, mapping.model_dump())
    LOG.info("Wrote '%s'", output_json)


def mapping_from_exe_command(args: Namespace) -> None:
    build = args.build if args.build is not None else identify_build(args.file)
    if build is Build.Unsupported:
        sys.stdout.write(UNSUPPORTED_MESSAGE + "\n")
        return

    config = get_config(build)
    output_json = output_resolve(args.output, config.mapping_name)
    exe_to_json(args.file, output_json, build, args.check_sections)


def mapping_from_exe_parser(parser: ArgumentParser) -> None:
    parser.set_defaults(command=mapping_from_exe_command)
    parser.add_argument("-f", "--file", type=path_exists, required=True)
    parser.add_argument("-o", "--output", type=dir_exists, default=None)
    parser.add_argument(
        "--build", type=Build.from_string, choices=SUPPORTED_BUILDS, default=None
    )
    parser.add_argument("--check-sections", action="store_true")
