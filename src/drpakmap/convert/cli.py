import argparse
import logging
import sys
from typing import List, Optional

from ..errors import DRError
from . import mapping
from .utils import configure_debug_logging

LOG = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=mapping.__doc__)
    mapping.mapping_from_exe_parser(parser)
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)
    configure_debug_logging("DEBUG" if args.verbose else "INFO")

    try:
        args.command(args)
    except DRError as e:
        LOG.error("Extraction failed: %s", e)
        sys.exit(1)
