"""mapperscan CLI: list the installed libraries that depend on the mapping library.

Usage::

    mapperscan [options]

Options::

    --reference NAME   Add a reference library (repeatable)
    --types            Also scan the candidates and list their mapping types
    --verbose / -v     Enable verbose logging
"""

import argparse
import sys
from typing import Optional

from mapperscan.builders import resolve_candidates
from mapperscan.config import ResolverSettings
from mapperscan.errors import MapperScanError
from mapperscan.logging import configure_logging
from mapperscan.scanning import scan_libraries


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mapperscan",
        description="List installed libraries that depend on a reference library.",
    )
    parser.add_argument(
        "--reference",
        action="append",
        default=[],
        metavar="NAME",
        help="Additional reference library name (may be given more than once)",
    )
    parser.add_argument(
        "--types",
        action="store_true",
        help="Scan candidate libraries and list the mapping types they define",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``mapperscan`` command."""
    args = _build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = ResolverSettings.from_env()
        reference_names = settings.reference_libraries.union(
            ResolverSettings.with_references(args.reference).reference_libraries
        )
        candidates = resolve_candidates(reference_names=reference_names)
        for library in candidates:
            print(library.name)
        if args.types:
            for scanned_type in scan_libraries(candidates):
                print(f"  {scanned_type.kind}: {scanned_type.name} ({scanned_type.library})")
    except MapperScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
