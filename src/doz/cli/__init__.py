"""Doz CLI — validate JSON documents against a rule schema.

Entry point registered as ``doz`` in ``pyproject.toml``::

    [project.scripts]
    doz = "doz.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``doz`` command."""
    parser = argparse.ArgumentParser(
        prog="doz",
        description="Doz — declarative field validation.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-field failures to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- doz check --------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a JSON document")
    check_parser.add_argument(
        "schema",
        help="Import string of a field → rule mapping (e.g. myapp.schemas:USER)",
    )
    check_parser.add_argument(
        "file",
        help="Path to a JSON object, or - for stdin",
    )
    check_parser.add_argument(
        "--policy",
        choices=("all", "last"),
        default="all",
        help="How the overall valid flag is computed (default: all)",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from doz.cli._check import run_check

        run_check(args)
