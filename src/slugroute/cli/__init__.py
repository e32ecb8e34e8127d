"""slugroute CLI: match paths and generate listing URLs from the shell.

Entry point registered as ``slugroute`` in ``pyproject.toml``::

    [project.scripts]
    slugroute = "slugroute.cli:main"
"""

import argparse
import logging
import sys

from slugroute.routing.listing import DEFAULT_CONTROLLER, DEFAULT_ROUTE


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``slugroute`` command."""
    parser = argparse.ArgumentParser(
        prog="slugroute",
        description="slugroute: category slug routing for listing pages.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log routing decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- slugroute match --------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a path to its category")
    match_parser.add_argument("path", help="Request path (e.g. /body-care/)")
    match_parser.add_argument(
        "--repository",
        required=True,
        help="Repository import string (e.g. shop.catalog:categories)",
    )
    match_parser.add_argument("--controller", default=DEFAULT_CONTROLLER, help="Controller identifier")
    match_parser.add_argument("--route", default=DEFAULT_ROUTE, help="Route name")

    # -- slugroute generate -----------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Build the listing URL for a slug")
    generate_parser.add_argument("slug", help="Category slug")
    generate_parser.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )
    generate_parser.add_argument("--base-url", default="", help="Base URL prefix (e.g. /app_dev.php)")
    generate_parser.add_argument("--route", default=DEFAULT_ROUTE, help="Route name")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "match":
        from slugroute.cli._match import run_match

        run_match(args)
    elif args.command == "generate":
        from slugroute.cli._generate import run_generate

        run_generate(args)
