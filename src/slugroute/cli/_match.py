"""``slugroute match``: resolve a path through a repository.

Prints the dispatch descriptor as ``key: value`` lines.
"""

import argparse
import sys

from slugroute.errors import ConfigurationError, ResourceNotFound
from slugroute.routing.listing import ListingRouter
from slugroute.wiring import resolve_repository


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.path`` against the repository named by ``args.repository``."""
    try:
        repository = resolve_repository(args.repository)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    router = ListingRouter(repository, controller=args.controller, route=args.route)
    try:
        descriptor = router.match(args.path)
    except ResourceNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for key, value in descriptor.as_dict().items():
        print(f"{key}: {value}")
