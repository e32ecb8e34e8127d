"""``slugroute generate``: build a listing URL from a slug and query params."""

import argparse
import sys

from slugroute.categories import InMemoryCategoryRepository
from slugroute.errors import RouteNotFound
from slugroute.routing.context import RequestContext
from slugroute.routing.listing import ListingRouter


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Turn ``KEY=VALUE`` strings into a dict, keeping their order.

    Raises ``ValueError`` for an entry without ``=`` or with an empty key.
    """
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Invalid parameter {pair!r}, expected KEY=VALUE"
            raise ValueError(msg)
        params[key] = value
    return params


def run_generate(args: argparse.Namespace) -> None:
    """Print the URL for ``args.slug`` under ``args.base_url``."""
    try:
        params = parse_params(args.param)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    # Generation never consults the repository
    router = ListingRouter(
        InMemoryCategoryRepository(),
        route=args.route,
        context=RequestContext(args.base_url),
    )
    try:
        url = router.generate(args.route, {**params, "slug": args.slug})
    except RouteNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(url)
