"""Per-request context used when building URLs."""

from dataclasses import dataclass


@dataclass(slots=True)
class RequestContext:
    """Holds the base URL prefix of the current request.

    Mutable: the host sets it once per request before matching or
    generating. Not meant to be shared across threads.

    Usage::

        context = RequestContext("/app_dev.php")
        router.context = context
    """

    base_url: str = ""
