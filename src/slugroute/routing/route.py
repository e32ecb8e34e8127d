"""Reference types, dispatch descriptors, and generation targets."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class ReferenceType(IntEnum):
    """How a generated URL should reference the target.

    Values follow the usual URL-generator numbering so hosts can pass
    their own integer constants straight through.
    """

    ABSOLUTE_URL = 0
    ABSOLUTE_PATH = 1
    RELATIVE_PATH = 2
    NETWORK_PATH = 3


@dataclass(frozen=True, slots=True)
class DispatchDescriptor:
    """Result of a successful slug match.

    Tells the host which controller to run, under which route name,
    with the resolved category.
    """

    controller: str
    route: str
    category: Any

    def as_dict(self) -> dict[str, Any]:
        """Return the ``_controller`` / ``_route`` / ``category`` mapping."""
        return {
            "_controller": self.controller,
            "_route": self.route,
            "category": self.category,
        }


@dataclass(frozen=True, slots=True)
class ByName:
    """Generate from a route name plus a ``slug`` parameter."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ByObject:
    """Generate from an object that knows its own slug."""

    source: Any

    def __str__(self) -> str:
        return str(self.source)


type GenerationTarget = ByName | ByObject


def target_of(value: Any) -> GenerationTarget:
    """Wrap a raw ``generate()`` target in its tagged form.

    Strings are route names; everything else is an object to ask for
    a slug. Already-wrapped targets pass through.
    """
    if isinstance(value, ByName | ByObject):
        return value
    if isinstance(value, str):
        return ByName(value)
    return ByObject(value)
