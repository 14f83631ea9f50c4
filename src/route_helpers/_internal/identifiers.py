"""Identifier normalization.

Templates pass controller and action names as plain strings, handlers
often pass enum members. Both collapse to one canonical text form here,
at the function edge, so predicates only ever compare ``str`` to ``str``.
"""

from collections.abc import Iterable
from enum import Enum

from route_helpers._internal.types import Identifier
from route_helpers.errors import InvalidIdentifier


def normalize(value: Identifier) -> str:
    """Return the comparison text for a controller or action name.

    ``StrEnum`` members are already ``str`` and compare by value. Other
    enum members use their value when it is a string, else their name.
    """
    if isinstance(value, str):
        # str-mixin enums would repr as "Cls.NAME" through str()
        return str.__str__(value)
    if isinstance(value, Enum):
        return value.value if isinstance(value.value, str) else value.name
    raise InvalidIdentifier(value)


def normalize_all(values: Iterable[Identifier]) -> frozenset[str]:
    """Normalize a name list into a membership set."""
    return frozenset(normalize(v) for v in values)
