"""route_helpers exception hierarchy.

Shared across predicates, context binding, and template registration so
callers catch one family of types.
"""

from typing import Any


class RouteHelperError(Exception):
    """Base for all route_helpers errors."""


class ConfigurationError(RouteHelperError):
    """Raised when ``HelperConfig`` is invalid.

    Typically surfaces from ``register_helpers()`` at startup.
    """


class InvalidIdentifier(RouteHelperError, TypeError):  # noqa: N818 — mirrors TypeError
    """A controller or action name that cannot be compared as text.

    Only ``str`` and ``enum.Enum`` members are accepted. Passing anything
    else is a programming error, not a runtime condition to recover from.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Route identifiers must be str or Enum members, got {type(value).__name__}: {value!r}"
        )
