"""Helper registration configuration.

HelperConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HelperConfig:
    """How route helpers are exposed to templates. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = HelperConfig(prefix="route_", aliases=True)
    """

    # Prepended to every template global name ("route_" -> route_is_new)
    prefix: str = ""

    # Also register the older alias spellings (controller_in, action_new, ...)
    aliases: bool = False

    # Canonical helper names to leave out
    exclude: tuple[str, ...] = ()
