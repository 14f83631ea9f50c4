"""Route helpers bound to a route source.

``RouteHelpers`` is what templates see. Each method mirrors a function in
``route_helpers.predicates`` minus the ``route`` argument, and resolves the
route from its source on every call — nothing is cached, so one instance
registered at startup serves every request::

    helpers = RouteHelpers()                      # ambient route (get_route)
    helpers = RouteHelpers(RouteContext("users", "show"))  # fixed route
"""

from collections.abc import Callable, Iterable
from typing import Any

from route_helpers import predicates
from route_helpers._internal.types import Identifier
from route_helpers.config import HelperConfig
from route_helpers.context import RouteContext, get_route
from route_helpers.errors import ConfigurationError


class RouteHelpers:
    """Predicates bound to a ``RouteContext`` or a callable returning one."""

    __slots__ = ("_source",)

    def __init__(self, source: RouteContext | Callable[[], RouteContext] = get_route) -> None:
        self._source = source

    @property
    def route(self) -> RouteContext:
        """The route as of this call."""
        source = self._source
        if isinstance(source, RouteContext):
            return source
        return source()

    def controller_is(self, *names: Identifier) -> bool:
        return predicates.controller_is(self.route, *names)

    def action_is(self, *names: Identifier) -> bool:
        return predicates.action_is(self.route, *names)

    def action_and_controller_in(
        self, action_names: Iterable[Identifier], controller_names: Iterable[Identifier]
    ) -> bool:
        return predicates.action_and_controller_in(self.route, action_names, controller_names)

    def controller_with_actions(self, controller: Identifier, *actions: Identifier) -> bool:
        return predicates.controller_with_actions(self.route, controller, *actions)

    def action_with_controllers(self, action: Identifier, *controllers: Identifier) -> bool:
        return predicates.action_with_controllers(self.route, action, *controllers)

    def is_index(self) -> bool:
        return predicates.is_index(self.route)

    def is_show(self) -> bool:
        return predicates.is_show(self.route)

    def is_new(self, strict: bool = False) -> bool:
        return predicates.is_new(self.route, strict)

    def is_edit(self, strict: bool = False) -> bool:
        return predicates.is_edit(self.route, strict)

    def index_for_controllers(self, *names: Identifier) -> bool:
        return predicates.index_for_controllers(self.route, *names)

    def show_for_controllers(self, *names: Identifier) -> bool:
        return predicates.show_for_controllers(self.route, *names)

    def new_for_controllers(self, *names: Identifier) -> bool:
        return predicates.new_for_controllers(self.route, *names)

    def edit_for_controllers(self, *names: Identifier) -> bool:
        return predicates.edit_for_controllers(self.route, *names)

    def as_globals(self, config: HelperConfig | None = None) -> dict[str, Callable[..., Any]]:
        """Map template global names to bound helper methods.

        Raises ``ConfigurationError`` for a prefix that would not form a
        valid template name, or for unknown names in ``config.exclude``.
        """
        config = config or HelperConfig()
        _check_config(config)

        names = [n for n in predicates.PREDICATES if n not in config.exclude]
        result = {f"{config.prefix}{name}": getattr(self, name) for name in names}
        if config.aliases:
            for alias, canonical in predicates.ALIASES.items():
                if canonical not in config.exclude:
                    result[f"{config.prefix}{alias}"] = getattr(self, canonical)
        return result

    def __repr__(self) -> str:
        source = self._source
        if isinstance(source, RouteContext):
            return f"<RouteHelpers {source}>"
        return f"<RouteHelpers source={getattr(source, '__name__', source)!r}>"


def _check_config(config: HelperConfig) -> None:
    if config.prefix and not config.prefix.isidentifier():
        msg = f"Helper prefix {config.prefix!r} is not a valid identifier"
        raise ConfigurationError(msg)
    unknown = sorted(set(config.exclude) - predicates.PREDICATES.keys())
    if unknown:
        msg = f"Unknown helper name(s) in exclude: {', '.join(unknown)}"
        raise ConfigurationError(msg)
