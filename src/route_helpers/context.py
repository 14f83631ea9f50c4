"""Request-scoped route context via ContextVar.

Provides:
- ``RouteContext``: the (controller, action) pair for one request.
- ``route_var``: the current ``RouteContext`` for this task/thread.
- ``bind_route``: a context manager that sets and resets ``route_var``.
- ``routed``: a handler decorator that binds the route around each call.

The route is explicitly opt-in — if nothing binds it, ``get_route()``
raises ``LookupError``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    free-threading (3.14t). No locks needed.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from route_helpers._internal.identifiers import normalize
from route_helpers._internal.types import Handler, Identifier

logger = logging.getLogger("route_helpers.context")

# Module suffixes stripped when deriving a controller name from a handler
_CONTROLLER_SUFFIXES = ("_controller", "_views")


@dataclass(frozen=True, slots=True)
class RouteContext:
    """The controller and action a request was routed to.

    Both names are stored as canonical text. Build one directly or let
    ``from_handler`` derive it from the handler function::

        RouteContext("users", "create")
        RouteContext.from_handler(users_controller.create)
    """

    controller: str
    action: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "controller", normalize(self.controller))
        object.__setattr__(self, "action", normalize(self.action))

    @classmethod
    def from_handler(cls, handler: Handler) -> RouteContext:
        """Derive the route from a handler's module and function name.

        ``app.controllers.users_controller.create`` becomes
        ``RouteContext("users", "create")``.
        """
        handler = inspect.unwrap(handler)
        module = getattr(handler, "__module__", None) or ""
        controller = module.rpartition(".")[2]
        for suffix in _CONTROLLER_SUFFIXES:
            if controller.endswith(suffix) and controller != suffix:
                controller = controller.removesuffix(suffix)
                break
        return cls(controller, handler.__name__)

    def __str__(self) -> str:
        return f"{self.controller}#{self.action}"


# -- Route context --

route_var: ContextVar[RouteContext] = ContextVar("route_helpers_route")
"""The current route. Set by ``bind_route`` or ``routed``."""


def get_route() -> RouteContext:
    """Return the current route.

    Raises ``LookupError`` if called outside a bound route scope.
    """
    return route_var.get()


def _coerce(route: RouteContext | Identifier, action: Identifier | None) -> RouteContext:
    if isinstance(route, RouteContext):
        if action is not None:
            msg = "Pass either a RouteContext or controller and action names, not both"
            raise TypeError(msg)
        return route
    if action is None:
        msg = "bind_route() needs an action name when given a controller name"
        raise TypeError(msg)
    return RouteContext(route, action)


@contextmanager
def bind_route(
    route: RouteContext | Identifier, action: Identifier | None = None
) -> Iterator[RouteContext]:
    """Bind the current route for the duration of a ``with`` block.

    Accepts a ``RouteContext`` or a controller and action name::

        with bind_route("users", "index"):
            html = template.render(ctx)

    The previous route (or none) is restored on exit, even on error.
    """
    bound = _coerce(route, action)
    token = route_var.set(bound)
    logger.debug("Bound route %s", bound)
    try:
        yield bound
    finally:
        route_var.reset(token)


# -- Handler decorator --


def routed(
    controller: Identifier | None = None, action: Identifier | None = None
) -> Callable[[Handler], Handler]:
    """Bind the route around every call of a sync or async handler.

    Names that are not given are derived with ``RouteContext.from_handler``::

        @routed()
        def index():
            return render_template(env, "users/index.html", get_route())

        @routed("admin_users", "index")
        async def admin_index():
            ...
    """

    def decorator(handler: Handler) -> Handler:
        derived = RouteContext.from_handler(handler)
        route = RouteContext(
            controller if controller is not None else derived.controller,
            action if action is not None else derived.action,
        )

        if inspect.iscoroutinefunction(handler):

            @functools.wraps(handler)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with bind_route(route):
                    return await handler(*args, **kwargs)

            return async_wrapper

        @functools.wraps(handler)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with bind_route(route):
                return handler(*args, **kwargs)

        return wrapper

    return decorator
