"""Kida environment binding for route helpers.

Registers the helpers as globals on a kida Environment once at startup.
The globals read the ambient route on every call, so the same
environment renders correctly for every request as long as the route is
bound (``bind_route``, ``routed``, or the render helpers below).
"""

import logging
from collections.abc import Callable
from typing import Any

from kida import Environment

from route_helpers.config import HelperConfig
from route_helpers.context import RouteContext, bind_route, get_route
from route_helpers.helpers import RouteHelpers

logger = logging.getLogger("route_helpers.templating")


def register_helpers(
    env: Environment,
    config: HelperConfig | None = None,
    source: RouteContext | Callable[[], RouteContext] = get_route,
) -> list[str]:
    """Add every route helper to *env* as a template global.

    Called once during app setup. Returns the registered global names::

        env = Environment(loader=FileSystemLoader("templates"))
        register_helpers(env, HelperConfig(prefix="route_"))

    Raises ``ConfigurationError`` when *config* is invalid.
    """
    helpers = RouteHelpers(source)
    globals_ = helpers.as_globals(config)
    for name, value in globals_.items():
        env.add_global(name, value)
    logger.debug("Registered %d route helper globals", len(globals_))
    return list(globals_)


def render_template(
    env: Environment,
    name: str,
    route: RouteContext,
    context: dict[str, Any] | None = None,
) -> str:
    """Render a full template to string with *route* bound."""
    template = env.get_template(name)
    with bind_route(route):
        return template.render(context or {})


def render_block(
    env: Environment,
    name: str,
    block: str,
    route: RouteContext,
    context: dict[str, Any] | None = None,
) -> str:
    """Render a named block from a template to string with *route* bound."""
    template = env.get_template(name)
    with bind_route(route):
        return template.render_block(block, context or {})
