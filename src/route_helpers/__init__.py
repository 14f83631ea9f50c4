"""route_helpers — readable controller/action checks for server-rendered templates.

Answers "is this request routed to controller X and action Y?" without
string comparisons in templates.

Basic usage::

    from kida import Environment, FileSystemLoader
    from route_helpers import register_helpers, render_template, RouteContext

    env = Environment(loader=FileSystemLoader("templates"))
    register_helpers(env)

    html = render_template(env, "users/form.html", RouteContext("users", "create"))

In the template::

    {% if is_new() %}Create user{% else %}Save changes{% end %}
    <a href="/users"{% if controller_is("users", "members") %} class="active"{% end %}>People</a>
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HelperConfig",
    "InvalidIdentifier",
    "RouteContext",
    "RouteHelperError",
    "RouteHelpers",
    "bind_route",
    "get_route",
    "register_helpers",
    "render_block",
    "render_template",
    "routed",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import route_helpers`` fast and defers the kida import until
    template integration is actually used.
    """
    if name == "HelperConfig":
        from route_helpers.config import HelperConfig

        return HelperConfig

    if name == "RouteHelpers":
        from route_helpers.helpers import RouteHelpers

        return RouteHelpers

    if name in ("RouteContext", "bind_route", "get_route", "routed"):
        from route_helpers import context as _ctx

        return getattr(_ctx, name)

    if name in ("register_helpers", "render_block", "render_template"):
        from route_helpers.templating import integration as _tmpl

        return getattr(_tmpl, name)

    if name in ("ConfigurationError", "InvalidIdentifier", "RouteHelperError"):
        from route_helpers import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
