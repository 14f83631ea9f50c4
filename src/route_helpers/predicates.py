"""Route predicates — readable checks against the current controller and action.

Every predicate takes the ``RouteContext`` explicitly as its first argument
and is a pure function of it and the names passed in. Name lists accept
any number of identifiers; an empty list matches nothing.

Templates normally reach these through ``RouteHelpers`` (bound to the
ambient route), not directly::

    {% if controller_is("users", "members") %} ... {% end %}
    {% if is_new() %}Create{% else %}Save{% end %}
"""

from collections.abc import Callable, Iterable
from typing import Any

from route_helpers._internal.identifiers import normalize, normalize_all
from route_helpers._internal.types import Identifier
from route_helpers.context import RouteContext

# Actions that re-render the "new" / "edit" template after a failed submit
NEW_ACTIONS = ("new", "create")
EDIT_ACTIONS = ("edit", "update")


def controller_is(route: RouteContext, *names: Identifier) -> bool:
    """True when the current controller is any of *names*.

    Example:
        controller_is(route, "users", Section.MEMBERS)

    """
    return route.controller in normalize_all(names)


def action_is(route: RouteContext, *names: Identifier) -> bool:
    """True when the current action is any of *names*.

    Example:
        action_is(route, "index", "show")

    """
    return route.action in normalize_all(names)


def action_and_controller_in(
    route: RouteContext,
    action_names: Iterable[Identifier],
    controller_names: Iterable[Identifier],
) -> bool:
    """True when the action is in *action_names* and the controller in *controller_names*.

    Example:
        action_and_controller_in(route, ["index", "show"], ["users", "members"])

    """
    return action_is(route, *action_names) and controller_is(route, *controller_names)


def controller_with_actions(
    route: RouteContext, controller: Identifier, *actions: Identifier
) -> bool:
    """True when the controller is exactly *controller* and the action is any of *actions*."""
    return route.controller == normalize(controller) and action_is(route, *actions)


def action_with_controllers(
    route: RouteContext, action: Identifier, *controllers: Identifier
) -> bool:
    """True when the action is exactly *action* and the controller is any of *controllers*."""
    return route.action == normalize(action) and controller_is(route, *controllers)


def is_index(route: RouteContext) -> bool:
    return route.action == "index"


def is_show(route: RouteContext) -> bool:
    return route.action == "show"


def is_new(route: RouteContext, strict: bool = False) -> bool:
    """True for the ``new`` action, and for ``create`` unless *strict*.

    A failed ``create`` usually re-renders the ``new`` template, so both
    count as "new" by default.
    """
    if strict:
        return route.action == "new"
    return action_is(route, *NEW_ACTIONS)


def is_edit(route: RouteContext, strict: bool = False) -> bool:
    """True for the ``edit`` action, and for ``update`` unless *strict*."""
    if strict:
        return route.action == "edit"
    return action_is(route, *EDIT_ACTIONS)


def index_for_controllers(route: RouteContext, *names: Identifier) -> bool:
    return is_index(route) and controller_is(route, *names)


def show_for_controllers(route: RouteContext, *names: Identifier) -> bool:
    return is_show(route) and controller_is(route, *names)


def new_for_controllers(route: RouteContext, *names: Identifier) -> bool:
    return is_new(route) and controller_is(route, *names)


def edit_for_controllers(route: RouteContext, *names: Identifier) -> bool:
    return is_edit(route) and controller_is(route, *names)


# Canonical predicate names, in registration order.
PREDICATES: dict[str, Callable[..., Any]] = {
    "controller_is": controller_is,
    "action_is": action_is,
    "action_and_controller_in": action_and_controller_in,
    "controller_with_actions": controller_with_actions,
    "action_with_controllers": action_with_controllers,
    "is_index": is_index,
    "is_show": is_show,
    "is_new": is_new,
    "is_edit": is_edit,
    "index_for_controllers": index_for_controllers,
    "show_for_controllers": show_for_controllers,
    "new_for_controllers": new_for_controllers,
    "edit_for_controllers": edit_for_controllers,
}

# Older template spellings, registered only with HelperConfig(aliases=True).
ALIASES: dict[str, str] = {
    "controller_in": "controller_is",
    "controller_name_in": "controller_is",
    "action_in": "action_is",
    "action_name_in": "action_is",
    "actions_controllers": "action_and_controller_in",
    "controller_actions": "controller_with_actions",
    "action_controllers": "action_with_controllers",
    "action_index": "is_index",
    "action_show": "is_show",
    "action_new": "is_new",
    "action_edit": "is_edit",
    "controller_index": "index_for_controllers",
    "controller_show": "show_for_controllers",
    "controller_new": "new_for_controllers",
    "controller_edit": "edit_for_controllers",
}
