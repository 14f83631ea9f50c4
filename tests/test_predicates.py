"""Tests for route_helpers.predicates — pure checks against a RouteContext."""

from __future__ import annotations

from enum import Enum, StrEnum

import pytest

from route_helpers.context import RouteContext
from route_helpers.errors import InvalidIdentifier
from route_helpers.predicates import (
    ALIASES,
    PREDICATES,
    action_and_controller_in,
    action_is,
    action_with_controllers,
    controller_is,
    controller_with_actions,
    edit_for_controllers,
    index_for_controllers,
    is_edit,
    is_index,
    is_new,
    is_show,
    new_for_controllers,
    show_for_controllers,
)


class Section(StrEnum):
    USERS = "users"
    MEMBERS = "members"


class Verb(Enum):
    index = 1
    show = 2


USERS_CREATE = RouteContext("users", "create")
MEMBERS_UPDATE = RouteContext("members", "update")


# ── controller_is / action_is ────────────────────────────────────────────


class TestControllerIs:
    def test_single_match(self) -> None:
        assert controller_is(USERS_CREATE, "users") is True

    def test_any_of_many(self) -> None:
        assert controller_is(USERS_CREATE, "members", "users", "guests") is True

    def test_no_match(self) -> None:
        assert controller_is(USERS_CREATE, "members", "guests") is False

    def test_empty_names_is_false(self) -> None:
        assert controller_is(USERS_CREATE) is False

    def test_case_sensitive(self) -> None:
        assert controller_is(USERS_CREATE, "Users") is False

    def test_duplicates_and_order_irrelevant(self) -> None:
        assert controller_is(USERS_CREATE, "users", "users") is True
        assert controller_is(USERS_CREATE, "guests", "users") == controller_is(
            USERS_CREATE, "users", "guests"
        )

    def test_str_enum_member(self) -> None:
        assert controller_is(USERS_CREATE, Section.USERS) is True
        assert controller_is(USERS_CREATE, Section.MEMBERS) is False

    def test_unpacked_list(self) -> None:
        names = ["users", "members", "guests"]
        assert controller_is(MEMBERS_UPDATE, *names) is True

    def test_non_text_raises(self) -> None:
        with pytest.raises(InvalidIdentifier):
            controller_is(USERS_CREATE, 42)  # type: ignore[arg-type]

    def test_invalid_identifier_is_type_error(self) -> None:
        with pytest.raises(TypeError, match="int: 42"):
            controller_is(USERS_CREATE, 42)  # type: ignore[arg-type]


class TestActionIs:
    def test_match(self) -> None:
        assert action_is(USERS_CREATE, "new", "create") is True

    def test_no_match(self) -> None:
        assert action_is(USERS_CREATE, "index", "show") is False

    def test_empty_names_is_false(self) -> None:
        assert action_is(USERS_CREATE) is False

    def test_plain_enum_uses_name(self) -> None:
        route = RouteContext("users", "index")
        assert action_is(route, Verb.index) is True
        assert action_is(route, Verb.show) is False


# ── combined predicates ──────────────────────────────────────────────────


class TestActionAndControllerIn:
    def test_both_match(self) -> None:
        assert action_and_controller_in(USERS_CREATE, ["new", "create"], ["users"]) is True

    def test_action_mismatch(self) -> None:
        assert action_and_controller_in(USERS_CREATE, ["index"], ["users"]) is False

    def test_controller_mismatch(self) -> None:
        assert action_and_controller_in(USERS_CREATE, ["create"], ["members"]) is False

    def test_accepts_tuples_and_generators(self) -> None:
        actions = (a for a in ("create",))
        assert action_and_controller_in(USERS_CREATE, actions, ("users", "members")) is True

    def test_empty_lists_are_false(self) -> None:
        assert action_and_controller_in(USERS_CREATE, [], ["users"]) is False
        assert action_and_controller_in(USERS_CREATE, ["create"], []) is False


class TestControllerWithActions:
    def test_match(self) -> None:
        assert controller_with_actions(USERS_CREATE, "users", "new", "create") is True

    def test_other_controller_is_false_even_when_action_matches(self) -> None:
        assert controller_with_actions(USERS_CREATE, "members", "new", "create") is False

    def test_no_actions_is_false(self) -> None:
        assert controller_with_actions(USERS_CREATE, "users") is False

    def test_enum_controller(self) -> None:
        assert controller_with_actions(USERS_CREATE, Section.USERS, "create") is True


class TestActionWithControllers:
    def test_match(self) -> None:
        assert action_with_controllers(MEMBERS_UPDATE, "update", "users", "members") is True

    def test_other_action_is_false(self) -> None:
        assert action_with_controllers(MEMBERS_UPDATE, "edit", "members") is False

    def test_no_controllers_is_false(self) -> None:
        assert action_with_controllers(MEMBERS_UPDATE, "update") is False


# ── action shortcuts ─────────────────────────────────────────────────────


class TestActionShortcuts:
    def test_is_index(self) -> None:
        assert is_index(RouteContext("users", "index")) is True
        assert is_index(USERS_CREATE) is False

    def test_is_show(self) -> None:
        assert is_show(RouteContext("users", "show")) is True
        assert is_show(RouteContext("users", "index")) is False

    @pytest.mark.parametrize(
        ("action", "loose", "strict"),
        [("new", True, True), ("create", True, False), ("edit", False, False)],
    )
    def test_is_new(self, action: str, loose: bool, strict: bool) -> None:
        route = RouteContext("users", action)
        assert is_new(route) is loose
        assert is_new(route, strict=True) is strict

    @pytest.mark.parametrize(
        ("action", "loose", "strict"),
        [("edit", True, True), ("update", True, False), ("new", False, False)],
    )
    def test_is_edit(self, action: str, loose: bool, strict: bool) -> None:
        route = RouteContext("users", action)
        assert is_edit(route) is loose
        assert is_edit(route, strict=True) is strict


class TestForControllers:
    def test_index_for_controllers(self) -> None:
        assert index_for_controllers(RouteContext("users", "index"), "users") is True
        assert index_for_controllers(RouteContext("members", "index"), "users") is False
        assert index_for_controllers(RouteContext("users", "show"), "users") is False

    def test_show_for_controllers(self) -> None:
        assert show_for_controllers(RouteContext("members", "show"), "users", "members") is True
        assert show_for_controllers(RouteContext("members", "show")) is False

    def test_new_for_controllers_includes_create(self) -> None:
        assert new_for_controllers(USERS_CREATE, "users") is True
        assert new_for_controllers(USERS_CREATE, "members") is False

    def test_edit_for_controllers(self) -> None:
        assert edit_for_controllers(MEMBERS_UPDATE, "users", "members") is True
        assert edit_for_controllers(MEMBERS_UPDATE, "guests") is False


# ── scenarios ────────────────────────────────────────────────────────────


class TestScenarios:
    def test_failed_create_rerenders_new(self) -> None:
        assert is_new(USERS_CREATE) is True
        assert is_new(USERS_CREATE, True) is False
        assert controller_with_actions(USERS_CREATE, "users", "new", "create") is True
        assert controller_with_actions(USERS_CREATE, "members", "new", "create") is False

    def test_failed_update_rerenders_edit(self) -> None:
        assert is_edit(MEMBERS_UPDATE) is True
        assert edit_for_controllers(MEMBERS_UPDATE, "users", "members") is True
        assert edit_for_controllers(MEMBERS_UPDATE, "guests") is False

    def test_repeated_calls_agree(self) -> None:
        first = controller_is(USERS_CREATE, "users", "members")
        assert controller_is(USERS_CREATE, "users", "members") is first
        assert USERS_CREATE == RouteContext("users", "create")


# ── registries ───────────────────────────────────────────────────────────


class TestRegistries:
    def test_predicates_are_module_functions(self) -> None:
        assert PREDICATES["controller_is"] is controller_is
        assert PREDICATES["edit_for_controllers"] is edit_for_controllers
        assert len(PREDICATES) == 13

    def test_aliases_point_at_canonical_names(self) -> None:
        assert set(ALIASES.values()) <= PREDICATES.keys()
        assert ALIASES["controller_in"] == "controller_is"
        assert ALIASES["action_new"] == "is_new"

    def test_aliases_do_not_shadow_canonical_names(self) -> None:
        assert not set(ALIASES) & PREDICATES.keys()
