"""
Tests for the navigation reducer.
Run with: pytest Tests/Navigation/test_nav_reducer.py -v
"""

import pytest

from chatbook_nav.Event_Handlers.action_types import (
    Action,
    InitialFetchCompleted,
    LoginSucceeded,
    Rehydrate,
    INITIAL_FETCH_COMPLETE,
    LOGIN_SUCCESS,
    NAVIGATE_PUSH,
    REHYDRATE,
)
from chatbook_nav.navigation.nav_reducer import nav_reducer
from chatbook_nav.state.navigation_state import (
    NULL_NAVIGATION_STATE,
    NavigationState,
    Route,
    get_state_for_route,
)


def rehydrate(accounts):
    return Rehydrate(payload={"accounts": accounts, "users": [], "realm": {}})


class TestLoginSuccess:

    def test_replaces_existing_stack_with_main(self, deep_stack):
        new_state = nav_reducer(deep_stack, LoginSucceeded())

        assert new_state.index == 0
        assert len(new_state.routes) == 1
        assert new_state.routes[0].route_name == "main"

    def test_replaces_main_too(self, main_state):
        # Login always builds a fresh stack
        new_state = nav_reducer(main_state, LoginSucceeded())
        assert new_state == main_state

    def test_from_empty_sentinel(self):
        new_state = nav_reducer(NULL_NAVIGATION_STATE, LoginSucceeded())
        assert new_state == get_state_for_route("main")

    def test_twice_gives_equal_states(self, deep_stack):
        first = nav_reducer(deep_stack, LoginSucceeded())
        second = nav_reducer(first, LoginSucceeded())
        assert first == second

    def test_does_not_touch_previous_state(self, deep_stack):
        before = deep_stack.to_dict()
        nav_reducer(deep_stack, LoginSucceeded())
        assert deep_stack.to_dict() == before


class TestInitialFetchComplete:

    def test_keeps_state_object_when_already_on_main(self, main_state):
        new_state = nav_reducer(main_state, InitialFetchCompleted())
        assert new_state is main_state

    def test_keeps_deeper_stack_focused_on_main(self):
        state = NavigationState(
            index=1,
            routes=(Route(key="welcome", route_name="welcome"), Route(key="main-1", route_name="main")),
        )
        assert nav_reducer(state, InitialFetchCompleted()) is state

    def test_moves_to_main_from_other_route(self, deep_stack):
        new_state = nav_reducer(deep_stack, InitialFetchCompleted())

        assert new_state is not deep_stack
        assert new_state == get_state_for_route("main")

    def test_main_below_focus_is_not_enough(self):
        state = NavigationState(
            index=1,
            routes=(Route(key="main", route_name="main"), Route(key="search", route_name="search")),
        )
        new_state = nav_reducer(state, InitialFetchCompleted())
        assert new_state == get_state_for_route("main")

    def test_from_empty_sentinel(self):
        new_state = nav_reducer(NULL_NAVIGATION_STATE, InitialFetchCompleted())
        assert new_state.current_route_name == "main"


class TestRehydrate:

    def test_no_previous_navigation_does_not_throw(self):
        nav = nav_reducer(NULL_NAVIGATION_STATE, rehydrate([{"apiKey": "123"}]))
        assert len(nav.routes) == 1

    def test_none_previous_state_is_sentinel(self):
        nav = nav_reducer(None, rehydrate([{"apiKey": "123"}]))
        assert nav.current_route_name == "main"

    @pytest.mark.parametrize("accounts, expected", [
        ([], "welcome"),
        ([{"apiKey": "123"}], "main"),
        ([{"realm": "https://example.com"}], "welcome"),
        ([{}, {}], "account"),
        ([
            {"realm": "https://example.com", "email": "johndoe@example.com"},
            {"realm": "https://example.com", "email": "janedoe@example.com"},
        ], "account"),
        ([{"realm": "https://example.com", "email": "johndoe@example.com"}], "welcome"),
        ([{"apiKey": "123"}, {}], "main"),
        ([{"apiKey": ""}], "welcome"),
    ])
    def test_route_from_accounts(self, accounts, expected):
        nav = nav_reducer(NULL_NAVIGATION_STATE, rehydrate(accounts))

        assert len(nav.routes) == 1
        assert nav.routes[0].route_name == expected

    @pytest.mark.parametrize("payload", [
        None,
        {},
        {"users": []},
        {"accounts": None},
        {"accounts": "not-a-list"},
        "garbage",
    ])
    def test_missing_or_malformed_accounts_act_like_empty(self, payload):
        nav = nav_reducer(NULL_NAVIGATION_STATE, Rehydrate(payload=payload))
        assert nav == nav_reducer(NULL_NAVIGATION_STATE, rehydrate([]))
        assert nav.current_route_name == "welcome"

    @pytest.mark.parametrize("accounts, expected", [
        ([{}, "x"], "account"),
        ([None], "welcome"),
        (["x", {"apiKey": "123"}], "account"),
        ([{"apiKey": "123"}, 42], "main"),
    ])
    def test_malformed_entries_keep_their_slot(self, accounts, expected):
        nav = nav_reducer(NULL_NAVIGATION_STATE, rehydrate(accounts))
        assert nav.current_route_name == expected

    def test_discards_previous_stack(self, deep_stack):
        nav = nav_reducer(deep_stack, rehydrate([{"apiKey": "123"}]))
        assert nav == get_state_for_route("main")


class TestActionShapes:

    def test_plain_mapping_actions(self, deep_stack):
        assert nav_reducer(deep_stack, {"kind": LOGIN_SUCCESS}).current_route_name == "main"
        nav = nav_reducer(deep_stack, {"kind": REHYDRATE, "payload": {"accounts": [{}, {}]}})
        assert nav.current_route_name == "account"

    def test_legacy_type_key(self, main_state):
        assert nav_reducer(main_state, {"type": INITIAL_FETCH_COMPLETE}) is main_state

    def test_generic_action_with_session_kind(self, deep_stack):
        nav = nav_reducer(deep_stack, Action(kind=REHYDRATE, payload={"accounts": []}))
        assert nav.current_route_name == "welcome"


class TestOtherActions:

    @pytest.mark.parametrize("action", [
        Action(kind="event-presence", payload={}),
        {"kind": "something-else"},
        {},
        None,
        object(),
    ])
    def test_unknown_action_keeps_state(self, deep_stack, action):
        assert nav_reducer(deep_stack, action) is deep_stack

    def test_unknown_action_on_sentinel(self):
        assert nav_reducer(NULL_NAVIGATION_STATE, {"kind": "nope"}) is NULL_NAVIGATION_STATE

    def test_fallback_result_is_used(self, main_state):
        pushed = get_state_for_route("search")
        nav = nav_reducer(main_state, Action(kind=NAVIGATE_PUSH), fallback=lambda state, action: pushed)
        assert nav is pushed

    def test_fallback_returning_none_keeps_state(self, main_state):
        assert nav_reducer(main_state, {"kind": "x"}, fallback=lambda state, action: None) is main_state

    def test_fallback_not_consulted_for_session_actions(self, deep_stack):
        def fallback(state, action):
            raise AssertionError("fallback should not be called")

        nav_reducer(deep_stack, LoginSucceeded(), fallback=fallback)
        nav_reducer(deep_stack, InitialFetchCompleted(), fallback=fallback)
        nav_reducer(deep_stack, rehydrate([]), fallback=fallback)
