"""
Unit tests for the onboarding flag and per-row expansion state.
"""

import random

import pytest
from pydantic import ValidationError

from basics.app.state import GreetingRow, Screen, ViewSnapshot, ViewState, initial_state
from basics.shared.core import events


class TestInitialState:
    """A fresh session shows onboarding with every row collapsed."""

    def test_onboarding_shown(self, view):
        assert view.show_onboarding is True
        assert view.screen is Screen.ONBOARDING

    def test_all_rows_collapsed(self, view):
        assert len(view.rows) == 1000
        assert all(not row.expanded for row in view.rows)
        assert view.expanded_rows == []

    def test_rows_keep_source_order(self, view):
        assert view.row_ids[:3] == ("0", "1", "2")
        assert view.row_ids[-1] == "999"

    def test_initial_state_shape(self):
        state = initial_state(["a", "b"])
        assert state == {"show_onboarding": True, "rows": {"a": False, "b": False}}

    def test_as_dict_matches_initial_state(self, bus):
        view = ViewState.initial(bus, ["a", "b"])
        assert view.as_dict() == initial_state(["a", "b"])

    def test_duplicate_row_ids_rejected(self, bus):
        with pytest.raises(ValueError, match="unique"):
            ViewState(bus, ["1", "1"])

    def test_empty_row_source(self, bus):
        view = ViewState(bus, [])
        assert view.rows == []
        view.continue_onboarding()
        assert view.screen is Screen.GREETINGS


class TestContinueOnboarding:
    """Onboarding -> Greetings, and never back."""

    def test_switches_to_greetings(self, view):
        view.continue_onboarding()
        assert view.show_onboarding is False
        assert view.screen is Screen.GREETINGS

    def test_repeated_calls_stay_on_greetings(self, view):
        for _ in range(3):
            view.continue_onboarding()
        assert view.show_onboarding is False

    def test_rows_present_and_collapsed_after_continue(self, view):
        view.continue_onboarding()
        assert len(view.rows) == 1000
        assert all(not view.is_expanded(row_id) for row_id in view.row_ids)

    def test_second_call_does_not_notify(self, view, recorded):
        view.continue_onboarding()
        view.continue_onboarding()
        assert recorded == [{"kind": events.KIND_SCREEN, "screen": "greetings"}]

    def test_does_not_touch_rows(self, view):
        view.toggle_expanded("7")
        view.continue_onboarding()
        assert view.expanded_rows == ["7"]


class TestToggleExpanded:
    """Collapsed <-> Expanded, per row."""

    @pytest.mark.parametrize("times", [1, 2, 3, 4, 7])
    def test_parity(self, view, times):
        for _ in range(times):
            view.toggle_expanded("42")
        assert view.is_expanded("42") == (times % 2 == 1)

    def test_returns_new_value(self, view):
        assert view.toggle_expanded("5") is True
        assert view.toggle_expanded("5") is False

    def test_other_rows_unaffected(self, view):
        rng = random.Random(1234)
        for _ in range(50):
            view.toggle_expanded("10")
            other = str(rng.randrange(11, 1000))
            assert view.is_expanded(other) is False

    def test_many_rows_expanded_at_once(self, view):
        for row_id in ("1", "2", "3"):
            view.toggle_expanded(row_id)
        assert view.expanded_rows == ["1", "2", "3"]

    def test_toggle_on_onboarding_keeps_screen(self, view):
        view.toggle_expanded("3")
        assert view.is_expanded("3") is True
        assert view.expanded_rows == ["3"]
        assert view.screen is Screen.ONBOARDING

    def test_toggle_twice_after_continue_collapses(self, view):
        view.continue_onboarding()
        view.toggle_expanded("0")
        view.toggle_expanded("0")
        assert view.is_expanded("0") is False
        assert view.screen is Screen.GREETINGS

    def test_unknown_row_raises(self, view):
        with pytest.raises(KeyError):
            view.toggle_expanded("1000")
        with pytest.raises(KeyError):
            view.is_expanded("nope")

    def test_rows_reflect_toggle(self, view):
        view.toggle_expanded("1")
        assert view.rows[1] == GreetingRow("1", True)
        assert view.rows[0] == GreetingRow("0", False)


class TestSubscriptions:
    """Listeners run after each applied mutation."""

    def test_row_payload(self, view, recorded):
        view.toggle_expanded("9")
        assert recorded == [{"kind": events.KIND_ROW, "row_id": "9", "expanded": True}]

    def test_listener_reads_latest_state(self, view):
        seen = []
        view.subscribe(lambda payload: seen.append((view.screen, view.expanded_rows)))

        view.toggle_expanded("2")
        view.continue_onboarding()

        assert seen == [
            (Screen.ONBOARDING, ["2"]),
            (Screen.GREETINGS, ["2"]),
        ]

    def test_unsubscribe_stops_notifications(self, view):
        seen = []
        unsubscribe = view.subscribe(seen.append)
        view.toggle_expanded("1")
        unsubscribe()
        view.toggle_expanded("1")
        assert len(seen) == 1

    def test_topic_specific_events(self, view, bus):
        toggled, screens = [], []
        bus.subscribe(events.TOPIC_ROW_TOGGLED, toggled.append)
        bus.subscribe(events.TOPIC_SCREEN_CHANGED, screens.append)

        view.toggle_expanded("4")
        view.continue_onboarding()

        assert [p["row_id"] for p in toggled] == ["4"]
        assert [p["screen"] for p in screens] == ["greetings"]

    def test_topic_handler_cannot_alter_view_payload(self, view, bus, recorded):
        def tamper(payload):
            payload["expanded"] = "tampered"

        bus.subscribe(events.TOPIC_ROW_TOGGLED, tamper)
        view.toggle_expanded("6")

        assert recorded == [{"kind": events.KIND_ROW, "row_id": "6", "expanded": True}]

    def test_failing_listener_does_not_block_others(self, view):
        seen = []

        def broken(payload):
            raise RuntimeError("render failed")

        view.subscribe(broken)
        view.subscribe(seen.append)
        view.toggle_expanded("0")

        assert len(seen) == 1
        assert view.is_expanded("0") is True


class TestSnapshot:
    """Saved instance state round trip."""

    def test_snapshot_contents(self, view):
        view.toggle_expanded("12")
        view.toggle_expanded("3")
        view.continue_onboarding()

        snapshot = view.snapshot()
        assert snapshot == ViewSnapshot(show_onboarding=False, expanded=["3", "12"])

    def test_restore_on_fresh_session(self, view, bus):
        view.toggle_expanded("8")
        view.continue_onboarding()
        dumped = view.snapshot().model_dump()

        recreated = ViewState(bus, view.row_ids)
        recreated.restore(dumped)

        assert recreated.screen is Screen.GREETINGS
        assert recreated.expanded_rows == ["8"]

    def test_restore_collapses_rows_missing_from_snapshot(self, view):
        view.toggle_expanded("1")
        view.restore(ViewSnapshot(show_onboarding=True, expanded=["2"]))
        assert view.expanded_rows == ["2"]

    def test_restore_never_reopens_onboarding(self, view):
        view.continue_onboarding()
        view.restore(ViewSnapshot(show_onboarding=True, expanded=[]))
        assert view.screen is Screen.GREETINGS

    def test_restore_notifies(self, view, recorded):
        view.restore({"show_onboarding": False, "expanded": ["5"]})
        assert recorded == [{"kind": events.KIND_RESTORE, "screen": "greetings", "expanded": ["5"]}]

    def test_restore_rejects_unknown_rows(self, view):
        with pytest.raises(ValueError, match="unknown"):
            view.restore({"show_onboarding": True, "expanded": ["5000"]})
        assert view.expanded_rows == []

    def test_restore_rejects_malformed_snapshot(self, view):
        with pytest.raises(ValidationError):
            view.restore({"show_onboarding": True, "collapsed": []})
