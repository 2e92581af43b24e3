"""
Unit tests for the decisions feature store.

Tests cover:
- Fetch on activate (signed in / signed out / backend failure)
- Recording decisions (prepend, validation, auth)
- Weekly statistics and achievement badges
"""

from datetime import timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from mindtrade.core.exceptions import AuthenticationError, ValidationError
from mindtrade.domain.models import EmotionalLabel, TradeAction
from mindtrade.stores import DecisionCreate, DecisionsStore

from tests.conftest import eastern_datetime, make_decision


def decision_input(**overrides) -> DecisionCreate:
    data = dict(
        ticker_symbol="aapl",
        action=TradeAction.BUY,
        shares=Decimal("10"),
        price_per_share=Decimal("185.50"),
        based_on_fundamentals=True,
        fits_strategy=True,
        not_reacting_to_news=True,
        emotional_state=50,
    )
    data.update(overrides)
    return DecisionCreate(**data)


def store_with(decisions) -> DecisionsStore:
    store = DecisionsStore(MagicMock())
    store.decisions = list(decisions)
    store.loading = False
    return store


# =============================================================================
# FETCH TESTS
# =============================================================================


class TestFetchDecisions:
    """Tests for loading decisions."""

    def test_initial_state_is_loading(self, backend):
        store = DecisionsStore(backend)
        assert store.loading is True
        assert store.error is None
        assert store.decisions == []

    def test_activate_loads_users_decisions_newest_first(self, backend, decision_repo, user):
        """
        GIVEN two stored decisions for the user and one for someone else
        WHEN the store is activated
        THEN only the user's decisions are loaded, newest first
        """
        older = make_decision(user_id=user.id, created_at=eastern_datetime(2024, 6, 10))
        newer = make_decision(user_id=user.id, created_at=eastern_datetime(2024, 6, 12))
        decision_repo.create(older)
        decision_repo.create(newer)
        decision_repo.create(make_decision(user_id="someone-else"))

        store = DecisionsStore(backend)
        store.activate()

        assert store.loading is False
        assert [d.id for d in store.decisions] == [newer.id, older.id]

    def test_activate_runs_fetch_once(self, backend):
        store = DecisionsStore(backend)
        store.activate()
        store.decisions = ["sentinel"]
        store.activate()
        assert store.decisions == ["sentinel"]

    def test_signed_out_yields_empty_list_without_error(self, backend_factory):
        """
        GIVEN no signed-in user
        WHEN the store is activated
        THEN decisions are empty and no error is reported
        """
        store = DecisionsStore(backend_factory(None))
        store.activate()

        assert store.decisions == []
        assert store.error is None
        assert store.loading is False

    def test_backend_failure_sets_error(self, user):
        """
        GIVEN the backend raises while listing
        WHEN the store is activated
        THEN error is set and loading is cleared
        """
        backend = MagicMock()
        backend.auth.get_user.return_value = user
        backend.decisions.list_by_user.side_effect = RuntimeError("connection reset")

        store = DecisionsStore(backend)
        store.activate()

        assert store.error == "Failed to fetch decisions"
        assert store.loading is False


# =============================================================================
# CREATE TESTS
# =============================================================================


class TestCreateDecision:
    """Tests for recording a decision."""

    def test_create_prepends_and_persists(self, backend, decision_repo, user):
        """
        GIVEN a store with N decisions
        WHEN I record a new decision
        THEN the list has N+1 items with the new one first
        """
        decision_repo.create(make_decision(user_id=user.id))
        store = DecisionsStore(backend)
        store.activate()
        assert len(store.decisions) == 1

        created = store.create_decision(decision_input())

        assert len(store.decisions) == 2
        assert store.decisions[0].id == created.id
        assert created.ticker_symbol == "AAPL"
        assert created.user_id == user.id
        assert created.created_at is not None
        assert created.decision_date is not None
        assert len(decision_repo.list_by_user(user.id)) == 2

    def test_created_decision_derived_fields(self, backend):
        store = DecisionsStore(backend)
        created = store.create_decision(
            decision_input(emotional_state=80, fits_strategy=False)
        )

        assert created.is_rational is False
        assert created.emotional_label == EmotionalLabel.CONFIDENT
        assert created.total_amount == Decimal("1855.00")

    def test_create_requires_signed_in_user(self, backend_factory):
        store = DecisionsStore(backend_factory(None))
        with pytest.raises(AuthenticationError):
            store.create_decision(decision_input())
        assert store.decisions == []

    @pytest.mark.parametrize(
        "overrides",
        [
            {"ticker_symbol": "  "},
            {"shares": Decimal("0")},
            {"price_per_share": Decimal("-1")},
            {"emotional_state": 101},
            {"action": "hold"},
        ],
    )
    def test_create_rejects_invalid_input(self, backend, overrides):
        store = DecisionsStore(backend)
        with pytest.raises(ValidationError):
            store.create_decision(decision_input(**overrides))
        assert store.decisions == []

    def test_backend_failure_propagates_and_list_unchanged(self, user):
        backend = MagicMock()
        backend.auth.require_user.return_value = user
        backend.decisions.create.side_effect = RuntimeError("insert failed")
        store = DecisionsStore(backend)

        with pytest.raises(RuntimeError):
            store.create_decision(decision_input())
        assert store.decisions == []


# =============================================================================
# WEEKLY STATS TESTS
# =============================================================================


class TestWeeklyStats:
    """Tests for get_weekly_stats."""

    def test_three_this_week_two_rational(self, fixed_now):
        """
        GIVEN 3 decisions this week (2 rational) and 1 older than 7 days
        WHEN weekly stats are computed
        THEN total=3, rational=2, percentage=67
        """
        store = store_with([
            make_decision(rational=True, created_at=fixed_now - timedelta(days=1)),
            make_decision(rational=True, created_at=fixed_now - timedelta(days=2)),
            make_decision(rational=False, created_at=fixed_now - timedelta(days=3)),
            make_decision(rational=True, created_at=fixed_now - timedelta(days=8)),
        ])

        stats = store.get_weekly_stats(now=fixed_now)

        assert stats.total_decisions == 3
        assert stats.rational_decisions == 2
        assert stats.rational_percentage == 67

    def test_no_decisions_gives_zero_percentage(self, fixed_now):
        stats = store_with([]).get_weekly_stats(now=fixed_now)
        assert (stats.total_decisions, stats.rational_decisions, stats.rational_percentage) == (0, 0, 0)

    def test_half_rounds_up(self, fixed_now):
        store = store_with([
            make_decision(rational=True, created_at=fixed_now - timedelta(hours=1)),
            make_decision(rational=False, created_at=fixed_now - timedelta(hours=2)),
        ])
        assert store.get_weekly_stats(now=fixed_now).rational_percentage == 50

    def test_partially_rational_decision_is_not_rational(self, fixed_now):
        decision = make_decision(rational=True, created_at=fixed_now)
        decision.not_reacting_to_news = False
        stats = store_with([decision]).get_weekly_stats(now=fixed_now)
        assert stats.rational_decisions == 0


# =============================================================================
# BADGE TESTS
# =============================================================================


class TestAchievementBadges:
    """Tests for achievement badges."""

    def badges(self, store, now):
        return {b.id: b.earned for b in store.achievement_badges(now=now)}

    def test_all_rational_week_earns_discipline_badges(self, fixed_now):
        """
        GIVEN 5 rational decisions on consecutive days this week
        WHEN badges are computed
        THEN every badge is earned
        """
        store = store_with([
            make_decision(rational=True, created_at=fixed_now - timedelta(days=i))
            for i in range(5)
        ])

        assert self.badges(store, fixed_now) == {
            "rational-investor": True,
            "consistent-trader": True,
            "disciplined-mind": True,
            "bias-buster": True,
        }

    def test_empty_journal_earns_nothing(self, fixed_now):
        assert not any(self.badges(store_with([]), fixed_now).values())

    def test_streak_needs_three_consecutive_days(self, fixed_now):
        store = store_with([
            make_decision(created_at=fixed_now),
            make_decision(created_at=fixed_now - timedelta(days=1)),
            make_decision(created_at=fixed_now - timedelta(days=3)),
        ])
        assert self.badges(store, fixed_now)["consistent-trader"] is False

    def test_one_emotional_decision_breaks_bias_buster(self, fixed_now):
        store = store_with(
            [make_decision(rational=True, created_at=fixed_now - timedelta(hours=i)) for i in range(4)]
            + [make_decision(rational=False, created_at=fixed_now)]
        )
        badges = self.badges(store, fixed_now)
        assert badges["disciplined-mind"] is True
        assert badges["bias-buster"] is False
        assert badges["rational-investor"] is False
