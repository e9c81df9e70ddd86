"""
Tests for dashboard statistics.

Verifies each counter against the seeded dataset and that the numbers
follow the store as it changes.
"""

import pytest

from dating_admin_api.app.core.store import MemStore, round_cents
from dating_admin_api.app.services.statistics_service import StatisticsService


class TestSeededStats:
    def test_counters(self, store: MemStore):
        stats = store.get_dashboard_stats()

        assert stats.total_users == 5
        assert stats.active_users == 4
        assert stats.total_revenue == 179.96
        assert stats.pending_reports == 2
        assert stats.premium_subscribers == 3
        assert stats.failed_payments == 1
        assert stats.total_messages == 2
        assert stats.today_messages == 2
        assert stats.flagged_messages == 1
        assert stats.image_messages == 1
        assert stats.total_api_requests == 3
        assert stats.active_api_keys == 2

    def test_total_users_matches_listing(self, store: MemStore):
        store.create_user({"name": "Extra", "is_active": False})
        assert store.get_dashboard_stats().total_users == len(store.get_all_users())

    def test_stats_do_not_change_state(self, store: MemStore):
        before = store.get_all_transactions()
        first = store.get_dashboard_stats()
        second = store.get_dashboard_stats()
        assert first == second
        assert store.get_all_transactions() == before


class TestRevenue:
    def test_sum_is_rounded_to_cents(self, empty_store: MemStore):
        for amount in ("0.1", "0.2", "10.006"):
            empty_store.create_transaction({"amount": amount, "subscribed": True, "plan": "Basic"})
        assert empty_store.get_dashboard_stats().total_revenue == 10.31

    def test_order_does_not_matter(self, clock):
        amounts = ["19.99", "0.01", "1234.56", "7.5"]
        forward, backward = MemStore(clock=clock), MemStore(clock=clock)
        for amount in amounts:
            forward.create_transaction({"amount": amount})
        for amount in reversed(amounts):
            backward.create_transaction({"amount": amount})
        assert forward.get_dashboard_stats().total_revenue == backward.get_dashboard_stats().total_revenue == 1262.06

    def test_unparseable_amount_is_skipped(self, empty_store: MemStore):
        empty_store.create_transaction({"amount": "12.50"})
        empty_store.create_transaction({"amount": "n/a"})
        empty_store.create_transaction({"amount": None})
        assert empty_store.get_dashboard_stats().total_revenue == 12.5

    @pytest.mark.parametrize("amount", ["NaN", "inf", "-Infinity", "1e400"])
    def test_non_finite_amount_is_skipped(self, empty_store: MemStore, amount):
        empty_store.create_transaction({"amount": "10.00"})
        empty_store.create_transaction({"amount": amount})
        assert empty_store.get_dashboard_stats().total_revenue == 10.0

    @pytest.mark.parametrize(
        "value, expected",
        [(0.125, 0.13), (2.675, 2.68), (-0.125, -0.13), (1.004, 1.0), (0.0, 0.0)],
    )
    def test_round_cents_half_away_from_zero(self, value, expected):
        assert round_cents(value) == expected


class TestCounters:
    def test_premium_match_is_case_sensitive_substring(self, empty_store: MemStore):
        empty_store.create_transaction({"amount": "1", "subscribed": True, "plan": "premium lite"})
        empty_store.create_transaction({"amount": "1", "subscribed": True, "plan": "Gold Premium"})
        empty_store.create_transaction({"amount": "1", "subscribed": False, "plan": "Premium"})
        empty_store.create_transaction({"amount": "1", "subscribed": True, "plan": None})
        stats = empty_store.get_dashboard_stats()
        assert stats.premium_subscribers == 1
        assert stats.failed_payments == 1

    def test_today_messages_uses_store_date(self, empty_store: MemStore, clock):
        empty_store.create_message({"type": "text"})
        clock.advance(days=1)
        empty_store.create_message({"type": "image"})
        stats = empty_store.get_dashboard_stats()
        assert stats.total_messages == 2
        assert stats.today_messages == 1
        assert stats.image_messages == 1

    def test_today_follows_configured_timezone(self, clock):
        # 12:00 UTC on 2025-03-14 is already 2025-03-15 in Auckland.
        store = MemStore(clock=clock, tz="Pacific/Auckland")
        store.create_message({"type": "text", "created_at": "ignored"})
        assert store.get_all_messages()[0]["created_at"] == "2025-03-15"
        assert store.get_dashboard_stats().today_messages == 1

    def test_flagged_messages_counts_inappropriate_reports(self, store: MemStore):
        store.create_report({"reason": "Inappropriate Content", "status": "pending"})
        store.create_report({"reason": "inappropriate content", "status": "pending"})
        stats = store.get_dashboard_stats()
        assert stats.flagged_messages == 2
        assert stats.pending_reports == 4

    def test_resolving_report_reduces_pending(self, store: MemStore):
        pending = next(r for r in store.get_all_reports() if r["status"] == "pending")
        store.update_report_status(pending["id"], "resolved")
        assert store.get_dashboard_stats().pending_reports == 1

    def test_api_counters(self, store: MemStore):
        key = store.get_all_api_keys()[0]["apikey"]
        store.update_api_key(key, {"active": False})
        store.create_api_log({"apikey": key, "url": "/api/stats", "type": "GET"})
        stats = store.get_dashboard_stats()
        assert stats.active_api_keys == 1
        assert stats.total_api_requests == 4


@pytest.mark.asyncio
async def test_service_returns_camel_case_payload(store: MemStore):
    stats = await StatisticsService.overview(store)
    payload = stats.model_dump(by_alias=True)
    assert payload["totalUsers"] == 5
    assert payload["totalRevenue"] == 179.96
    assert payload["activeApiKeys"] == 2
