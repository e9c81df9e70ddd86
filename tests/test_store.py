"""
Tests for the in-memory repository store.

Covers:
- Key generation and duplicate keys
- Absent results for unknown keys
- Partial updates and timestamp refresh
- Filtered user listing
- Status update shorthands
- Copy isolation and teardown
"""

import pytest

from dating_admin_api.app.core.exceptions import DuplicateKeyError, StoreError
from dating_admin_api.app.core.store import API_KEY_PREFIX, MemStore


def _user(name: str, active: bool, verified: bool) -> dict:
    return {
        "name": name,
        "email": f"{name.lower()}@example.com",
        "location": {"city": "Austin", "country": "US", "coordinates": {"latitude": 30.27, "longitude": -97.74}},
        "interests": ["Tennis"],
        "is_active": active,
        "is_verified": verified,
    }


class TestCreate:
    def test_generates_unique_ids(self, empty_store: MemStore):
        ids = {empty_store.create_user(_user(f"U{i}", True, True))["id"] for i in range(50)}
        assert len(ids) == 50
        assert len(empty_store.get_all_users()) == 50

    def test_stamps_timestamps(self, empty_store: MemStore):
        user = empty_store.create_user(_user("Ana", True, False))
        assert user["created_at"] == "2025-03-14"
        assert user["updated_at"] == user["created_at"]

    def test_event_timestamps_carry_time(self, empty_store: MemStore):
        event = empty_store.create_event({"title": "Picnic", "status": "pending"})
        assert event["created_at"].startswith("2025-03-14T12:00:00")

    def test_duplicate_supplied_key_fails(self, empty_store: MemStore):
        empty_store.create_transaction({"id": "TXN-100", "amount": "5.00"})
        with pytest.raises(DuplicateKeyError) as exc_info:
            empty_store.create_transaction({"id": "TXN-100", "amount": "7.00"})
        assert isinstance(exc_info.value, StoreError)
        assert exc_info.value.details == {"collection": "transactions", "key": "TXN-100"}
        assert empty_store.get_transaction("TXN-100")["amount"] == "5.00"

    def test_api_keys_are_keyed_by_key_string(self, empty_store: MemStore):
        key = empty_store.create_api_key({"name": "CI", "active": True})
        assert key["apikey"].startswith(API_KEY_PREFIX)
        assert len(key["apikey"]) == len(API_KEY_PREFIX) + 32
        assert empty_store.get_api_key(key["apikey"])["name"] == "CI"

    def test_insertion_order_preserved(self, empty_store: MemStore):
        names = ["Zoe", "Adam", "Mia"]
        for name in names:
            empty_store.create_user(_user(name, True, True))
        assert [u["name"] for u in empty_store.get_all_users()] == names


class TestAbsent:
    @pytest.mark.parametrize(
        "lookup",
        ["get_user", "get_admin", "get_event", "get_message", "get_transaction", "get_report", "get_verification", "get_api_key"],
    )
    def test_get_unknown_returns_none(self, store: MemStore, lookup: str):
        assert getattr(store, lookup)("does-not-exist") is None

    def test_update_unknown_returns_none_and_creates_nothing(self, store: MemStore):
        before = len(store.get_all_users())
        assert store.update_user("does-not-exist", {"name": "Ghost"}) is None
        assert len(store.get_all_users()) == before

    @pytest.mark.parametrize(
        "method", ["update_event_status", "update_report_status", "update_verification_status"]
    )
    def test_status_update_unknown_returns_none(self, store: MemStore, method: str):
        assert getattr(store, method)("does-not-exist", "pending") is None

    def test_flag_unknown_message_returns_none(self, store: MemStore):
        assert store.flag_message("does-not-exist") is None


class TestUpdate:
    def test_overwrites_only_supplied_fields(self, store: MemStore, clock):
        user = store.get_all_users()[0]
        clock.advance(days=1)

        updated = store.update_user(user["id"], {"bio": "New bio", "is_verified": False})

        expected = dict(user, bio="New bio", is_verified=False, updated_at="2025-03-15")
        assert updated == expected
        assert store.get_user(user["id"]) == expected

    def test_nested_location_replaced_wholesale(self, empty_store: MemStore):
        user = empty_store.create_user(_user("Ana", True, True))
        updated = empty_store.update_user(user["id"], {"location": {"city": "Denver"}})
        assert updated["location"] == {"city": "Denver"}

    def test_repeated_identical_update_is_idempotent(self, store: MemStore, clock):
        user_id = store.get_all_users()[1]["id"]
        clock.advance(days=2)
        first = store.update_user(user_id, {"occupation": "Chef"})
        second = store.update_user(user_id, {"occupation": "Chef"})
        assert first == second == store.get_user(user_id)

    def test_key_field_cannot_be_changed(self, empty_store: MemStore):
        user = empty_store.create_user(_user("Ana", True, True))
        updated = empty_store.update_user(user["id"], {"id": "hijacked", "name": "Ana B"})
        assert updated["id"] == user["id"]
        assert empty_store.get_user("hijacked") is None

    def test_caller_cannot_mutate_stored_record(self, empty_store: MemStore):
        user = empty_store.create_user(_user("Ana", True, True))
        user["location"]["city"] = "Mutated"
        fetched = empty_store.get_user(user["id"])
        fetched["interests"].append("Mutated")
        again = empty_store.get_user(user["id"])
        assert again["location"]["city"] == "Austin"
        assert again["interests"] == ["Tennis"]


class TestUserFilters:
    @pytest.fixture
    def two_users(self, empty_store: MemStore):
        first = empty_store.create_user(_user("Active", True, True))
        second = empty_store.create_user(_user("Dormant", False, False))
        return empty_store, first, second

    def test_inactive_and_unverified_returns_second_user(self, two_users):
        store, _, second = two_users
        result = store.get_users_with_filters(status="Inactive", verification="Unverified")
        assert [u["id"] for u in result] == [second["id"]]

    def test_active_filter_matches_is_active(self, store: MemStore):
        active = store.get_users_with_filters(status="Active")
        assert [u["id"] for u in active] == [u["id"] for u in store.get_all_users() if u["is_active"]]
        assert len(active) == 4

    def test_filters_intersect(self, store: MemStore):
        result = store.get_users_with_filters(status="Active", verification="Verified")
        assert {u["name"] for u in result} == {"Sarah Johnson", "Emma Davis"}

    @pytest.mark.parametrize("status", [None, "", "All Users", "all", "Something else"])
    def test_status_noop_values(self, store: MemStore, status):
        assert len(store.get_users_with_filters(status=status)) == 5

    @pytest.mark.parametrize("verification", [None, "All", "all"])
    def test_verification_noop_values(self, store: MemStore, verification):
        assert len(store.get_users_with_filters(verification=verification)) == 5

    def test_subscription_filter_is_ignored(self, store: MemStore):
        assert store.get_users_with_filters(subscription="Premium") == store.get_all_users()

    def test_result_is_a_new_list(self, store: MemStore):
        result = store.get_users_with_filters(status="Active")
        result.clear()
        assert len(store.get_all_users()) == 5


class TestStatusShorthands:
    def test_report_status_changes_only_status_and_updated_at(self, store: MemStore, clock):
        reports = store.get_all_reports()
        pending = [r for r in reports if r["status"] == "pending"]
        resolved_before = sum(r["status"] == "resolved" for r in reports)
        target = pending[0]
        clock.advance(minutes=5)

        updated = store.update_report_status(target["id"], "resolved")

        assert updated == dict(target, status="resolved", updated_at=updated["updated_at"])
        assert updated["updated_at"] != target["updated_at"]
        reports = store.get_all_reports()
        assert sum(r["status"] == "pending" for r in reports) == len(pending) - 1
        assert sum(r["status"] == "resolved" for r in reports) == resolved_before + 1
        assert store.get_report(target["id"])["status"] == "resolved"

    def test_resolving_one_of_two_pending_reports(self, empty_store: MemStore):
        first = empty_store.create_report({"reason": "Spam", "status": "pending"})
        empty_store.create_report({"reason": "Harassment", "status": "pending"})

        empty_store.update_report_status(first["id"], "resolved")

        statuses = [r["status"] for r in empty_store.get_all_reports()]
        assert statuses == ["resolved", "pending"]

    def test_store_accepts_any_status_string(self, store: MemStore):
        event = store.get_all_events()[0]
        assert store.update_event_status(event["id"], "whatever")["status"] == "whatever"

    def test_verification_status(self, store: MemStore):
        verification = store.get_all_verifications()[0]
        assert store.update_verification_status(verification["id"], "approved")["status"] == "approved"

    def test_flag_message_sets_flag(self, store: MemStore):
        message = store.get_all_messages()[0]
        assert store.flag_message(message["id"])["flagged"] is True


class TestLookupsAndTeardown:
    def test_lookup_by_username_and_email(self, store: MemStore):
        assert store.get_user_by_username("mike_chen")["name"] == "Mike Chen"
        assert store.get_user_by_email("emma@example.com")["username"] == "emma_d"
        assert store.get_user_by_email("nobody@example.com") is None

    def test_admin_lookup(self, store: MemStore):
        admin = store.get_admin_by_email("ops@loveadmin.test")
        assert admin["role"] == "admin"
        assert store.get_admin(admin["id"])["email"] == "ops@loveadmin.test"

    def test_block_lists_start_empty(self, store: MemStore):
        assert store.get_all_block_lists() == []
        entry = store.create_block_list({"user_id": "a", "blocked_id": "b", "reason": "Spam"})
        assert store.get_all_block_lists() == [entry]

    def test_close_empties_every_collection(self, store: MemStore):
        store.close()
        assert store.get_all_users() == []
        assert store.get_all_api_logs() == []
        assert store.get_dashboard_stats().total_users == 0
