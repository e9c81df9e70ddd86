"""
Tests for status vocabularies and transition validation.
"""

import pytest

from dating_admin_api.app.core.exceptions import InvalidStatusTransition, UnknownStatus
from dating_admin_api.app.core.statuses import (
    TRANSITIONS,
    EventStatus,
    ReportStatus,
    VerificationStatus,
    validate_transition,
)


class TestVocabularies:
    def test_members(self):
        assert {s.value for s in EventStatus} == {"pending", "planned", "canceled", "declined"}
        assert {s.value for s in ReportStatus} == {"pending", "resolved", "banned", "warned", "dismissed"}
        assert {s.value for s in VerificationStatus} == {"pending", "approved", "rejected"}

    @pytest.mark.parametrize("kind, enum", [("event", EventStatus), ("report", ReportStatus), ("verification", VerificationStatus)])
    def test_transition_table_covers_every_status(self, kind, enum):
        assert set(TRANSITIONS[kind]) == {s.value for s in enum}


class TestValidateTransition:
    @pytest.mark.parametrize(
        "kind, current, new",
        [
            ("event", "pending", "planned"),
            ("event", "pending", "declined"),
            ("event", "planned", "canceled"),
            ("report", "pending", "resolved"),
            ("report", "pending", "warned"),
            ("report", "warned", "banned"),
            ("verification", "pending", "approved"),
            ("verification", "rejected", "pending"),
        ],
    )
    def test_allowed(self, kind, current, new):
        assert validate_transition(kind, current, new) == new

    @pytest.mark.parametrize(
        "kind, current, new",
        [
            ("event", "canceled", "planned"),
            ("event", "planned", "pending"),
            ("report", "resolved", "pending"),
            ("report", "dismissed", "banned"),
            ("verification", "approved", "rejected"),
        ],
    )
    def test_rejected(self, kind, current, new):
        with pytest.raises(InvalidStatusTransition):
            validate_transition(kind, current, new)

    def test_same_status_is_allowed(self):
        assert validate_transition("report", "banned", "banned") == "banned"

    def test_unknown_status(self):
        with pytest.raises(UnknownStatus) as exc_info:
            validate_transition("event", "pending", "postponed")
        assert "postponed" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)

    def test_unrecognised_current_status_can_only_reset_to_pending(self):
        assert validate_transition("event", "whatever", "pending") == "pending"
        with pytest.raises(InvalidStatusTransition):
            validate_transition("event", "whatever", "planned")
