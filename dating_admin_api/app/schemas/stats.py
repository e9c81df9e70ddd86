"""Dashboard statistics payload; keys are camelCase on the wire."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class DashboardStatsRead(BaseModel):
    total_users: int
    active_users: int
    total_revenue: float
    pending_reports: int
    premium_subscribers: int
    failed_payments: int
    total_messages: int
    today_messages: int
    flagged_messages: int
    image_messages: int
    total_api_requests: int
    active_api_keys: int

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
