"""Shared test fixtures for the seat economics test suite."""

from datetime import datetime, timezone

import pytest

from seat_economics.engine.profitability import CostLineItem, CostModel


@pytest.fixture
def baseline_cost_model() -> CostModel:
    """Admin calculator defaults: 15 teams of 14 at $119, 10% off, 10% commission."""
    return CostModel(
        price_per_seat=119.0,
        cost_per_seat=15.0,
        volume_discount_percent=10.0,
        partner_commission_percent=10.0,
        num_teams=15,
        users_per_team=14,
    )


@pytest.fixture
def loaded_cost_model() -> CostModel:
    """200 users with every hard-cost category populated."""
    return CostModel(
        price_per_seat=119.0,
        cost_per_seat=15.0,
        volume_discount_percent=10.0,
        partner_commission_percent=10.0,
        num_users=200,
        fixed_monthly_costs=[
            CostLineItem("Supabase", 25.0),
            CostLineItem("Vercel", 20.0),
            CostLineItem("Resend", 20.0),
        ],
        per_user_annual_costs=[CostLineItem("AI usage", 6.0), CostLineItem("Storage", 1.5)],
        per_transaction_cost=0.30,
        annual_fixed_cost_extra=99.0,
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
