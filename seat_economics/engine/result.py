"""Immutable result structures returned by the calculators."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProfitabilityResult:
    """Annual economics of selling ``num_users`` seats."""

    num_users: int
    discounted_price_per_seat: float
    gross_revenue_annual: float
    partner_payout_annual: float
    variable_costs_annual: float
    hard_costs_fixed_annual: float
    hard_costs_per_user_annual: float
    hard_costs_transaction_annual: float
    hard_costs_annual: float
    net_profit_annual: float
    profit_margin_percent: float
    profit_per_user: float


@dataclass(frozen=True)
class CommissionBreakdown:
    base_amount: float
    bonus_amount: float
    has_bonus: bool


@dataclass(frozen=True)
class CommissionResult:
    """Partner earnings for one 6-month billing cycle plus the yearly projection."""

    user_count: int
    price_per_unit: float
    tier_label: str
    total_commission_per_payment: float
    annualized_commission: float
    breakdown: CommissionBreakdown
    # Annualized figure assumes every seat renews; it is not a guarantee.
    annualized_is_projection: bool = True


@dataclass(frozen=True)
class YearEarnings:
    year: int
    teams_signed: int
    earnings: float
    cumulative_earnings: float


@dataclass(frozen=True)
class NetworkEarningsProjection:
    """Multi-year partner earnings for a network of referred teams."""

    team_count: int
    users_per_team: int
    price_per_seat: float
    annual_revenue_per_team: float
    commission_per_team_annual: float
    years: list[YearEarnings] = field(default_factory=list)
    cumulative_earnings: float = 0.0
