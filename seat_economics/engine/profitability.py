"""Admin profitability model: revenue minus commissions minus costs.

All figures are annual. Seat prices and per-seat costs are monthly and
rolled up by ``MONTHS_PER_YEAR``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from seat_economics.engine.result import ProfitabilityResult
from seat_economics.models.errors import (
    InvalidInputError,
    require_non_negative,
    require_percentage,
)
from seat_economics.pricing.constants import MONTHS_PER_YEAR, TRANSACTIONS_PER_USER_PER_YEAR
from seat_economics.pricing.linear import linear_discount_price

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CostLineItem:
    """A named cost, e.g. ("Supabase", 25.0)."""

    name: str
    amount: float


@dataclass(frozen=True)
class CostModel:
    price_per_seat: float
    cost_per_seat: float
    volume_discount_percent: float = 0.0
    partner_commission_percent: float = 0.0
    # Supply either num_users, or num_teams + users_per_team
    num_users: Optional[int] = None
    num_teams: Optional[int] = None
    users_per_team: Optional[int] = None
    fixed_monthly_costs: list[CostLineItem] = field(default_factory=list)
    per_user_annual_costs: list[CostLineItem] = field(default_factory=list)
    per_transaction_cost: float = 0.0
    transactions_per_user_per_year: int = TRANSACTIONS_PER_USER_PER_YEAR
    annual_fixed_cost_extra: float = 0.0

    @property
    def uses_team_input(self) -> bool:
        return self.num_teams is not None or self.users_per_team is not None

    def resolved_num_users(self) -> int:
        """num_users = num_teams x users_per_team when entered by team."""
        if self.uses_team_input:
            if self.num_users is not None:
                raise InvalidInputError(
                    "Provide either num_users or num_teams/users_per_team, not both",
                    field="num_users",
                )
            if self.num_teams is None or self.users_per_team is None:
                raise InvalidInputError(
                    "num_teams and users_per_team must be provided together",
                    field="num_teams" if self.num_teams is None else "users_per_team",
                )
            require_non_negative("num_teams", self.num_teams)
            require_non_negative("users_per_team", self.users_per_team)
            return self.num_teams * self.users_per_team

        if self.num_users is None:
            raise InvalidInputError("num_users is required", field="num_users")
        require_non_negative("num_users", self.num_users)
        return self.num_users

    def validate(self) -> int:
        """Check every field and return the resolved user count."""
        num_users = self.resolved_num_users()
        require_non_negative("price_per_seat", self.price_per_seat)
        require_non_negative("cost_per_seat", self.cost_per_seat)
        require_percentage("volume_discount_percent", self.volume_discount_percent)
        require_percentage("partner_commission_percent", self.partner_commission_percent)
        require_non_negative("per_transaction_cost", self.per_transaction_cost)
        require_non_negative(
            "transactions_per_user_per_year", self.transactions_per_user_per_year
        )
        require_non_negative("annual_fixed_cost_extra", self.annual_fixed_cost_extra)
        for item in self.fixed_monthly_costs:
            require_non_negative(f"fixed_monthly_costs[{item.name}]", item.amount)
        for item in self.per_user_annual_costs:
            require_non_negative(f"per_user_annual_costs[{item.name}]", item.amount)
        return num_users


def _sum_items(items: list[CostLineItem]) -> float:
    return sum(item.amount for item in items)


def compute_profitability(cost: CostModel) -> ProfitabilityResult:
    """Net_Profit = Gross_Revenue - Partner_Payout - Variable_Costs - Hard_Costs"""
    num_users = cost.validate()

    discounted_price = linear_discount_price(cost.price_per_seat, cost.volume_discount_percent)
    gross_revenue = discounted_price * num_users * MONTHS_PER_YEAR
    partner_payout = gross_revenue * (cost.partner_commission_percent / 100)
    variable_costs = cost.cost_per_seat * num_users * MONTHS_PER_YEAR

    # Hard costs
    fixed_annual = (
        _sum_items(cost.fixed_monthly_costs) * MONTHS_PER_YEAR + cost.annual_fixed_cost_extra
    )
    per_user_annual = _sum_items(cost.per_user_annual_costs) * num_users
    transaction_annual = (
        cost.per_transaction_cost * num_users * cost.transactions_per_user_per_year
    )
    hard_costs = fixed_annual + per_user_annual + transaction_annual

    net_profit = gross_revenue - partner_payout - variable_costs - hard_costs
    margin = (net_profit / gross_revenue) * 100 if gross_revenue > 0 else 0.0
    per_user = net_profit / num_users if num_users > 0 else 0.0

    logger.info(
        "Profitability for %d users: revenue=%.2f net=%.2f margin=%.1f%%",
        num_users, gross_revenue, net_profit, margin,
    )

    return ProfitabilityResult(
        num_users=num_users,
        discounted_price_per_seat=discounted_price,
        gross_revenue_annual=gross_revenue,
        partner_payout_annual=partner_payout,
        variable_costs_annual=variable_costs,
        hard_costs_fixed_annual=fixed_annual,
        hard_costs_per_user_annual=per_user_annual,
        hard_costs_transaction_annual=transaction_annual,
        hard_costs_annual=hard_costs,
        net_profit_annual=net_profit,
        profit_margin_percent=margin,
        profit_per_user=per_user,
    )
