"""Partner commission on referred seat sales.

Commission is paid per 6-month payment. The first ``BONUS_THRESHOLD_UNITS``
seats earn the base rate and every seat beyond that earns the bonus rate.
Individual signups always pay retail and never reach the bonus band.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from seat_economics.engine.result import CommissionBreakdown, CommissionResult
from seat_economics.models.enums import SignupMode
from seat_economics.models.errors import InvalidInputError, require_non_negative
from seat_economics.pricing.constants import (
    BASE_COMMISSION_RATE,
    BONUS_COMMISSION_RATE,
    BONUS_THRESHOLD_UNITS,
    PAYMENTS_PER_YEAR,
    RETAIL_PRICE_SIX_MONTH,
)
from seat_economics.pricing.tiers import TierTable, get_tier_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommissionInput:
    mode: Union[SignupMode, str]
    is_bulk_purchase: bool = False
    # Supply either user_count, or num_teams + users_per_team
    user_count: Optional[int] = None
    num_teams: Optional[int] = None
    users_per_team: Optional[int] = None

    def signup_mode(self) -> SignupMode:
        try:
            return SignupMode(self.mode)
        except ValueError:
            raise InvalidInputError(
                f"mode must be one of {[m.value for m in SignupMode]}, got {self.mode!r}",
                field="mode",
            ) from None

    def resolved_user_count(self) -> int:
        if self.num_teams is not None or self.users_per_team is not None:
            if self.user_count is not None:
                raise InvalidInputError(
                    "Provide either user_count or num_teams/users_per_team, not both",
                    field="user_count",
                )
            if self.num_teams is None or self.users_per_team is None:
                raise InvalidInputError(
                    "num_teams and users_per_team must be provided together",
                    field="num_teams" if self.num_teams is None else "users_per_team",
                )
            require_non_negative("num_teams", self.num_teams)
            require_non_negative("users_per_team", self.users_per_team)
            return self.num_teams * self.users_per_team

        if self.user_count is None:
            raise InvalidInputError("user_count is required", field="user_count")
        require_non_negative("user_count", self.user_count)
        return self.user_count


def banded_commission(units: int, price_per_unit: float) -> CommissionBreakdown:
    """Base rate on the first 100 units, bonus rate on the rest."""
    base_units = min(units, BONUS_THRESHOLD_UNITS)
    bonus_units = max(units - BONUS_THRESHOLD_UNITS, 0)
    return CommissionBreakdown(
        base_amount=base_units * price_per_unit * BASE_COMMISSION_RATE,
        bonus_amount=bonus_units * price_per_unit * BONUS_COMMISSION_RATE,
        has_bonus=units > BONUS_THRESHOLD_UNITS,
    )


def compute_commission(
    inp: CommissionInput,
    base_price: float = RETAIL_PRICE_SIX_MONTH,
    tier_table: Optional[TierTable] = None,
) -> CommissionResult:
    """Commission for one payment cycle, plus the two-payment annual projection.

    Bulk team purchases are priced through ``tier_table`` (the 6-month table
    by default) with its base price replaced by ``base_price``. Incremental
    team signups stay at ``base_price`` but still earn the bonus band.
    """
    mode = inp.signup_mode()
    user_count = inp.resolved_user_count()
    require_non_negative("base_price", base_price)

    if mode is SignupMode.INDIVIDUAL:
        price_per_unit = base_price
        tier_label = "Retail price"
        breakdown = CommissionBreakdown(
            base_amount=user_count * base_price * BASE_COMMISSION_RATE,
            bonus_amount=0.0,
            has_bonus=False,
        )
    elif inp.is_bulk_purchase:
        table = tier_table or get_tier_table("six_month")
        if table.base_price != base_price:
            table = TierTable(
                id=table.id,
                base_price=base_price,
                bands=table.bands,
                description=table.description,
            )
        tier = table.resolve(user_count)
        price_per_unit = tier.price_per_unit
        tier_label = tier.tier_label
        breakdown = banded_commission(user_count, price_per_unit)
    else:
        price_per_unit = base_price
        tier_label = "Retail price"
        breakdown = banded_commission(user_count, price_per_unit)

    total = breakdown.base_amount + breakdown.bonus_amount

    logger.info(
        "Commission (%s, bulk=%s) for %d users: %.2f per payment",
        mode.value, inp.is_bulk_purchase, user_count, total,
    )

    return CommissionResult(
        user_count=user_count,
        price_per_unit=price_per_unit,
        tier_label=tier_label,
        total_commission_per_payment=total,
        annualized_commission=total * PAYMENTS_PER_YEAR,
        breakdown=breakdown,
    )
