"""Request and response bodies for the calculator endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from seat_economics.engine.commission import CommissionInput
from seat_economics.engine.profitability import CostLineItem, CostModel
from seat_economics.models.enums import ConversionScenario
from seat_economics.pricing.constants import TRANSACTIONS_PER_USER_PER_YEAR
from seat_economics.promotions.status import PromoCode


class LineItemBody(BaseModel):
    name: str
    amount: float


class ProfitabilityRequest(BaseModel):
    price_per_seat: float
    cost_per_seat: float
    volume_discount_percent: float = 0.0
    partner_commission_percent: float = 0.0
    num_users: Optional[int] = None
    num_teams: Optional[int] = None
    users_per_team: Optional[int] = None
    fixed_monthly_costs: list[LineItemBody] = Field(default_factory=list)
    per_user_annual_costs: list[LineItemBody] = Field(default_factory=list)
    per_transaction_cost: float = 0.0
    transactions_per_user_per_year: int = TRANSACTIONS_PER_USER_PER_YEAR
    annual_fixed_cost_extra: float = 0.0

    def to_cost_model(self) -> CostModel:
        data = self.model_dump(exclude={"fixed_monthly_costs", "per_user_annual_costs"})
        return CostModel(
            **data,
            fixed_monthly_costs=[CostLineItem(i.name, i.amount) for i in self.fixed_monthly_costs],
            per_user_annual_costs=[
                CostLineItem(i.name, i.amount) for i in self.per_user_annual_costs
            ],
        )


class CommissionRequest(BaseModel):
    # Plain str so an unknown mode reaches the engine's own check
    mode: str
    is_bulk_purchase: bool = False
    user_count: Optional[int] = None
    num_teams: Optional[int] = None
    users_per_team: Optional[int] = None
    base_price: Optional[float] = None
    tier_table: Optional[str] = None

    def to_commission_input(self, default_users_per_team: int) -> CommissionInput:
        users_per_team = self.users_per_team
        if self.num_teams is not None and users_per_team is None:
            users_per_team = default_users_per_team
        return CommissionInput(
            mode=self.mode,
            is_bulk_purchase=self.is_bulk_purchase,
            user_count=self.user_count,
            num_teams=self.num_teams,
            users_per_team=users_per_team,
        )


class NetworkEarningsRequest(BaseModel):
    team_count: Optional[int] = None
    scenario: Optional[ConversionScenario] = None
    users_per_team: Optional[int] = None


class PromoCodeBody(BaseModel):
    code: str
    is_active: bool = True
    expires_at: Optional[datetime] = None
    max_redemptions: Optional[int] = None
    tier_duration_days: Optional[int] = None
    description: str = ""

    def to_promo_code(self) -> PromoCode:
        return PromoCode(**self.model_dump())


class PromoCodeStatusRequest(BaseModel):
    codes: list[PromoCodeBody]
    # One entry per redemption row
    redemptions: list[str] = Field(default_factory=list)
    status: Optional[str] = None
    now: Optional[datetime] = None


class TrialBody(BaseModel):
    email: str
    expires_at: Optional[datetime] = None


class TrialStatusRequest(BaseModel):
    trials: list[TrialBody]
    now: Optional[datetime] = None
