"""Multi-year earnings projection for a partner's referral network."""

from __future__ import annotations

import logging
from typing import Optional, Union

from seat_economics.engine.result import NetworkEarningsProjection, YearEarnings
from seat_economics.models.enums import ConversionScenario
from seat_economics.models.errors import InvalidInputError, require_non_negative
from seat_economics.pricing.constants import BASE_COMMISSION_RATE
from seat_economics.pricing.tiers import TierTable, get_tier_table

logger = logging.getLogger(__name__)

# Teams a partner converts per year under each scenario
SCENARIO_TEAM_COUNTS: dict[ConversionScenario, int] = {
    ConversionScenario.CONSERVATIVE: 3,
    ConversionScenario.REALISTIC: 5,
    ConversionScenario.OPTIMISTIC: 10,
}

# Roster size used for network projections (players only)
NETWORK_USERS_PER_TEAM = 12
PROJECTION_YEARS = 3


def teams_for_scenario(scenario: Union[ConversionScenario, str]) -> int:
    try:
        return SCENARIO_TEAM_COUNTS[ConversionScenario(scenario)]
    except ValueError:
        raise InvalidInputError(
            f"scenario must be one of {[s.value for s in ConversionScenario]}, got {scenario!r}",
            field="scenario",
        ) from None


def project_network_earnings(
    team_count: Optional[int] = None,
    scenario: Optional[Union[ConversionScenario, str]] = None,
    users_per_team: int = NETWORK_USERS_PER_TEAM,
    tier_table: Optional[TierTable] = None,
    years: int = PROJECTION_YEARS,
) -> NetworkEarningsProjection:
    """Year_N = N x (team_count x seat_price x users_per_team x 10%)

    Each year the original teams renew and the partner signs the same number
    of new teams, so earnings grow linearly. Seats are priced at the annual
    tier a single team's roster qualifies for.
    """
    if team_count is None:
        if scenario is None:
            raise InvalidInputError("team_count or scenario is required", field="team_count")
        team_count = teams_for_scenario(scenario)
    require_non_negative("team_count", team_count)
    require_non_negative("users_per_team", users_per_team)
    if years < 1:
        raise InvalidInputError(f"years must be at least 1, got {years}", field="years")

    table = tier_table or get_tier_table("annual")
    price = table.resolve(users_per_team).price_per_unit
    revenue_per_team = price * users_per_team
    commission_per_team = revenue_per_team * BASE_COMMISSION_RATE
    year1 = team_count * commission_per_team

    year_rows: list[YearEarnings] = []
    cumulative = 0.0
    for year in range(1, years + 1):
        earnings = year1 * year
        cumulative += earnings
        year_rows.append(
            YearEarnings(
                year=year,
                teams_signed=team_count * year,
                earnings=earnings,
                cumulative_earnings=cumulative,
            )
        )

    logger.info("Network projection for %d teams: year 1 = %.2f", team_count, year1)

    return NetworkEarningsProjection(
        team_count=team_count,
        users_per_team=users_per_team,
        price_per_seat=price,
        annual_revenue_per_team=revenue_per_team,
        commission_per_team_annual=commission_per_team,
        years=year_rows,
        cumulative_earnings=cumulative,
    )
