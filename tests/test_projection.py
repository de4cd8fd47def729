"""Tests for the partner network earnings projection."""

import pytest

from seat_economics.engine.projection import (
    SCENARIO_TEAM_COUNTS,
    project_network_earnings,
    teams_for_scenario,
)
from seat_economics.models.enums import ConversionScenario
from seat_economics.models.errors import InvalidInputError


class TestNetworkEarnings:
    def test_per_team_commission(self):
        # 107.10 * 12 = 1,285.20 revenue; 10% = 128.52
        result = project_network_earnings(team_count=1)
        assert result.price_per_seat == pytest.approx(107.10)
        assert result.annual_revenue_per_team == pytest.approx(1_285.20)
        assert result.commission_per_team_annual == pytest.approx(128.52)

    def test_three_year_linear_growth(self):
        result = project_network_earnings(team_count=5)
        earnings = [y.earnings for y in result.years]
        assert earnings == pytest.approx([642.60, 1_285.20, 1_927.80])
        assert [y.teams_signed for y in result.years] == [5, 10, 15]

    def test_cumulative_is_sum(self):
        result = project_network_earnings(team_count=5)
        assert result.cumulative_earnings == pytest.approx(sum(y.earnings for y in result.years))
        assert result.years[-1].cumulative_earnings == pytest.approx(result.cumulative_earnings)

    def test_zero_teams(self):
        result = project_network_earnings(team_count=0)
        assert result.cumulative_earnings == 0.0

    def test_custom_year_count(self):
        assert len(project_network_earnings(team_count=2, years=5).years) == 5


class TestScenarios:
    def test_scenario_presets(self):
        assert SCENARIO_TEAM_COUNTS[ConversionScenario.CONSERVATIVE] == 3
        assert teams_for_scenario("realistic") == 5
        assert teams_for_scenario(ConversionScenario.OPTIMISTIC) == 10

    def test_scenario_used_when_no_count(self):
        result = project_network_earnings(scenario="optimistic")
        assert result.team_count == 10

    def test_explicit_count_wins_over_scenario(self):
        result = project_network_earnings(team_count=7, scenario="optimistic")
        assert result.team_count == 7

    def test_unknown_scenario_raises(self):
        with pytest.raises(InvalidInputError, match="scenario must be one of"):
            teams_for_scenario("wild")

    def test_nothing_supplied_raises(self):
        with pytest.raises(InvalidInputError, match="team_count or scenario"):
            project_network_earnings()

    def test_negative_teams_raises(self):
        with pytest.raises(InvalidInputError, match="cannot be negative"):
            project_network_earnings(team_count=-2)
