"""Export a profitability run as a JSON-ready document."""

from __future__ import annotations

import time
from dataclasses import asdict
from typing import Any, Optional

from seat_economics.engine.profitability import CostModel
from seat_economics.engine.result import ProfitabilityResult


def _money(value: float) -> str:
    return f"{value:.2f}"


def export_profitability(
    cost: CostModel,
    result: ProfitabilityResult,
    timestamp_ms: Optional[int] = None,
) -> dict[str, Any]:
    """Inputs plus calculated values, with figures formatted to cents."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)

    inputs = asdict(cost)
    inputs["num_users"] = result.num_users

    return {
        "filename": f"profitability-{timestamp_ms}.json",
        "inputs": inputs,
        "calculated": {
            "discounted_price": _money(result.discounted_price_per_seat),
            "gross_revenue": _money(result.gross_revenue_annual),
            "partner_payout": _money(result.partner_payout_annual),
            "variable_costs": _money(result.variable_costs_annual),
            "hard_costs": _money(result.hard_costs_annual),
            "net_profit": _money(result.net_profit_annual),
            "profit_margin": _money(result.profit_margin_percent) + "%",
            "profit_per_user": _money(result.profit_per_user),
        },
    }
