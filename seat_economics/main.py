"""FastAPI application for seat pricing, commission and profitability endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from seat_economics.api.schemas import (
    CommissionRequest,
    NetworkEarningsRequest,
    ProfitabilityRequest,
    PromoCodeStatusRequest,
    TrialStatusRequest,
)
from seat_economics.config.settings import Settings
from seat_economics.engine.commission import compute_commission
from seat_economics.engine.export import export_profitability
from seat_economics.engine.profitability import compute_profitability
from seat_economics.engine.projection import NETWORK_USERS_PER_TEAM, project_network_earnings
from seat_economics.hooks.audit_hooks import log_calculation
from seat_economics.models.errors import InvalidInputError
from seat_economics.pricing.tiers import get_all_tier_tables, get_tier_table
from seat_economics.promotions.status import (
    count_redemptions,
    is_trial_active,
    summarize_promo_codes,
    trial_days_remaining,
)

settings = Settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="0.1.0")

# CORS: allow the marketing site and admin dashboard
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    log_calculation(request.url.path, error=str(exc))
    return JSONResponse(
        status_code=400,
        content={"error": "invalid_input", "field": exc.field, "detail": str(exc)},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    log_calculation(request.url.path, error="request failed validation")
    return JSONResponse(
        status_code=400,
        content={"error": "invalid_input", "field": None, "detail": jsonable_encoder(exc.errors())},
    )


def _table_or_404(table_id: str):
    try:
        return get_tier_table(table_id)
    except KeyError:
        logger.warning("Unknown tier table requested: %s", table_id)
        raise HTTPException(status_code=404, detail=f"Unknown tier table '{table_id}'") from None


@app.post("/calculate/profitability")
async def calculate_profitability(body: ProfitabilityRequest):
    """Annual revenue, payouts, costs and net profit for a seat deal."""
    result = compute_profitability(body.to_cost_model())
    log_calculation("profitability", body.model_dump(), result)
    return asdict(result)


@app.post("/calculate/profitability/export")
async def calculate_profitability_export(body: ProfitabilityRequest):
    """Same as /calculate/profitability, formatted for download."""
    cost = body.to_cost_model()
    result = compute_profitability(cost)
    log_calculation("profitability_export", body.model_dump(), result)
    return export_profitability(cost, result)


@app.post("/calculate/commission")
async def calculate_commission(body: CommissionRequest):
    """Partner commission per 6-month payment and its annual projection."""
    table = _table_or_404(body.tier_table or settings.default_tier_table)
    if body.base_price is not None:
        base_price = body.base_price
    elif body.tier_table:
        base_price = table.base_price
    else:
        base_price = settings.retail_price
    result = compute_commission(
        body.to_commission_input(default_users_per_team=settings.users_per_team),
        base_price=base_price,
        tier_table=table,
    )
    log_calculation("commission", body.model_dump(), result)
    return asdict(result)


@app.post("/calculate/network-earnings")
async def calculate_network_earnings(body: NetworkEarningsRequest):
    """Three-year earnings projection for a partner's team network."""
    result = project_network_earnings(
        team_count=body.team_count,
        scenario=body.scenario,
        users_per_team=(
            body.users_per_team if body.users_per_team is not None else NETWORK_USERS_PER_TEAM
        ),
    )
    log_calculation("network_earnings", body.model_dump(), result)
    return asdict(result)


@app.get("/pricing/tiers")
async def list_tier_tables():
    """All registered volume pricing tables with their per-band prices."""
    return {
        table_id: {
            "base_price": table.base_price,
            "description": table.description,
            "bands": [
                {**asdict(band), "price_per_unit": table.price_for(band)}
                for band in sorted(table.bands, key=lambda b: b.min_units)
            ],
        }
        for table_id, table in get_all_tier_tables().items()
    }


@app.get("/pricing/tiers/{table_id}")
async def resolve_tier(table_id: str, units: int = Query(..., description="Seat count")):
    """Per-seat price for ``units`` seats under a tier table."""
    table = _table_or_404(table_id)
    return asdict(table.resolve(units))


@app.post("/promo-codes/status")
async def promo_code_status(body: PromoCodeStatusRequest):
    """Derived status per promo code plus totals by status and type."""
    summaries, stats = summarize_promo_codes(
        [c.to_promo_code() for c in body.codes],
        count_redemptions(body.redemptions),
        now=body.now,
        status=body.status,
    )
    return {
        "codes": [
            {
                **asdict(s.code),
                "is_trial": s.code.is_trial,
                "redemption_count": s.redemption_count,
                "computed_status": s.computed_status,
            }
            for s in summaries
        ],
        "stats": asdict(stats),
    }


@app.post("/trials/status")
async def trial_status(body: TrialStatusRequest):
    """Days remaining and active flag for each promotional trial."""
    trials = []
    for trial in body.trials:
        active = is_trial_active(trial.expires_at, body.now)
        days = trial_days_remaining(trial.expires_at, body.now) if trial.expires_at else None
        trials.append(
            {
                "email": trial.email,
                "expires_at": trial.expires_at,
                "trial_active": active,
                "days_remaining": days,
            }
        )
    return {"trials": trials, "total_active": sum(1 for t in trials if t["trial_active"])}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
