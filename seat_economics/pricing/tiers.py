"""Banded volume pricing for seat licenses.

A tier table maps a seat count to a discounted per-seat price. Bands are
lower-bound inclusive and checked from the highest threshold down, so a
larger order never resolves to a shallower discount.
"""

from __future__ import annotations

from dataclasses import dataclass

from seat_economics.models.errors import InvalidInputError, require_non_negative
from seat_economics.pricing.constants import RETAIL_PRICE_ANNUAL, RETAIL_PRICE_SIX_MONTH

# Global registry -- maps table_id -> TierTable
_REGISTRY: dict[str, TierTable] = {}


@dataclass(frozen=True)
class PriceBand:
    """One volume band: applies from ``min_units`` seats upward."""

    min_units: int
    discount_percent: float
    label: str


@dataclass(frozen=True)
class PricingTierResult:
    unit_count: int
    price_per_unit: float
    discount_percent: float
    tier_label: str


@dataclass(frozen=True)
class TierTable:
    """A named base price plus its volume bands."""

    id: str
    base_price: float
    bands: tuple[PriceBand, ...]
    description: str = ""

    def __post_init__(self) -> None:
        if self.base_price < 0:
            raise InvalidInputError(
                f"base_price cannot be negative, got {self.base_price}", field="base_price"
            )
        if not self.bands:
            raise InvalidInputError(f"Tier table '{self.id}' has no bands", field="bands")
        thresholds = [b.min_units for b in self.bands]
        if len(set(thresholds)) != len(thresholds):
            raise InvalidInputError(
                f"Tier table '{self.id}' has duplicate thresholds: {thresholds}", field="bands"
            )
        if 0 not in thresholds:
            raise InvalidInputError(
                f"Tier table '{self.id}' needs a band starting at 0 units", field="bands"
            )
        for band in self.bands:
            if not (0 <= band.discount_percent <= 100):
                raise InvalidInputError(
                    f"discount_percent must be 0-100, got {band.discount_percent}",
                    field="bands",
                )

    def descending_bands(self) -> list[PriceBand]:
        return sorted(self.bands, key=lambda b: b.min_units, reverse=True)

    def resolve(self, unit_count: int) -> PricingTierResult:
        """Return the price for one seat when ``unit_count`` seats are bought."""
        require_non_negative("unit_count", unit_count)
        for band in self.descending_bands():
            if unit_count >= band.min_units:
                return PricingTierResult(
                    unit_count=unit_count,
                    price_per_unit=self.price_for(band),
                    discount_percent=band.discount_percent,
                    tier_label=band.label,
                )
        # Unreachable: a band at 0 is enforced in __post_init__
        raise InvalidInputError(f"No band covers {unit_count} units", field="unit_count")

    def price_for(self, band: PriceBand) -> float:
        return round(self.base_price * (1 - band.discount_percent / 100), 2)


def register_tier_table(table: TierTable) -> TierTable:
    """Add a tier table to the registry, replacing any table with the same id."""
    _REGISTRY[table.id] = table
    return table


def get_tier_table(table_id: str) -> TierTable:
    """Look up a tier table by id. Raises KeyError for unknown ids."""
    try:
        return _REGISTRY[table_id]
    except KeyError:
        raise KeyError(f"Unknown tier table '{table_id}'") from None


def get_all_tier_tables() -> dict[str, TierTable]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)


def _team_volume_bands() -> tuple[PriceBand, ...]:
    return (
        PriceBand(min_units=0, discount_percent=0.0, label="Retail price"),
        PriceBand(min_units=12, discount_percent=10.0, label="10% volume discount"),
        PriceBand(min_units=121, discount_percent=15.0, label="15% volume discount"),
        PriceBand(min_units=200, discount_percent=20.0, label="20% volume discount"),
    )


SIX_MONTH = register_tier_table(
    TierTable(
        id="six_month",
        base_price=RETAIL_PRICE_SIX_MONTH,
        bands=_team_volume_bands(),
        description="Team licensing, 6-month subscription",
    )
)

ANNUAL = register_tier_table(
    TierTable(
        id="annual",
        base_price=RETAIL_PRICE_ANNUAL,
        bands=_team_volume_bands(),
        description="Team licensing, annual subscription",
    )
)
