from .linear import linear_discount_price
from .tiers import (
    PriceBand,
    PricingTierResult,
    TierTable,
    get_all_tier_tables,
    get_tier_table,
    register_tier_table,
)

__all__ = [
    "PriceBand",
    "PricingTierResult",
    "TierTable",
    "get_all_tier_tables",
    "get_tier_table",
    "linear_discount_price",
    "register_tier_table",
]
