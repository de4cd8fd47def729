"""Flat percentage discount used by the admin profitability model."""

from seat_economics.models.errors import require_non_negative, require_percentage


def linear_discount_price(price_per_seat: float, volume_discount_percent: float) -> float:
    """Discounted_Price = price_per_seat x (1 - discount% / 100)"""
    require_non_negative("price_per_seat", price_per_seat)
    require_percentage("volume_discount_percent", volume_discount_percent)
    return price_per_seat * (1 - volume_discount_percent / 100)
