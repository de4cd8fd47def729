"""Unit tests for banded and linear seat pricing."""

import pytest

from seat_economics.models.errors import InvalidInputError
from seat_economics.pricing.linear import linear_discount_price
from seat_economics.pricing.tiers import (
    PriceBand,
    TierTable,
    get_all_tier_tables,
    get_tier_table,
)


@pytest.fixture
def six_month():
    return get_tier_table("six_month")


class TestSixMonthTable:
    @pytest.mark.parametrize(
        "units, price, discount",
        [
            (0, 79.00, 0.0),
            (11, 79.00, 0.0),
            (12, 71.10, 10.0),
            (120, 71.10, 10.0),
            (121, 67.15, 15.0),
            (199, 67.15, 15.0),
            (200, 63.20, 20.0),
            (5000, 63.20, 20.0),
        ],
    )
    def test_breakpoints(self, six_month, units, price, discount):
        tier = six_month.resolve(units)
        assert tier.price_per_unit == pytest.approx(price)
        assert tier.discount_percent == discount

    def test_lower_edge_is_inclusive(self, six_month):
        assert six_month.resolve(11).discount_percent == 0.0
        assert six_month.resolve(12).discount_percent == 10.0

    def test_label_describes_discount(self, six_month):
        assert six_month.resolve(150).tier_label == "15% volume discount"
        assert six_month.resolve(3).tier_label == "Retail price"

    def test_price_never_increases_with_count(self, six_month):
        prices = [six_month.resolve(n).price_per_unit for n in range(0, 400)]
        assert all(later <= earlier for earlier, later in zip(prices, prices[1:]))

    def test_negative_count_raises(self, six_month):
        with pytest.raises(InvalidInputError, match="cannot be negative"):
            six_month.resolve(-1)


class TestAnnualTable:
    @pytest.mark.parametrize(
        "units, price",
        [(1, 119.00), (12, 107.10), (121, 101.15), (200, 95.20)],
    )
    def test_published_prices(self, units, price):
        assert get_tier_table("annual").resolve(units).price_per_unit == pytest.approx(price)


class TestTierTableValidation:
    def test_band_at_zero_required(self):
        with pytest.raises(InvalidInputError, match="band starting at 0"):
            TierTable(id="bad", base_price=10.0, bands=(PriceBand(5, 10.0, "x"),))

    def test_duplicate_thresholds_rejected(self):
        with pytest.raises(InvalidInputError, match="duplicate"):
            TierTable(
                id="bad",
                base_price=10.0,
                bands=(PriceBand(0, 0.0, "a"), PriceBand(0, 5.0, "b")),
            )

    def test_discount_over_100_rejected(self):
        with pytest.raises(InvalidInputError, match="must be 0-100"):
            TierTable(
                id="bad",
                base_price=10.0,
                bands=(PriceBand(0, 0.0, "a"), PriceBand(10, 120.0, "b")),
            )

    def test_band_order_does_not_matter(self):
        table = TierTable(
            id="shuffled",
            base_price=100.0,
            bands=(PriceBand(50, 20.0, "deep"), PriceBand(0, 0.0, "none"), PriceBand(10, 5.0, "mid")),
        )
        assert table.resolve(49).price_per_unit == pytest.approx(95.0)
        assert table.resolve(50).price_per_unit == pytest.approx(80.0)


class TestRegistry:
    def test_both_tables_registered(self):
        tables = get_all_tier_tables()
        assert "six_month" in tables
        assert "annual" in tables

    def test_unknown_table_raises_key_error(self):
        with pytest.raises(KeyError):
            get_tier_table("quarterly")


class TestLinearDiscount:
    def test_basic_discount(self):
        assert linear_discount_price(119.0, 10.0) == pytest.approx(107.10)

    def test_zero_discount(self):
        assert linear_discount_price(119.0, 0.0) == 119.0

    def test_full_discount(self):
        assert linear_discount_price(119.0, 100.0) == 0.0

    def test_discount_is_not_banded(self):
        # 7% is not a tier value; linear pricing applies it as-is
        assert linear_discount_price(100.0, 7.0) == pytest.approx(93.0)

    def test_percentage_out_of_range_raises(self):
        with pytest.raises(InvalidInputError, match="must be 0-100"):
            linear_discount_price(119.0, 101.0)

    def test_negative_price_raises(self):
        with pytest.raises(InvalidInputError, match="cannot be negative"):
            linear_discount_price(-1.0, 10.0)


class TestAnnualMonotonic:
    def test_price_never_increases_with_count(self):
        annual = get_tier_table("annual")
        prices = [annual.resolve(n).price_per_unit for n in range(0, 400)]
        assert all(later <= earlier for earlier, later in zip(prices, prices[1:]))
