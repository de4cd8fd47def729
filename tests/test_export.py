"""Tests for the profitability export document."""

from seat_economics.engine.export import export_profitability
from seat_economics.engine.profitability import compute_profitability


class TestExport:
    def test_values_formatted_to_cents(self, baseline_cost_model):
        result = compute_profitability(baseline_cost_model)
        doc = export_profitability(baseline_cost_model, result, timestamp_ms=1_700_000_000_000)
        calc = doc["calculated"]
        assert calc["discounted_price"] == "107.10"
        assert calc["gross_revenue"] == "269892.00"
        assert calc["partner_payout"] == "26989.20"
        assert calc["net_profit"] == "205102.80"
        assert calc["profit_margin"].endswith("%")

    def test_filename_uses_timestamp(self, baseline_cost_model):
        result = compute_profitability(baseline_cost_model)
        doc = export_profitability(baseline_cost_model, result, timestamp_ms=42)
        assert doc["filename"] == "profitability-42.json"

    def test_inputs_include_resolved_users(self, baseline_cost_model):
        result = compute_profitability(baseline_cost_model)
        doc = export_profitability(baseline_cost_model, result)
        assert doc["inputs"]["num_users"] == 210
        assert doc["inputs"]["num_teams"] == 15
