"""Tests for the rent and cost estimates."""

from app.estimator import (
    DEFAULT_RATES,
    EstimationRates,
    complete,
    estimate_costs,
    estimate_monthly_rent,
    round_half_up,
)


class TestRounding:
    def test_halves_go_up(self):
        # Python's round() would give 2 and 0 here
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(448.5) == 449

    def test_nearest(self):
        assert round_half_up(1.49) == 1
        assert round_half_up(1.51) == 2
        assert round_half_up(1000.0) == 1000


class TestRent:
    def test_from_area(self):
        assert estimate_monthly_rent(300000, 85) == 850

    def test_from_yield_without_area(self):
        assert estimate_monthly_rent(300000, None) == 1000

    def test_custom_rates(self):
        rates = EstimationRates(rent_per_sqm=12.5, annual_yield=0.06)
        assert estimate_monthly_rent(300000, 80, rates) == 1000
        assert estimate_monthly_rent(300000, None, rates) == 1500


class TestCosts:
    def test_fixed_percentages(self):
        assert estimate_costs(300000) == {
            "nebenkosten": 30000,
            "renovierung": 15000,
            "grundsteuer": 450,
            "verwaltung": 1200,
        }

    def test_depends_on_price_only(self):
        a = complete(350000, None, 90)
        b = complete(350000, 1234, None)
        for key in ("nebenkosten", "renovierung", "grundsteuer", "verwaltung"):
            assert a[key] == b[key]

    def test_idempotent(self):
        assert estimate_costs(412345) == estimate_costs(412345)

    def test_default_rates(self):
        assert DEFAULT_RATES == EstimationRates()


class TestComplete:
    def test_estimates_missing_rent(self):
        assert complete(350000, None, 90) == {
            "kaufpreis": 350000,
            "miete": 900,
            "nebenkosten": 35000,
            "renovierung": 17500,
            "grundsteuer": 525,
            "verwaltung": 1400,
        }

    def test_keeps_scraped_rent(self):
        assert complete(350000, 1800, 90)["miete"] == 1800

    def test_no_price_no_costs(self):
        out = complete(None, None, 90)
        assert out == {"kaufpreis": None, "miete": None}

    def test_zero_price_counts_as_missing(self):
        assert "nebenkosten" not in complete(0)


class TestLargePrices:
    def test_costs_without_float_overflow(self):
        costs = estimate_costs(int("9" * 40))
        assert costs["nebenkosten"] == 10 ** 39
        assert all(isinstance(v, int) for v in costs.values())

    def test_rent_from_yield(self):
        assert estimate_monthly_rent(12 * 10 ** 400, None) == 4 * 10 ** 398

    def test_decimal_input(self):
        from decimal import Decimal
        assert round_half_up(Decimal("2.5")) == 3
        assert round_half_up(Decimal("9" * 30 + ".5")) == 10 ** 30
