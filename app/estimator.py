"""Rule-of-thumb investment figures derived from a purchase price.

All functions are pure: the rates come in as an ``EstimationRates`` value,
so tests can use their own without touching the environment.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional

from app import config


@dataclass(frozen=True)
class EstimationRates:
    rent_per_sqm: float = 10.0
    annual_yield: float = 0.04
    transaction_cost: float = 0.10
    renovation: float = 0.05
    property_tax: float = 0.0015
    management: float = 0.004


DEFAULT_RATES = EstimationRates(
    rent_per_sqm=config.ESTIMATED_RENT_PER_SQM,
    annual_yield=config.TYPICAL_ANNUAL_YIELD,
    transaction_cost=config.TRANSACTION_COST_RATE,
    renovation=config.RENOVATION_RATE,
    property_tax=config.PROPERTY_TAX_RATE,
    management=config.MANAGEMENT_COST_RATE,
)


def round_half_up(value) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3).

    Accepts floats or Decimals of any size; no precision limit applies.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))


def _times(value, rate: float) -> Decimal:
    # exact decimal product, so large prices never overflow a float
    return Decimal(str(value)) * Decimal(str(rate))


def estimate_monthly_rent(kaufpreis: int, area: Optional[float] = None,
                          rates: EstimationRates = DEFAULT_RATES) -> int:
    if area:
        return round_half_up(_times(area, rates.rent_per_sqm))
    # no area: fall back to the typical yield
    return round_half_up(_times(kaufpreis, rates.annual_yield) / 12)


def estimate_costs(kaufpreis: int, rates: EstimationRates = DEFAULT_RATES) -> Dict[str, int]:
    return {
        "nebenkosten": round_half_up(_times(kaufpreis, rates.transaction_cost)),
        "renovierung": round_half_up(_times(kaufpreis, rates.renovation)),
        "grundsteuer": round_half_up(_times(kaufpreis, rates.property_tax)),
        "verwaltung": round_half_up(_times(kaufpreis, rates.management)),
    }


def complete(kaufpreis: Optional[int], miete: Optional[int] = None,
             area: Optional[float] = None,
             rates: EstimationRates = DEFAULT_RATES) -> Dict[str, Optional[int]]:
    """Fill in rent and the four cost fields.

    Without a purchase price nothing is estimated and the scraped rent is
    passed through as is.
    """
    out: Dict[str, Optional[int]] = {"kaufpreis": kaufpreis, "miete": miete}
    if not kaufpreis:
        return out
    if not miete:
        out["miete"] = estimate_monthly_rent(kaufpreis, area, rates)
    out.update(estimate_costs(kaufpreis, rates))
    return out
