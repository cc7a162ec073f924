import logging
import math
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)

# Number of projected dividend years after the purchase (year 0)
PROJECTION_YEARS = 10
# Absolute tolerance, in currency units, for the D1 consistency check
D1_TOLERANCE = 0.01


@dataclass(frozen=True)
class CashflowPoint:
    year: int
    dividend: float
    investment: float
    total: float


@dataclass(frozen=True)
class GrowthModelResult:
    implied_growth_percent: float
    cashflows: Tuple[CashflowPoint, ...]
    d1_consistent: bool
    calculated_d1: float
    is_valid: bool

    @property
    def implied_growth(self):
        """Implied growth as a fraction rather than a percent."""
        return self.implied_growth_percent / 100


@dataclass(frozen=True)
class GrowthInputs:
    """The four form values, with the required return expressed in percent."""
    market_price: float
    dividend_amount: float
    required_return: float
    expected_dividend: float

    def compute(self):
        return compute(
            self.market_price,
            self.dividend_amount,
            self.required_return,
            self.expected_dividend,
        )


def project_cashflows(market_price, dividend_amount, growth, years=PROJECTION_YEARS):
    """Year 0 is the purchase outflow; years 1..n receive the dividend grown at `growth`."""
    cashflows = [CashflowPoint(year=0, dividend=0.0, investment=-market_price, total=-market_price)]
    for year in range(1, years + 1):
        dividend = dividend_amount * (1 + growth) ** year
        cashflows.append(CashflowPoint(year=year, dividend=dividend, investment=0.0, total=dividend))
    return tuple(cashflows)


def compute(market_price, dividend_amount, required_return_percent, expected_dividend):
    """
    Solve the Gordon Growth Model P = D1 / (r - g) for the implied growth rate.

    Inputs are expected to be validated by the caller; no clamping happens here.
    The function always returns a result, and ``is_valid`` is False whenever the
    growth is negative or not below the required return.
    """
    r = required_return_percent / 100
    if market_price:
        g = r - expected_dividend / market_price
    else:
        logger.warning("Market price is zero; implied growth is undefined")
        g = math.nan

    calculated_d1 = dividend_amount * (1 + g)
    d1_consistent = abs(expected_dividend - calculated_d1) < D1_TOLERANCE
    is_valid = g < r and g >= 0

    logger.debug("Implied growth %.6f (r=%.6f, D1=%.4f, P=%.4f, valid=%s)",
                 g, r, expected_dividend, market_price, is_valid)

    return GrowthModelResult(
        implied_growth_percent=g * 100,
        cashflows=project_cashflows(market_price, dividend_amount, g),
        d1_consistent=d1_consistent,
        calculated_d1=calculated_d1,
        is_valid=is_valid,
    )
