"""Korean property tax calculations: income tax, acquisition tax, capital gains tax.

All amounts are whole won. Every tax is floored to a whole unit at the
point it is computed; callers rely on these exact floor points to
reproduce reference figures.
"""

import math

from auction_roi.params import PropertyKind


# ---------------------------------------------------------------------------
# Comprehensive income tax brackets
# ---------------------------------------------------------------------------

# (upper bound inclusive, rate, cumulative progressive deduction)
INCOME_BRACKETS = [
    (14_000_000, 0.06, 0),
    (50_000_000, 0.15, 1_260_000),
    (88_000_000, 0.24, 5_760_000),
    (150_000_000, 0.35, 15_440_000),
    (300_000_000, 0.38, 19_940_000),
    (500_000_000, 0.40, 25_940_000),
    (float("inf"), 0.45, 50_940_000),
]


def _bracket_for(income: float) -> tuple[float, float, int]:
    for bracket in INCOME_BRACKETS:
        if income <= bracket[0]:
            return bracket
    return INCOME_BRACKETS[-1]


def income_tax(taxable_income: float) -> int:
    """Progressive income tax using the quick-deduction form.

    tax = floor(income * rate - deduction) for the bracket containing income.
    """
    if taxable_income <= 0:
        return 0
    _, rate, deduction = _bracket_for(taxable_income)
    return math.floor(taxable_income * rate - deduction)


def marginal_income_tax(base_income: float, additional_income: float) -> int:
    """Extra income tax caused by layering new income on top of existing income."""
    return income_tax(base_income + additional_income) - income_tax(base_income)


def income_tax_bracket_info(income: float) -> str:
    if income <= 0:
        return "0% (no income)"
    _, rate, _ = _bracket_for(income)
    return f"{round(rate * 100)}% bracket"


def effective_income_tax_rate(income: float) -> float:
    """Income tax as a percentage of income."""
    if income <= 0:
        return 0.0
    return income_tax(income) / income * 100


# ---------------------------------------------------------------------------
# Acquisition tax
# ---------------------------------------------------------------------------

NON_RESIDENTIAL_ACQUISITION_RATE = 0.046
SMALL_HOUSE_AREA = 85.0  # m², national housing size


def _round_half_up(value: float, places: int) -> float:
    scale = 10**places
    return math.floor(value * scale + 0.5) / scale


def basic_house_rate(price: float) -> float:
    """Base acquisition tax rate for a house before multi-house surcharges.

    1% up to 600M, 3% above 900M, and in between a linear scale
    (price * 2 / 300M - 3)% rounded to two decimal places of a percent.
    """
    if price <= 600_000_000:
        return 0.01
    if price > 900_000_000:
        return 0.03
    rate = (price * 2.0 / 300_000_000.0 - 3.0) / 100.0
    return _round_half_up(rate, 4)


def acquisition_tax_rate(
    price: float,
    building_area: float,
    house_count: int,
    is_regulated_zone: bool,
    kind: PropertyKind,
) -> float:
    """Total acquisition tax rate (base + education surtax + rural special tax).

    Surcharges for multiple houses:
      - 2 houses in a regulated zone: 8%
      - 3 or more houses: 12% in a regulated zone, otherwise 8%
    """
    if not kind.is_residential:
        return NON_RESIDENTIAL_ACQUISITION_RATE

    base = basic_house_rate(price)
    if house_count == 2 and is_regulated_zone:
        base = 0.08
    elif house_count >= 3:
        base = 0.12 if is_regulated_zone else 0.08

    education = 0.004 if base > 0.03 else base * 0.1

    small = building_area <= SMALL_HOUSE_AREA
    rural = 0.0
    if base <= 0.03:
        if not small:
            rural = 0.002
    elif base == 0.08:
        rural = 0.006 if small else 0.01
    elif base >= 0.12:
        rural = 0.01 if small else 0.014

    return base + education + rural


def acquisition_tax(
    price: float,
    building_area: float,
    house_count: int,
    is_regulated_zone: bool,
    kind: PropertyKind,
) -> int:
    """Acquisition tax payable, floored to a whole unit."""
    rate = acquisition_tax_rate(price, building_area, house_count, is_regulated_zone, kind)
    return math.floor(price * rate)


def acquisition_tax_rate_info(
    price: float,
    building_area: float,
    house_count: int,
    is_regulated_zone: bool,
    kind: PropertyKind,
) -> str:
    """Effective acquisition tax rate as a display label, e.g. '1.10%'."""
    if not kind.is_residential:
        return "4.6% (officetel/commercial)"
    if price <= 0:
        return "0.00%"
    tax = acquisition_tax(price, building_area, house_count, is_regulated_zone, kind)
    return f"{tax / price * 100:.2f}%"


# ---------------------------------------------------------------------------
# Capital gains tax
# ---------------------------------------------------------------------------

SHORT_TERM_MONTHS = 24
SHORT_TERM_RATE = 0.40
SOLE_HOUSE_PUBLIC_PRICE_CAP = 1_200_000_000
SOLE_HOUSE_EXEMPT_PROFIT = 900_000_000

# Long-term holding special deduction: (minimum months held, deduction rate)
LONG_TERM_DEDUCTIONS = [
    (120, 0.40),
    (108, 0.36),
    (96, 0.32),
    (84, 0.28),
    (72, 0.24),
    (60, 0.20),
    (48, 0.16),
    (36, 0.12),
]


def long_term_deduction_rate(holding_months: int) -> float:
    for min_months, rate in LONG_TERM_DEDUCTIONS:
        if holding_months >= min_months:
            return rate
    return 0.0


def _tax_after_long_term_deduction(profit: int, holding_months: int) -> int:
    deduction = math.floor(profit * long_term_deduction_rate(holding_months))
    return income_tax(profit - deduction)


def capital_gains_tax(
    kind: PropertyKind,
    profit: int,
    holding_months: int = 12,
    is_sole_house: bool = False,
    public_price: int = 0,
) -> int:
    """Capital gains tax on disposal.

    - Losses are not taxed.
    - Sole house held 2+ years with public price <= 1.2B: only profit above
      900M is taxable, after the long-term deduction.
    - Held under 2 years: flat 40%.
    - Otherwise: long-term deduction, then progressive income tax rates.
    """
    if profit <= 0:
        return 0

    if (
        kind.is_residential
        and is_sole_house
        and holding_months >= SHORT_TERM_MONTHS
        and public_price <= SOLE_HOUSE_PUBLIC_PRICE_CAP
    ):
        taxable = max(0, profit - SOLE_HOUSE_EXEMPT_PROFIT)
        if taxable == 0:
            return 0
        return _tax_after_long_term_deduction(taxable, holding_months)

    if holding_months < SHORT_TERM_MONTHS:
        return math.floor(profit * SHORT_TERM_RATE)

    return _tax_after_long_term_deduction(profit, holding_months)


def capital_gains_tax_info(holding_months: int, is_sole_house: bool) -> str:
    if is_sole_house and holding_months >= SHORT_TERM_MONTHS:
        return "sole house (exemption may apply)"
    if holding_months < SHORT_TERM_MONTHS:
        return "40% (short-term, under 2 years)"
    rate = long_term_deduction_rate(holding_months)
    return f"progressive (long-term deduction {rate:.0%})"
