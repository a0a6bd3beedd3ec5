"""Core ROI model for an auctioned property.

Evaluates three ways of realising the investment:

Sale scenario (short-term resale):
  - Costs: auction price + acquisition tax + loan interest + itemized expenses
  - Tax on the gross profit depends on the investor's tax regime
  - ROI = net profit / cash actually invested

Rent scenario (monthly rent):
  - Monthly rent less monthly loan interest, annualised
  - Cash invested is reduced by the loan and the rent deposit

Jeonse scenario (key-money lease):
  - Cash invested is reduced by the key-money deposit
  - "Plus premium" when the deposit covers the entire outlay

Every figure is a whole won; intermediate values are floored at the same
points as statutory calculations.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from auction_roi.params import Property, TaxProfile
from auction_roi.tax import (
    acquisition_tax,
    acquisition_tax_rate_info,
    capital_gains_tax,
    marginal_income_tax,
)


@dataclass(frozen=True)
class SaleScenario:
    total_cost: int
    gross_profit: int
    net_profit: int
    actual_investment: int
    total_tax: int  # tax actually applied
    roi: float  # %
    tax_info: str
    loan_interest: int
    income_tax: int
    capital_gains_tax: int


@dataclass(frozen=True)
class RentScenario:
    monthly_rent: int
    monthly_interest: int
    monthly_net_income: int
    annual_net_income: int
    actual_investment: int
    rental_yield: float  # %
    deposit: int


@dataclass(frozen=True)
class JeonseScenario:
    actual_investment: int
    is_plus_premium: bool  # deposit exceeds the cash outlay
    deposit: int


@dataclass(frozen=True)
class ROIReport:
    sale: SaleScenario
    rent: RentScenario
    jeonse: JeonseScenario
    acquisition_tax: int
    acquisition_tax_rate: str
    common_expenses: int


# ---------------------------------------------------------------------------
# Tax regimes
# ---------------------------------------------------------------------------


class TaxRegime(Enum):
    INDIVIDUAL = "individual"
    BUSINESS_RESIDENTIAL = "business_residential"
    BUSINESS_NONRESIDENTIAL = "business_nonresidential"


@dataclass(frozen=True)
class TaxOutcome:
    income_tax: int
    capital_gains_tax: int
    applied_tax: int
    tax_info: str


def _sale_capital_gains_tax(prop: Property, profile: TaxProfile, gross_profit: int) -> int:
    return capital_gains_tax(
        prop.kind,
        gross_profit,
        prop.holding_months,
        profile.is_sole_house,
        prop.public_price,
    )


def _individual_tax(prop: Property, profile: TaxProfile, gross_profit: int) -> TaxOutcome:
    cgt = _sale_capital_gains_tax(prop, profile, gross_profit)
    return TaxOutcome(0, cgt, cgt, "capital gains tax")


def _business_residential_tax(
    prop: Property, profile: TaxProfile, gross_profit: int
) -> TaxOutcome:
    """Comparative taxation: the lower of business income tax and CGT applies."""
    income = marginal_income_tax(profile.current_year_profit, gross_profit)
    cgt = _sale_capital_gains_tax(prop, profile, gross_profit)
    applied = min(income, cgt)
    if applied == income:
        info = "business income tax (comparative)"
    else:
        info = "capital gains tax (comparative)"
    return TaxOutcome(income, cgt, applied, info)


def _business_nonresidential_tax(
    prop: Property, profile: TaxProfile, gross_profit: int
) -> TaxOutcome:
    income = marginal_income_tax(profile.current_year_profit, gross_profit)
    return TaxOutcome(income, 0, income, "business income tax (officetel/commercial)")


TAX_REGIMES: dict[TaxRegime, Callable[[Property, TaxProfile, int], TaxOutcome]] = {
    TaxRegime.INDIVIDUAL: _individual_tax,
    TaxRegime.BUSINESS_RESIDENTIAL: _business_residential_tax,
    TaxRegime.BUSINESS_NONRESIDENTIAL: _business_nonresidential_tax,
}


def select_regime(prop: Property, profile: TaxProfile) -> TaxRegime:
    if not profile.is_business:
        return TaxRegime.INDIVIDUAL
    if prop.kind.is_residential:
        return TaxRegime.BUSINESS_RESIDENTIAL
    return TaxRegime.BUSINESS_NONRESIDENTIAL


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def loan_interest(loan_amount: int, interest_rate: float, months: int) -> int:
    """Simple (non-amortising) interest over the holding period."""
    if loan_amount == 0 or interest_rate == 0 or months == 0:
        return 0
    monthly_rate = interest_rate / 100 / 12
    return math.floor(loan_amount * monthly_rate * months)


def sale_scenario(
    prop: Property,
    profile: TaxProfile,
    acq_tax: int,
    common_expenses: int,
    regime: TaxRegime | None = None,
) -> SaleScenario:
    interest = loan_interest(prop.loan_amount, prop.interest_rate, prop.loan_months)

    total_cost = prop.auction_price + acq_tax + interest + common_expenses
    gross_profit = prop.expected_sale_price - total_cost

    if regime is None:
        regime = select_regime(prop, profile)
    taxes = TAX_REGIMES[regime](prop, profile, gross_profit)

    net_profit = gross_profit - taxes.applied_tax
    actual_investment = (
        (prop.auction_price - prop.loan_amount) + acq_tax + common_expenses + interest
    )
    roi = net_profit / actual_investment * 100 if actual_investment > 0 else 0.0

    return SaleScenario(
        total_cost=total_cost,
        gross_profit=gross_profit,
        net_profit=net_profit,
        actual_investment=actual_investment,
        total_tax=taxes.applied_tax,
        roi=roi,
        tax_info=taxes.tax_info,
        loan_interest=interest,
        income_tax=taxes.income_tax,
        capital_gains_tax=taxes.capital_gains_tax,
    )


def rent_scenario(prop: Property, acq_tax: int, common_expenses: int) -> RentScenario:
    monthly_interest = math.floor(prop.loan_amount * (prop.interest_rate / 100.0) / 12.0)
    monthly_net = prop.monthly_rent - monthly_interest
    annual_net = monthly_net * 12

    actual_investment = (
        (prop.auction_price - prop.loan_amount - prop.rent_deposit)
        + acq_tax
        + common_expenses
    )
    rental_yield = annual_net / actual_investment * 100 if actual_investment > 0 else 0.0

    return RentScenario(
        monthly_rent=prop.monthly_rent,
        monthly_interest=monthly_interest,
        monthly_net_income=monthly_net,
        annual_net_income=annual_net,
        actual_investment=actual_investment,
        rental_yield=rental_yield,
        deposit=prop.rent_deposit,
    )


def jeonse_scenario(prop: Property, acq_tax: int, common_expenses: int) -> JeonseScenario:
    actual_investment = (prop.auction_price - prop.jeonse_deposit) + acq_tax + common_expenses
    return JeonseScenario(
        actual_investment=actual_investment,
        is_plus_premium=actual_investment <= 0,
        deposit=prop.jeonse_deposit,
    )


def calculate_roi(
    prop: Property,
    profile: TaxProfile,
    regime: TaxRegime | None = None,
) -> ROIReport:
    """Build the full report for one property and tax profile.

    ``regime`` overrides the tax regime normally chosen from the profile.
    """
    acq_args = (
        prop.auction_price,
        prop.building_area,
        profile.house_count,
        prop.is_regulated_zone,
        prop.kind,
    )
    acq_tax = acquisition_tax(*acq_args)
    common = prop.common_expenses

    return ROIReport(
        sale=sale_scenario(prop, profile, acq_tax, common, regime),
        rent=rent_scenario(prop, acq_tax, common),
        jeonse=jeonse_scenario(prop, acq_tax, common),
        acquisition_tax=acq_tax,
        acquisition_tax_rate=acquisition_tax_rate_info(*acq_args),
        common_expenses=common,
    )
