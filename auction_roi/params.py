"""Input parameters for auction ROI modeling."""

from dataclasses import dataclass, field
from enum import Enum


class PropertyKind(Enum):
    HOUSE = "HOUSE"
    OFFICETEL = "OFFICETEL"
    COMMERCIAL = "COMMERCIAL"

    @property
    def is_residential(self) -> bool:
        return self is PropertyKind.HOUSE


@dataclass(frozen=True)
class Property:
    """A property won (or bid on) at auction.

    All monetary fields are whole currency units. ``interest_rate`` is an
    annual percentage (4.5 means 4.5% p.a.).
    """

    auction_price: int = 500_000_000
    building_area: float = 84.9  # m²
    expected_sale_price: int = 600_000_000
    public_price: int = 400_000_000  # official assessed price
    is_regulated_zone: bool = False
    kind: PropertyKind = PropertyKind.HOUSE

    # Financing
    loan_amount: int = 0
    loan_months: int = 12
    interest_rate: float = 0.0

    # Itemized transaction costs
    renovation_cost: int = 0
    eviction_cost: int = 0
    brokerage_fee: int = 0
    vacancy_cost: int = 0
    other_costs: int = 0

    # Holding channels
    monthly_rent: int = 0
    rent_deposit: int = 0  # deposit taken alongside monthly rent
    jeonse_deposit: int = 0  # key-money deposit, no monthly rent

    # Capital gains holding period assumed at disposal
    holding_months: int = 12

    # Labels (report only)
    case_number: str = ""
    address: str = ""

    @property
    def common_expenses(self) -> int:
        return (
            self.renovation_cost
            + self.eviction_cost
            + self.brokerage_fee
            + self.vacancy_cost
            + self.other_costs
        )


@dataclass(frozen=True)
class TaxProfile:
    """Investor tax situation."""

    house_count: int = 0  # houses already owned, excluding this one
    is_business: bool = False  # registered real-estate trading business
    prior_year_income: int = 0
    current_year_profit: int = 0  # business profit already booked this year

    @property
    def is_sole_house(self) -> bool:
        return self.house_count == 0


@dataclass(frozen=True)
class Scenario:
    """A property together with the investor's tax profile."""

    property: Property = field(default_factory=Property)
    tax: TaxProfile = field(default_factory=TaxProfile)
