"""Maximum bid price solver: invert the ROI model by bisection.

Sale ROI falls as the auction price rises (more cost against the same
resale price), so the price that achieves a target ROI can be found by
halving a price interval. The search starts at [S/2, 1.5 * S] where S is
the expected sale price.
"""

import logging
import math
from dataclasses import dataclass, replace

from auction_roi.model import ROIReport, calculate_roi
from auction_roi.params import Property, TaxProfile

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 60
ROI_TOLERANCE = 0.05  # percentage points
MIN_BRACKET_WIDTH = 10_000  # won


@dataclass(frozen=True)
class BidPriceResult:
    max_bid_price: int
    achieved_roi: float
    target_roi: float
    roi_difference: float  # achieved - target
    report: ROIReport
    iterations: int
    bracket_width: float  # high - low when the search stopped


def _sale_roi(prop: Property, profile: TaxProfile) -> float:
    return calculate_roi(prop, profile).sale.roi


def max_bid_price(
    target_roi: float,
    expected_sale_price: int,
    prop: Property,
    profile: TaxProfile,
) -> BidPriceResult:
    """Find the highest auction price whose sale ROI meets ``target_roi``.

    Stops when the ROI is within ROI_TOLERANCE of the target, when the
    price interval is narrower than MIN_BRACKET_WIDTH, or after
    MAX_ITERATIONS. The closest price seen is returned in every case.
    """
    low = math.floor(expected_sale_price / 2)
    high = expected_sale_price * 1.5
    price = math.floor((low + high) / 2)

    best_price = price
    best_roi = -999.0
    iterations = 0

    while iterations < MAX_ITERATIONS:
        iterations += 1

        trial = replace(prop, auction_price=price, expected_sale_price=expected_sale_price)
        roi = _sale_roi(trial, profile)
        logger.debug("iteration %d: price=%d roi=%.4f", iterations, price, roi)

        if abs(roi - target_roi) < abs(best_roi - target_roi):
            best_price = price
            best_roi = roi

        if abs(roi - target_roi) < ROI_TOLERANCE:
            best_price = price
            best_roi = roi
            break

        if roi > target_roi:
            # Still above target: the bid can go higher
            low = price
        else:
            high = price

        price = math.floor((low + high) / 2)

        if abs(high - low) < MIN_BRACKET_WIDTH:
            break

    final = replace(prop, auction_price=best_price, expected_sale_price=expected_sale_price)
    report = calculate_roi(final, profile)
    achieved = report.sale.roi

    logger.info(
        "target roi %.2f%%: bid %d achieves %.2f%% after %d iterations",
        target_roi, best_price, achieved, iterations,
    )

    return BidPriceResult(
        max_bid_price=best_price,
        achieved_roi=achieved,
        target_roi=target_roi,
        roi_difference=achieved - target_roi,
        report=report,
        iterations=iterations,
        bracket_width=high - low,
    )


def simulate_targets(
    target_rois: list[float],
    expected_sale_price: int,
    prop: Property,
    profile: TaxProfile,
) -> list[BidPriceResult]:
    """Solve for each target ROI independently, preserving order."""
    return [
        max_bid_price(target, expected_sale_price, prop, profile)
        for target in target_rois
    ]
