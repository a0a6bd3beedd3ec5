"""Brokerage fee estimation for the purchase.

Based on the statutory maximum commission schedule for housing transactions.
Actual fees are negotiated and may be lower than these caps.
"""

import math

# (price upper bound exclusive, commission rate)
_RATE_TABLE: list[tuple[float, float]] = [
    (50_000_000, 0.006),
    (200_000_000, 0.005),
    (600_000_000, 0.004),
    (900_000_000, 0.005),
    (float("inf"), 0.009),
]


def estimate_brokerage_fee(price: float) -> int:
    """Estimate the brokerage fee in won.

    Parameters
    ----------
    price : float
        Transaction price in won.

    Returns
    -------
    int
        Commission at the capped rate for the price tier, floored to a
        whole won. Returns 0 for non-positive prices.
    """
    if price <= 0:
        return 0
    for upper_bound, rate in _RATE_TABLE:
        if price < upper_bound:
            return math.floor(price * rate)
    return math.floor(price * _RATE_TABLE[-1][1])
