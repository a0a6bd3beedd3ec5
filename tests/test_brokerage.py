"""Tests for brokerage fee estimation."""

import pytest
from auction_roi.brokerage import estimate_brokerage_fee


class TestBrokerageFee:
    @pytest.mark.parametrize(
        "price, fee",
        [
            (40_000_000, 240_000),  # 0.6%
            (50_000_000, 250_000),  # 0.5% from 50M
            (100_000_000, 500_000),
            (300_000_000, 1_200_000),  # 0.4%
            (700_000_000, 3_500_000),  # 0.5%
            (1_000_000_000, 9_000_000),  # 0.9%
        ],
    )
    def test_tiers(self, price, fee):
        assert estimate_brokerage_fee(price) == fee

    def test_non_positive_price(self):
        assert estimate_brokerage_fee(0) == 0
        assert estimate_brokerage_fee(-1) == 0

    def test_whole_won(self):
        assert isinstance(estimate_brokerage_fee(123_456_789), int)
