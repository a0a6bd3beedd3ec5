"""Tests for the maximum bid price solver."""

import logging
from dataclasses import replace

import pytest
from auction_roi.bid import (
    MAX_ITERATIONS,
    MIN_BRACKET_WIDTH,
    ROI_TOLERANCE,
    max_bid_price,
    simulate_targets,
)
from auction_roi.model import calculate_roi
from auction_roi.params import Property, PropertyKind, TaxProfile

SALE_PRICE = 600_000_000

PROPERTY = Property(
    auction_price=500_000_000,
    building_area=59.9,
    expected_sale_price=SALE_PRICE,
    public_price=400_000_000,
    kind=PropertyKind.HOUSE,
)
PROFILE = TaxProfile(house_count=1)


def _terminated_properly(result) -> bool:
    return (
        abs(result.achieved_roi - result.target_roi) < ROI_TOLERANCE
        or result.bracket_width < MIN_BRACKET_WIDTH
        or result.iterations == MAX_ITERATIONS
    )


class TestMaxBidPrice:
    def test_reaches_target(self):
        result = max_bid_price(40, SALE_PRICE, PROPERTY, PROFILE)
        assert abs(result.roi_difference) < ROI_TOLERANCE
        assert result.target_roi == 40
        # 40% after a 40% tax needs total cost of ~360M
        assert 340_000_000 < result.max_bid_price < 370_000_000

    def test_self_consistent_with_roi_model(self):
        result = max_bid_price(40, SALE_PRICE, PROPERTY, PROFILE)
        trial = replace(PROPERTY, auction_price=result.max_bid_price, expected_sale_price=SALE_PRICE)
        report = calculate_roi(trial, PROFILE)
        assert report.sale.roi == result.achieved_roi
        assert report == result.report

    def test_roi_difference_is_signed(self):
        result = max_bid_price(25, SALE_PRICE, PROPERTY, PROFILE)
        assert result.roi_difference == result.achieved_roi - result.target_roi

    @pytest.mark.parametrize("target", [-50, 0, 5, 12.5, 30, 45, 80, 1_000])
    def test_termination_conditions(self, target):
        result = max_bid_price(target, SALE_PRICE, PROPERTY, PROFILE)
        assert result.iterations <= MAX_ITERATIONS
        assert _terminated_properly(result)

    def test_unreachable_target_returns_closest(self):
        # Even the lowest bid in range cannot reach 1000%
        result = max_bid_price(1_000, SALE_PRICE, PROPERTY, PROFILE)
        assert result.bracket_width < MIN_BRACKET_WIDTH
        assert result.max_bid_price < 300_000_000 + MIN_BRACKET_WIDTH
        assert result.achieved_roi < 1_000

    def test_trivial_target_pushes_price_up(self):
        result = max_bid_price(-100, SALE_PRICE, PROPERTY, PROFILE)
        assert result.max_bid_price > 900_000_000 - MIN_BRACKET_WIDTH

    def test_sale_price_argument_overrides_property(self):
        prop = replace(PROPERTY, expected_sale_price=1_000_000_000)
        result = max_bid_price(20, SALE_PRICE, prop, PROFILE)
        sale = result.report.sale
        assert sale.total_cost + sale.gross_profit == SALE_PRICE

    def test_caller_property_untouched(self):
        before = replace(PROPERTY)
        max_bid_price(30, SALE_PRICE, PROPERTY, PROFILE)
        assert PROPERTY == before

    def test_with_loan_and_business_profile(self):
        prop = replace(PROPERTY, loan_amount=200_000_000, interest_rate=4.0, renovation_cost=10_000_000)
        profile = TaxProfile(house_count=1, is_business=True, current_year_profit=30_000_000)
        result = max_bid_price(30, SALE_PRICE, prop, profile)
        assert _terminated_properly(result)
        assert result.report.sale.tax_info.endswith("(comparative)")

    def test_logs_outcome(self, caplog):
        with caplog.at_level(logging.INFO, logger="auction_roi.bid"):
            max_bid_price(40, SALE_PRICE, PROPERTY, PROFILE)
        assert "target roi 40.00%" in caplog.text


class TestSimulateTargets:
    def test_one_result_per_target_in_order(self):
        targets = [10, 20, 30, 40]
        results = simulate_targets(targets, SALE_PRICE, PROPERTY, PROFILE)
        assert [r.target_roi for r in results] == targets

    def test_higher_target_means_lower_bid(self):
        results = simulate_targets([10, 20, 30, 40], SALE_PRICE, PROPERTY, PROFILE)
        prices = [r.max_bid_price for r in results]
        assert prices == sorted(prices, reverse=True)
        assert len(set(prices)) == len(prices)

    def test_independent_of_order(self):
        forward = simulate_targets([10, 40], SALE_PRICE, PROPERTY, PROFILE)
        backward = simulate_targets([40, 10], SALE_PRICE, PROPERTY, PROFILE)
        assert forward == list(reversed(backward))
        assert forward[1] == max_bid_price(40, SALE_PRICE, PROPERTY, PROFILE)

    def test_empty(self):
        assert simulate_targets([], SALE_PRICE, PROPERTY, PROFILE) == []
