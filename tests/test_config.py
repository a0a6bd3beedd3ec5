"""Tests for scenario config loading."""

import json

import pytest
from auction_roi.brokerage import estimate_brokerage_fee
from auction_roi.config import (
    dict_to_scenario,
    load_config,
    load_targets,
    parse_config_text,
    scenario_to_dict,
)
from auction_roi.params import Property, PropertyKind, Scenario, TaxProfile

YAML_CONFIG = """\
property:
  case_number: 2024-TK-1234
  auction_price: 350000000
  building_area: 84.9
  expected_sale_price: 450000000
  kind: officetel
  loan_amount: 200000000
  interest_rate: 4.2
  renovation_cost: 5000000
  brokerage_fee: auto
  unknown_field: ignored
tax:
  house_count: 2
  is_business: true
  current_year_profit: 20000000
targets: [10, 25.5]
"""


class TestParseConfig:
    def test_yaml(self):
        scenario = parse_config_text(YAML_CONFIG)
        prop = scenario.property
        assert prop.auction_price == 350_000_000
        assert prop.kind is PropertyKind.OFFICETEL
        assert prop.interest_rate == 4.2
        assert prop.case_number == "2024-TK-1234"
        assert scenario.tax == TaxProfile(house_count=2, is_business=True, current_year_profit=20_000_000)

    def test_brokerage_auto(self):
        scenario = parse_config_text(YAML_CONFIG)
        assert scenario.property.brokerage_fee == estimate_brokerage_fee(350_000_000)

    def test_defaults_for_missing_sections(self):
        assert parse_config_text("") == Scenario()
        assert parse_config_text("tax: {house_count: 1}").property == Property()

    def test_kind_case_insensitive(self):
        scenario = dict_to_scenario({"property": {"kind": "Commercial"}})
        assert scenario.property.kind is PropertyKind.COMMERCIAL

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown property kind"):
            dict_to_scenario({"property": {"kind": "castle"}})

    def test_negative_cost_rejected(self):
        with pytest.raises(ValueError, match="eviction_cost"):
            dict_to_scenario({"property": {"eviction_cost": -1}})

    def test_negative_house_count_rejected(self):
        with pytest.raises(ValueError, match="house_count"):
            dict_to_scenario({"tax": {"house_count": -1}})

    def test_non_mapping_rejected(self):
        with pytest.raises(ValueError):
            parse_config_text("- 1\n- 2\n")

    def test_empty_section_uses_defaults(self):
        assert parse_config_text("property:\ntax:\n") == Scenario()

    def test_non_mapping_section_rejected(self):
        with pytest.raises(ValueError, match="'property' must be a mapping"):
            parse_config_text("property: [1, 2]\n")

    @pytest.mark.parametrize("value", ["lots", "true", "[1]"])
    def test_non_numeric_cost_rejected(self, value):
        with pytest.raises(ValueError, match="property.eviction_cost must be a number"):
            parse_config_text(f"property: {{eviction_cost: {value}}}\n")

    def test_non_numeric_house_count_rejected(self):
        with pytest.raises(ValueError, match="tax.house_count must be a number"):
            parse_config_text("tax: {house_count: two}\n")


class TestLoadConfig:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / "case.yaml"
        path.write_text(YAML_CONFIG)
        assert load_config(path) == parse_config_text(YAML_CONFIG)
        assert load_targets(path) == [10.0, 25.5]

    def test_json_file(self, tmp_path):
        path = tmp_path / "case.json"
        path.write_text(json.dumps({"property": {"auction_price": 123_000_000}}))
        assert load_config(path).property.auction_price == 123_000_000
        assert load_targets(path) == []


class TestScenarioToDict:
    def test_kind_serialised_by_name(self):
        d = scenario_to_dict(Scenario())
        assert d["property"]["kind"] == "house"
        assert d["tax"]["house_count"] == 0

    def test_round_trip(self):
        scenario = parse_config_text(YAML_CONFIG)
        assert dict_to_scenario(scenario_to_dict(scenario)) == scenario
