"""YAML config loading and validation."""

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path

import yaml

from auction_roi.brokerage import estimate_brokerage_fee
from auction_roi.params import Property, PropertyKind, Scenario, TaxProfile

logger = logging.getLogger(__name__)

_COST_FIELDS = (
    "renovation_cost",
    "eviction_cost",
    "brokerage_fee",
    "vacancy_cost",
    "other_costs",
)


def load_config(path: str | Path) -> Scenario:
    """Load a scenario from a YAML or JSON file."""
    path = Path(path)
    scenario = parse_config_text(path.read_text(), suffix=path.suffix)
    logger.debug("loaded scenario from %s", path)
    return scenario


def load_targets(path: str | Path) -> list[float]:
    """Target ROI list from the optional top-level 'targets' key."""
    path = Path(path)
    data = _parse(path.read_text(), path.suffix) or {}
    return [float(t) for t in data.get("targets", [])]


def _parse(text: str, suffix: str) -> dict:
    if suffix == ".json":
        return json.loads(text)
    # YAML is a superset of JSON
    return yaml.safe_load(text)


def parse_config_text(text: str, suffix: str = ".yaml") -> Scenario:
    """Parse YAML/JSON config text into a Scenario."""
    data = _parse(text, suffix) or {}
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping with 'property' and 'tax' sections")
    return dict_to_scenario(data)


def _parse_kind(value: str | PropertyKind) -> PropertyKind:
    if isinstance(value, PropertyKind):
        return value
    try:
        return PropertyKind[str(value).upper()]
    except KeyError:
        raise ValueError(
            f"Unknown property kind '{value}'. "
            f"Supported: {[k.name.lower() for k in PropertyKind]}"
        ) from None


def _section(data: dict, name: str) -> dict:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"'{name}' must be a mapping, got {type(value).__name__}")
    return dict(value)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def dict_to_scenario(data: dict) -> Scenario:
    """Convert a nested dict to a Scenario, validating inputs."""
    prop_data = _section(data, "property")
    tax_data = _section(data, "tax")

    if "kind" in prop_data:
        prop_data["kind"] = _parse_kind(prop_data["kind"])

    prop_fields = {f.name for f in fields(Property)}
    tax_fields = {f.name for f in fields(TaxProfile)}
    prop_data = {k: v for k, v in prop_data.items() if k in prop_fields}
    tax_data = {k: v for k, v in tax_data.items() if k in tax_fields}

    if prop_data.get("brokerage_fee") == "auto":
        price = prop_data.get("auction_price", Property.auction_price)
        prop_data["brokerage_fee"] = estimate_brokerage_fee(price)

    for name in _COST_FIELDS:
        value = prop_data.get(name, 0)
        if not _is_number(value):
            raise ValueError(f"property.{name} must be a number, got {value!r}")
        if value < 0:
            raise ValueError(f"property.{name} must be >= 0, got {value}")
    house_count = tax_data.get("house_count", 0)
    if not _is_number(house_count):
        raise ValueError(f"tax.house_count must be a number, got {house_count!r}")
    if house_count < 0:
        raise ValueError(f"tax.house_count must be >= 0, got {house_count}")

    return Scenario(property=Property(**prop_data), tax=TaxProfile(**tax_data))


def scenario_to_dict(scenario: Scenario) -> dict:
    """Convert a Scenario to a serialisable dict."""
    d = asdict(scenario)
    d["property"]["kind"] = scenario.property.kind.name.lower()
    return d
