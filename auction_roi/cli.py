"""CLI entry point for the auction ROI model."""

import argparse
import logging
import sys

import yaml

from auction_roi.bid import simulate_targets
from auction_roi.config import load_config, load_targets, scenario_to_dict
from auction_roi.model import calculate_roi
from auction_roi.output import bid_table, full_report, to_csv
from auction_roi.params import Scenario
from auction_roi.sensitivity import format_sweep, frange, sweep


def _load(path: str | None) -> Scenario:
    if path:
        return load_config(path)
    return Scenario()


def cmd_report(args: argparse.Namespace) -> None:
    """Print the ROI report for a scenario."""
    scenario = _load(args.config)
    report = calculate_roi(scenario.property, scenario.tax)
    print(full_report(report, scenario))


def cmd_bid(args: argparse.Namespace) -> None:
    """Solve for the maximum bid price at one or more target ROIs."""
    scenario = _load(args.config)

    targets = args.target or []
    if not targets and args.config:
        targets = load_targets(args.config)
    if not targets:
        print("Error: give at least one --target (or 'targets' in the config)", file=sys.stderr)
        sys.exit(1)

    sale_price = args.sale_price or scenario.property.expected_sale_price
    results = simulate_targets(targets, sale_price, scenario.property, scenario.tax)

    if args.csv:
        print(to_csv(results), end="")
    else:
        print(f"Expected sale price: {sale_price:,}")
        print(bid_table(results))


def cmd_sweep(args: argparse.Namespace) -> None:
    """Run sensitivity analysis on a parameter."""
    scenario = _load(args.config)

    parts = args.range.split(",")
    if len(parts) != 3:
        print("Error: --range must be start,stop,step (e.g., 300000000,600000000,50000000)", file=sys.stderr)
        sys.exit(1)

    start, stop, step = float(parts[0]), float(parts[1]), float(parts[2])
    values = frange(start, stop, step)

    is_pct = "rate" in args.param

    results = sweep(scenario, args.param, values)
    print(format_sweep(args.param, results, is_percentage=is_pct))


def cmd_defaults(args: argparse.Namespace) -> None:
    """Print the default scenario as YAML."""
    d = scenario_to_dict(Scenario())
    print(yaml.dump(d, default_flow_style=False, sort_keys=False))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="ROI, tax and maximum bid price model for property auctions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  auction-roi report                          # Report with defaults
  auction-roi report case.yaml                # Report for a config file
  auction-roi bid case.yaml --target 20 --target 40
  auction-roi bid case.yaml --target 30 --csv
  auction-roi sweep --config case.yaml --param property.auction_price --range 300000000,600000000,50000000
  auction-roi defaults                        # Print default config
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # report
    report_parser = subparsers.add_parser("report", help="ROI report for a property")
    report_parser.add_argument("config", nargs="?", help="YAML/JSON config file")

    # bid
    bid_parser = subparsers.add_parser("bid", help="Maximum bid price for target ROIs")
    bid_parser.add_argument("config", nargs="?", help="YAML/JSON config file")
    bid_parser.add_argument("--target", type=float, action="append", help="Target ROI in %% (repeatable)")
    bid_parser.add_argument("--sale-price", type=int, help="Override the expected sale price")
    bid_parser.add_argument("--csv", action="store_true", help="Output as CSV")

    # sweep
    sweep_parser = subparsers.add_parser("sweep", help="Parameter sensitivity analysis")
    sweep_parser.add_argument("--config", help="Base config file")
    sweep_parser.add_argument("--param", required=True, help="Parameter path (e.g., property.auction_price)")
    sweep_parser.add_argument("--range", required=True, help="start,stop,step")

    # defaults
    subparsers.add_parser("defaults", help="Print default parameters")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "report": cmd_report,
        "bid": cmd_bid,
        "sweep": cmd_sweep,
        "defaults": cmd_defaults,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return

    try:
        command(args)
    except (ValueError, OSError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
