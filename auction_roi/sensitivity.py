"""Sensitivity analysis: sweep one parameter, see how returns change."""

from dataclasses import dataclass, fields, replace

import numpy as np

from auction_roi.model import calculate_roi
from auction_roi.output import fmt
from auction_roi.params import Scenario


@dataclass
class SweepResult:
    param_value: float
    acquisition_tax: int
    sale_roi: float
    rental_yield: float
    jeonse_investment: int


def _with_value(scenario: Scenario, path: str, value: float) -> Scenario:
    """Copy a scenario with a field like 'property.auction_price' replaced."""
    section, _, name = path.partition(".")
    if section not in ("property", "tax") or not name:
        raise ValueError(f"Unknown parameter '{path}'. Use property.<field> or tax.<field>")
    target = getattr(scenario, section)
    if name not in {f.name for f in fields(target)}:
        raise ValueError(f"Unknown parameter '{path}'")
    current = getattr(target, name)
    if isinstance(current, bool) or not isinstance(current, (int, float)):
        raise ValueError(f"Parameter '{path}' is not numeric")
    # Keep integer money fields integral
    if isinstance(current, int):
        value = int(value)
    return replace(scenario, **{section: replace(target, **{name: value})})


def sweep(
    scenario: Scenario,
    param_path: str,
    values: list[float],
) -> list[SweepResult]:
    """Run the ROI model for each value of a parameter, return results."""
    results = []
    for val in values:
        s = _with_value(scenario, param_path, val)
        report = calculate_roi(s.property, s.tax)
        results.append(SweepResult(
            param_value=val,
            acquisition_tax=report.acquisition_tax,
            sale_roi=report.sale.roi,
            rental_yield=report.rent.rental_yield,
            jeonse_investment=report.jeonse.actual_investment,
        ))
    return results


def price_grid(start: int, stop: int, n: int) -> list[int]:
    """n evenly spaced whole-won prices from start to stop (inclusive)."""
    return [int(p) for p in np.linspace(start, stop, n).round()]


def is_non_increasing(results: list[SweepResult]) -> bool:
    """True if sale ROI never rises from one sweep point to the next."""
    rois = np.array([r.sale_roi for r in results])
    return bool(np.all(np.diff(rois) <= 0))


def format_sweep(
    param_path: str,
    results: list[SweepResult],
    is_percentage: bool = False,
) -> str:
    """Format sweep results as a table."""
    label = param_path.split(".")[-1]
    header = (
        f"{'':>2} {label:>16} | {'Acq. tax':>14} | {'Sale ROI':>9} | "
        f"{'Rent yield':>10} | {'Jeonse invest':>14}"
    )
    sep = "-" * len(header)
    lines = [
        f"Sensitivity: {param_path}",
        header,
        sep,
    ]

    for r in results:
        if is_percentage:
            val_str = f"{r.param_value:.2f}%"
        else:
            val_str = fmt(r.param_value)
        lines.append(
            f"{'':>2} {val_str:>16} | {fmt(r.acquisition_tax):>14} | "
            f"{r.sale_roi:>8.2f}% | {r.rental_yield:>9.2f}% | "
            f"{fmt(r.jeonse_investment):>14}"
        )

    return "\n".join(lines)


def frange(start: float, stop: float, step: float) -> list[float]:
    """Generate a list of floats from start to stop (inclusive) by step."""
    values = []
    val = start
    while val <= stop + step / 2:  # tolerance for floating point
        values.append(round(val, 6))
        val += step
    return values
