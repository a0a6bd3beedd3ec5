"""Output formatting for ROI reports and bid simulations."""

import csv
import io

from auction_roi.bid import BidPriceResult
from auction_roi.model import ROIReport
from auction_roi.params import Scenario


def fmt(value: float) -> str:
    """Format a whole-unit amount with thousands separators."""
    return f"{value:,.0f}"


def summary_header(scenario: Scenario) -> str:
    """Generate the header showing key parameters."""
    prop = scenario.property
    tax = scenario.tax

    title = "Auction ROI Analysis"
    if prop.case_number:
        title += f" - {prop.case_number}"

    lines = [
        title,
        "=" * 70,
        "",
        f"  Kind:            {prop.kind.value}"
        f"{' (regulated zone)' if prop.is_regulated_zone else ''}",
        f"  Auction price:   {fmt(prop.auction_price)}",
        f"  Expected sale:   {fmt(prop.expected_sale_price)}",
        f"  Public price:    {fmt(prop.public_price)}",
        f"  Building area:   {prop.building_area:.2f} m2",
        f"  Loan:            {fmt(prop.loan_amount)} at {prop.interest_rate:.2f}% "
        f"for {prop.loan_months} months",
        f"  Expenses:        {fmt(prop.common_expenses)}",
        "",
        f"  Houses owned:    {tax.house_count}",
        f"  Business:        {'yes' if tax.is_business else 'no'}",
        "",
    ]

    if prop.address:
        lines.insert(3, f"  Address:         {prop.address}")

    if tax.is_business:
        lines.insert(
            -1, f"  Profit this year: {fmt(tax.current_year_profit)}"
        )
    if tax.prior_year_income:
        lines.insert(-1, f"  Prior-year income: {fmt(tax.prior_year_income)}")

    return "\n".join(lines)


def report_table(report: ROIReport) -> str:
    """Render the three disposal scenarios."""
    sale = report.sale
    rent = report.rent
    jeonse = report.jeonse

    lines = [
        f"Acquisition tax: {fmt(report.acquisition_tax)} ({report.acquisition_tax_rate})",
        "",
        "Sale:",
        f"  Loan interest:     {fmt(sale.loan_interest):>16}",
        f"  Total cost:        {fmt(sale.total_cost):>16}",
        f"  Gross profit:      {fmt(sale.gross_profit):>16}",
        f"  Tax:               {fmt(sale.total_tax):>16}  {sale.tax_info}",
        f"  Net profit:        {fmt(sale.net_profit):>16}",
        f"  Cash invested:     {fmt(sale.actual_investment):>16}",
        f"  ROI:               {sale.roi:>15.2f}%",
        "",
        "Monthly rent:",
        f"  Rent / interest:   {fmt(rent.monthly_rent):>16} / {fmt(rent.monthly_interest)}",
        f"  Net per month:     {fmt(rent.monthly_net_income):>16}",
        f"  Deposit:           {fmt(rent.deposit):>16}",
        f"  Cash invested:     {fmt(rent.actual_investment):>16}",
        f"  Yield:             {rent.rental_yield:>15.2f}%",
        "",
        "Jeonse:",
        f"  Deposit:           {fmt(jeonse.deposit):>16}",
        f"  Cash invested:     {fmt(jeonse.actual_investment):>16}",
    ]
    if jeonse.is_plus_premium:
        lines.append("  Plus premium: the deposit covers the entire outlay.")

    return "\n".join(lines)


def bid_table(results: list[BidPriceResult]) -> str:
    """Target ROI vs maximum bid price."""
    header = (
        f"{'Target':>8} | {'Max bid':>16} | {'Achieved':>9} | "
        f"{'Diff':>7} | {'Acq. tax':>14} | {'Net profit':>14}"
    )
    sep = "-" * len(header)
    lines = [header, sep]

    for r in results:
        lines.append(
            f"{r.target_roi:>7.2f}% | {fmt(r.max_bid_price):>16} | "
            f"{r.achieved_roi:>8.2f}% | {r.roi_difference:>+7.2f} | "
            f"{fmt(r.report.acquisition_tax):>14} | {fmt(r.report.sale.net_profit):>14}"
        )

    return "\n".join(lines)


def to_csv(results: list[BidPriceResult]) -> str:
    """Export bid simulation results to CSV string."""
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([
        "target_roi", "max_bid_price", "achieved_roi", "roi_difference",
        "acquisition_tax", "total_cost", "gross_profit", "total_tax",
        "net_profit", "actual_investment", "iterations",
    ])
    for r in results:
        sale = r.report.sale
        writer.writerow([
            f"{r.target_roi:.2f}", r.max_bid_price, f"{r.achieved_roi:.4f}",
            f"{r.roi_difference:.4f}",
            r.report.acquisition_tax, sale.total_cost, sale.gross_profit,
            sale.total_tax, sale.net_profit, sale.actual_investment,
            r.iterations,
        ])
    return output.getvalue()


def full_report(report: ROIReport, scenario: Scenario) -> str:
    """Generate a complete summary report."""
    parts = [
        summary_header(scenario),
        report_table(report),
        "",
    ]

    if report.sale.actual_investment <= 0:
        parts.append("No cash invested in the sale scenario: ROI reported as 0.")
    elif report.sale.net_profit > 0:
        parts.append("The sale scenario is profitable after tax.")
    else:
        parts.append("The sale scenario loses money after tax.")

    return "\n".join(parts)
