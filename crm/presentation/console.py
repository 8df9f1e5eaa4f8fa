"""
Console Rendering

Turns model results into printable text. The model never prints;
callers decide what to render and where.
"""

from typing import Iterable, Optional

from ..core.customers import Customer, CustomerAction
from ..core.interactions import Interaction
from ..reports.schemas import (
    CustomerSummary,
    InteractionTimeReport,
    SalesRepSummary,
    SystemReport
)

NOT_FOUND = "Customer not found."


def render_customer_list(
    rows: list[CustomerSummary],
    title: str = "All Customers",
    empty_message: str = "No customers in the system."
) -> str:
    if not rows:
        return empty_message

    lines = [f"{title}:"]
    for row in rows:
        lines.append(f"ID: {row.id}, Name: {row.name}, Type: {row.kind.value}")
    return "\n".join(lines)


def render_sales_rep_list(rows: list[SalesRepSummary]) -> str:
    if not rows:
        return "No sales representatives in the system."

    lines = ["All Sales Representatives:"]
    for row in rows:
        lines.append(f"ID: {row.id}, Name: {row.name}")
    return "\n".join(lines)


def render_interactions(
    customer: Customer,
    history: Optional[Iterable[Interaction]]
) -> str:
    """Render a customer's history; None means the lookup failed."""
    if history is None:
        return NOT_FOUND

    history = list(history)
    if not history:
        return f"No interactions recorded for {customer.name}"

    lines = [f"Interactions for {customer.name} ({customer.kind.value}):"]
    lines.extend(interaction.describe() for interaction in history)
    return "\n".join(lines)


def render_customer_actions(actions: list[CustomerAction]) -> str:
    return "\n".join(action.description for action in actions)


def render_interaction_time_report(report: InteractionTimeReport) -> str:
    rule = "-" * 40
    lines = [f"Interaction Time Report for Sales Rep: {report.rep_name}", rule]
    for entry in report.entries:
        lines.append(
            f"Customer: {entry.name} ({entry.kind.value})"
            f" - Total Interaction Time: {entry.total_minutes} minutes"
        )
    lines.append(rule)
    return "\n".join(lines)


def render_system_report(report: SystemReport) -> str:
    lines = [
        "========== CRM SYSTEM REPORT ==========",
        f"Total Customers: {report.total_customers}"
    ]
    for kind, count in report.customers_by_kind.items():
        lines.append(f"  {kind} Customers: {count}")
    lines.append(f"Total Sales Representatives: {report.total_sales_reps}")
    lines.append(f"Total Interaction Time: {report.total_interaction_minutes} minutes")
    lines.append("=" * 38)
    return "\n".join(lines)
