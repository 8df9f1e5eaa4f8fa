"""Plain-text rendering of model results for console output."""

from .console import (
    render_customer_list,
    render_sales_rep_list,
    render_interactions,
    render_customer_actions,
    render_interaction_time_report,
    render_system_report
)

__all__ = [
    "render_customer_list",
    "render_sales_rep_list",
    "render_interactions",
    "render_customer_actions",
    "render_interaction_time_report",
    "render_system_report"
]
