#!/usr/bin/env python3
"""
Portfolio CRM - Main Demo

This script walks through a small CRM session:
1. Creates regular, VIP and corporate customers
2. Creates two sales representatives and assigns portfolios
3. Records calls, emails and meetings
4. Shows interaction histories and customer-specific actions
5. Renews a corporate contract
6. Prints interaction time reports and the system report
"""

import logging

from crm import CRMRegistry
from crm.config import get_settings
from crm.presentation import (
    render_customer_actions,
    render_customer_list,
    render_interaction_time_report,
    render_interactions,
    render_sales_rep_list,
    render_system_report
)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def run_demo(registry: CRMRegistry) -> None:
    """Run the demo session against a registry."""
    regular = registry.create_regular_customer(
        "John Doe", "john@example.com", "555-1234", "Small Business"
    )
    vip = registry.create_vip_customer(
        "Jane Smith", "jane@example.com", "555-5678", "Michael Johnson"
    )
    corporate = registry.create_corporate_customer(
        "Bob Anderson", "bob@megacorp.com", "555-9876", "MegaCorp", 1500, 50000.00
    )

    rep1 = registry.create_sales_representative("Alice Thompson")
    rep2 = registry.create_sales_representative("David Wilson")

    registry.assign_customer_to_rep(regular.id, rep1.id)
    registry.assign_customer_to_rep(vip.id, rep1.id)
    registry.assign_customer_to_rep(corporate.id, rep2.id)

    print(render_customer_list(registry.list_customers()))
    print(render_sales_rep_list(registry.list_sales_reps()))

    rep1.record_call(regular.id, "Discussed new product features", 15)
    rep1.record_email(vip.id, "Sending exclusive offer details", "VIP Exclusive Offer")
    rep1.record_meeting(vip.id, "Quarterly review meeting", "Headquarters", 60)
    rep2.record_call(corporate.id, "Technical support for recent installation", 30)
    rep2.record_meeting(corporate.id, "Contract renewal discussion", "Client's Office", 90)

    print()
    print("--- Customer Interactions ---")
    for rep, customer in [(rep1, regular), (rep1, vip), (rep2, corporate)]:
        print(render_interactions(customer, rep.view_customer_interactions(customer.id)))
    print(f"{vip.name} loyalty points: {vip.loyalty_points:g}")

    print()
    print("--- Customer-Specific Actions ---")
    print(render_customer_actions(rep1.perform_customer_actions()))
    print(render_customer_actions(rep2.perform_customer_actions()))

    renewal = corporate.renew_contract(75000.00)
    print(
        f"Renewing contract for {renewal.company_name}. "
        f"Old amount: ${renewal.previous_value:.2f}, New amount: ${renewal.new_value:.2f}"
    )

    print()
    print("--- Interaction Time Reports ---")
    print(render_interaction_time_report(rep1.total_interaction_time_report()))
    print(render_interaction_time_report(rep2.total_interaction_time_report()))

    print()
    print(render_system_report(registry.system_report()))


def main():
    """Main entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)
    run_demo(CRMRegistry(settings))


if __name__ == "__main__":
    main()
