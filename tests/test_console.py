"""Tests for console rendering."""

from crm.core import Call, Email
from crm.presentation import (
    render_customer_actions,
    render_customer_list,
    render_interaction_time_report,
    render_interactions,
    render_sales_rep_list,
    render_system_report,
)


class TestListings:

    def test_customer_list(self, populated):
        text = render_customer_list(populated["registry"].list_customers())
        assert text.splitlines() == [
            "All Customers:",
            "ID: 1, Name: John Doe, Type: Regular",
            "ID: 2, Name: Jane Smith, Type: VIP",
            "ID: 3, Name: Bob Anderson, Type: Corporate",
        ]

    def test_empty_customer_list(self):
        assert render_customer_list([]) == "No customers in the system."

    def test_sales_rep_list(self, populated):
        text = render_sales_rep_list(populated["registry"].list_sales_reps())
        assert text.splitlines() == [
            "All Sales Representatives:",
            "ID: 1, Name: Alice Thompson",
            "ID: 2, Name: David Wilson",
        ]

    def test_empty_sales_rep_list(self):
        assert render_sales_rep_list([]) == "No sales representatives in the system."


class TestInteractions:

    def test_not_found(self, populated):
        assert render_interactions(populated["regular"], None) == "Customer not found."

    def test_no_interactions(self, populated):
        regular = populated["regular"]
        assert render_interactions(regular, ()) == "No interactions recorded for John Doe"

    def test_history(self, populated, fixed_time):
        vip = populated["vip"]
        history = [
            Email("Offer details", "VIP Offer", timestamp=fixed_time),
            Call("Follow up", 20, timestamp=fixed_time),
        ]
        assert render_interactions(vip, history).splitlines() == [
            "Interactions for Jane Smith (VIP):",
            "Email on 2024-03-15 09:30:00 (Subject: VIP Offer): Offer details",
            "Call on 2024-03-15 09:30:00 (Duration: 20 minutes): Follow up",
        ]


class TestReports:

    def test_customer_actions(self, populated):
        text = render_customer_actions(populated["rep2"].perform_customer_actions())
        assert text == (
            "Arranging corporate training session for MegaCorp with 1500 potential users"
        )

    def test_interaction_time_report(self, populated):
        rep1 = populated["rep1"]
        rep1.record_call(populated["regular"].id, "call", 15)

        lines = render_interaction_time_report(rep1.total_interaction_time_report()).splitlines()

        assert lines[0] == "Interaction Time Report for Sales Rep: Alice Thompson"
        assert lines[2] == "Customer: John Doe (Regular) - Total Interaction Time: 15 minutes"
        assert lines[3] == "Customer: Jane Smith (VIP) - Total Interaction Time: 0 minutes"

    def test_system_report(self, populated):
        text = render_system_report(populated["registry"].system_report())
        assert "Total Customers: 3" in text
        assert "  VIP Customers: 1" in text
        assert "Total Sales Representatives: 2" in text
        assert "Total Interaction Time: 0 minutes" in text
