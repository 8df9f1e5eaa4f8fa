"""Structured report models returned by representatives and the registry."""

from .schemas import (
    CustomerSummary,
    SalesRepSummary,
    InteractionTimeEntry,
    InteractionTimeReport,
    SystemReport
)

__all__ = [
    "CustomerSummary",
    "SalesRepSummary",
    "InteractionTimeEntry",
    "InteractionTimeReport",
    "SystemReport"
]
