"""
Pydantic Schemas for Reports

Reports are read-only snapshots; producing one never mutates
customers, representatives or the registry.
"""

from typing import Dict, List
from pydantic import BaseModel, Field

from ..core.customers import Customer, CustomerKind


# =============================================================================
# Listing Schemas
# =============================================================================

class CustomerSummary(BaseModel):
    """One row of a customer listing."""
    id: int
    name: str
    kind: CustomerKind

    @classmethod
    def from_customer(cls, customer: Customer) -> "CustomerSummary":
        return cls(id=customer.id, name=customer.name, kind=customer.kind)


class SalesRepSummary(BaseModel):
    """One row of a sales representative listing."""
    id: int
    name: str
    portfolio_size: int = Field(
        description="Number of portfolio entries, duplicates included",
        default=0
    )


# =============================================================================
# Interaction Time Schemas
# =============================================================================

class InteractionTimeEntry(BaseModel):
    """Weighted interaction time for a single customer."""
    customer_id: int
    name: str
    kind: CustomerKind
    total_minutes: int = Field(ge=0)


class InteractionTimeReport(BaseModel):
    """Interaction time for every customer in a representative's portfolio."""
    rep_id: int
    rep_name: str
    entries: List[InteractionTimeEntry] = Field(
        description="One entry per portfolio member, in portfolio order",
        default_factory=list
    )

    @property
    def total_minutes(self) -> int:
        return sum(entry.total_minutes for entry in self.entries)


# =============================================================================
# System Report Schemas
# =============================================================================

class SystemReport(BaseModel):
    """Registry-wide counts and interaction time."""
    total_customers: int = 0
    customers_by_kind: Dict[str, int] = Field(
        description="Customer count per kind, only kinds that are present",
        default_factory=dict
    )
    total_sales_reps: int = 0
    total_interaction_minutes: int = 0
