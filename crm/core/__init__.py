"""
Core domain model.

- Interactions: Call, Email, Meeting
- Customers: Regular, VIP, Corporate
"""

from .errors import PreconditionError
from .interactions import (
    Interaction,
    InteractionKind,
    Call,
    Email,
    Meeting
)
from .customers import (
    Customer,
    CustomerKind,
    RegularCustomer,
    VIPCustomer,
    CorporateCustomer,
    CustomerAction,
    ContractRenewal
)

__all__ = [
    "PreconditionError",
    "Interaction",
    "InteractionKind",
    "Call",
    "Email",
    "Meeting",
    "Customer",
    "CustomerKind",
    "RegularCustomer",
    "VIPCustomer",
    "CorporateCustomer",
    "CustomerAction",
    "ContractRenewal"
]
