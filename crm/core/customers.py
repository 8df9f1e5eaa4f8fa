"""
Customers - Entities With Interaction History

Three customer kinds share an append-only interaction history and
differ in how that history is weighted for reporting:
- Regular: base interaction time as recorded
- VIP: 1.2x, plus loyalty points accrued on every recorded interaction
- Corporate: 1.5x above 1000 employees, 1.3x above 100, else 1.0x

Weighted totals are truncated toward zero, never rounded.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
import logging

from ..config.settings import ScoringConfig
from .errors import PreconditionError
from .interactions import Interaction

logger = logging.getLogger(__name__)


class CustomerKind(Enum):
    """Customer classification tags."""
    REGULAR = "Regular"
    VIP = "VIP"
    CORPORATE = "Corporate"


@dataclass(frozen=True)
class CustomerAction:
    """Outcome of a customer's kind-specific action."""
    customer_id: int
    customer_name: str
    kind: CustomerKind
    action: str  # send_promotional_material, schedule_quarterly_review, arrange_training
    description: str


@dataclass(frozen=True)
class ContractRenewal:
    """Before/after record of a corporate contract renewal."""
    customer_id: int
    company_name: str
    previous_value: float
    new_value: float


@dataclass
class Customer(ABC):
    """
    A tracked individual or organization.

    Customers are created by the registry, which assigns the id.
    The history only grows; interactions are kept in recording order.
    """
    id: int
    name: str = ""
    email: str = ""
    phone: str = ""

    scoring: ScoringConfig = field(
        default_factory=ScoringConfig, kw_only=True, repr=False, compare=False
    )
    _history: list = field(default_factory=list, init=False, repr=False)

    def __setattr__(self, name, value):
        # The registry keys its table by id, so it is fixed once assigned
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Customer id cannot be reassigned")
        super().__setattr__(name, value)

    @property
    @abstractmethod
    def kind(self) -> CustomerKind:
        ...

    @property
    def history(self) -> tuple[Interaction, ...]:
        """Interactions in the order they were recorded."""
        return tuple(self._history)

    def append_interaction(self, interaction: Interaction) -> None:
        """Add an interaction to the end of the history."""
        self._history.append(interaction)

    def base_interaction_time(self) -> int:
        """Sum of call and meeting durations; emails count as zero."""
        return sum(i.billable_minutes for i in self._history)

    def interaction_multiplier(self) -> float:
        """Weight applied to the base interaction time."""
        return 1.0

    def total_interaction_time(self) -> int:
        """Weighted interaction time in minutes, truncated toward zero."""
        return int(self.base_interaction_time() * self.interaction_multiplier())

    @abstractmethod
    def perform_type_action(self) -> CustomerAction:
        """Describe the kind-specific follow-up for this customer."""


@dataclass
class RegularCustomer(Customer):
    segment: str = ""

    @property
    def kind(self) -> CustomerKind:
        return CustomerKind.REGULAR

    def perform_type_action(self) -> CustomerAction:
        return CustomerAction(
            customer_id=self.id,
            customer_name=self.name,
            kind=self.kind,
            action="send_promotional_material",
            description=(
                f"Sending regular promotional materials to {self.name} "
                f"in segment {self.segment}"
            )
        )


@dataclass
class VIPCustomer(Customer):
    """
    High-value customer with a dedicated account manager.

    Loyalty points start at zero and only increase.
    """
    account_manager: str = ""
    _loyalty_points: float = field(default=0.0, init=False, repr=False)

    @property
    def kind(self) -> CustomerKind:
        return CustomerKind.VIP

    def interaction_multiplier(self) -> float:
        return self.scoring.vip_multiplier

    @property
    def loyalty_points(self) -> float:
        return self._loyalty_points

    def add_loyalty_points(self, amount: float) -> float:
        """Accrue loyalty points and return the new balance."""
        if amount < 0:
            raise PreconditionError(f"Loyalty points cannot be negative: {amount}")

        self._loyalty_points += amount
        logger.info(
            "Added %s loyalty points to %s. Total: %s",
            amount, self.name, self.loyalty_points
        )
        return self.loyalty_points

    def perform_type_action(self) -> CustomerAction:
        return CustomerAction(
            customer_id=self.id,
            customer_name=self.name,
            kind=self.kind,
            action="schedule_quarterly_review",
            description=(
                f"Scheduling quarterly review with {self.name} "
                f"and account manager {self.account_manager}"
            )
        )


@dataclass
class CorporateCustomer(Customer):
    """Organization account; weighting grows with company size."""
    company_name: str = ""
    employee_count: int = 1
    annual_contract_value: float = 0.0

    def __post_init__(self):
        if self.employee_count <= 0:
            raise PreconditionError(
                f"Employee count must be positive: {self.employee_count}"
            )
        if self.annual_contract_value < 0:
            raise PreconditionError(
                f"Annual contract value cannot be negative: {self.annual_contract_value}"
            )

    @property
    def kind(self) -> CustomerKind:
        return CustomerKind.CORPORATE

    def interaction_multiplier(self) -> float:
        # Thresholds are exclusive: exactly 1000 employees is not "large"
        if self.employee_count > self.scoring.corporate_large_threshold:
            return self.scoring.corporate_large_multiplier
        elif self.employee_count > self.scoring.corporate_medium_threshold:
            return self.scoring.corporate_medium_multiplier
        return 1.0

    def renew_contract(self, new_amount: float) -> ContractRenewal:
        """Replace the annual contract value unconditionally."""
        if new_amount < 0:
            raise PreconditionError(
                f"Annual contract value cannot be negative: {new_amount}"
            )

        renewal = ContractRenewal(
            customer_id=self.id,
            company_name=self.company_name,
            previous_value=self.annual_contract_value,
            new_value=new_amount
        )
        self.annual_contract_value = new_amount
        logger.info(
            "Renewed contract for %s. Old amount: $%.2f, New amount: $%.2f",
            self.company_name, renewal.previous_value, renewal.new_value
        )
        return renewal

    def perform_type_action(self) -> CustomerAction:
        return CustomerAction(
            customer_id=self.id,
            customer_name=self.name,
            kind=self.kind,
            action="arrange_training",
            description=(
                f"Arranging corporate training session for {self.company_name} "
                f"with {self.employee_count} potential users"
            )
        )
