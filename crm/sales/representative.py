"""
Sales Representative - Portfolio Owner

A representative owns a portfolio of customers and is the only
path through which interactions get recorded. Recording against a
VIP customer also accrues loyalty points:
- Call: 0.5 points per minute
- Email: 10 points flat
- Meeting: 2 points per minute

The portfolio holds customer ids, resolved through a lookup the
registry supplies. A representative never writes into the
registry's customer table. Ids that are not in the
portfolio are reported as not found and nothing is mutated.
"""

from typing import Callable, Optional
import logging

from ..config.settings import LoyaltyConfig
from ..core.customers import Customer, CustomerAction, CustomerKind, VIPCustomer
from ..core.interactions import Call, Email, Interaction, InteractionKind, Meeting
from ..reports.schemas import (
    CustomerSummary,
    InteractionTimeEntry,
    InteractionTimeReport
)

logger = logging.getLogger(__name__)


def loyalty_points_for(interaction: Interaction, config: LoyaltyConfig) -> float:
    """Points a VIP customer earns for one recorded interaction."""
    if interaction.kind is InteractionKind.CALL:
        return interaction.duration * config.call_points_per_minute
    elif interaction.kind is InteractionKind.EMAIL:
        return config.email_flat_points
    elif interaction.kind is InteractionKind.MEETING:
        return interaction.duration * config.meeting_points_per_minute
    raise ValueError(f"Unsupported interaction kind: {interaction.kind}")


class SalesRepresentative:
    """
    An agent owning a portfolio of customers.

    Responsibilities:
    - Portfolio membership
    - Recording calls, emails and meetings
    - Loyalty accrual for VIP customers
    - Interaction time reporting
    """

    def __init__(
        self,
        rep_id: int,
        name: str,
        resolve: Optional[Callable[[int], Optional[Customer]]] = None,
        loyalty: Optional[LoyaltyConfig] = None
    ):
        self.id = rep_id
        self.name = name
        # Without a resolver the representative keeps its own customer table
        self._own_customers: Optional[dict[int, Customer]] = None
        if resolve is None:
            self._own_customers = {}
            resolve = self._own_customers.get
        self._resolve = resolve
        self._loyalty = loyalty or LoyaltyConfig()
        self._portfolio: list[int] = []

    def __repr__(self) -> str:
        return f"SalesRepresentative(id={self.id}, name={self.name!r})"

    @property
    def portfolio(self) -> tuple[int, ...]:
        """Customer ids in assignment order; duplicates are kept."""
        return tuple(self._portfolio)

    @property
    def customers(self) -> list[Customer]:
        return [self._resolve(customer_id) for customer_id in self._portfolio]

    def add_customer(self, customer: Customer) -> bool:
        """
        Append a customer to the portfolio. No uniqueness check.

        Returns False, leaving the portfolio unchanged, when the id does
        not resolve to this exact customer.
        """
        if self._own_customers is not None:
            self._own_customers.setdefault(customer.id, customer)

        if self._resolve(customer.id) is not customer:
            logger.warning(
                "Refusing unknown customer: id=%s, rep=%s", customer.id, self.name
            )
            return False

        self._portfolio.append(customer.id)
        return True

    def find_customer(self, customer_id: int) -> Optional[Customer]:
        """Return the portfolio member with this id, or None."""
        for member_id in self._portfolio:
            if member_id == customer_id:
                return self._resolve(member_id)
        return None

    # -------------------------------------------------------------------------
    # Recording
    # -------------------------------------------------------------------------

    def record_call(self, customer_id: int, content: str, duration: int) -> Optional[Call]:
        return self._record(
            customer_id,
            lambda: Call(content=content, duration=duration)
        )

    def record_email(self, customer_id: int, content: str, subject: str) -> Optional[Email]:
        return self._record(
            customer_id,
            lambda: Email(content=content, subject=subject)
        )

    def record_meeting(
        self,
        customer_id: int,
        content: str,
        location: str,
        duration: int
    ) -> Optional[Meeting]:
        return self._record(
            customer_id,
            lambda: Meeting(content=content, location=location, duration=duration)
        )

    def _record(
        self,
        customer_id: int,
        build: Callable[[], Interaction]
    ) -> Optional[Interaction]:
        """
        Resolve the customer, append the interaction and accrue loyalty.

        Returns None when the customer is not in the portfolio.
        """
        customer = self.find_customer(customer_id)
        if customer is None:
            logger.warning(
                "Customer not found: id=%s, rep=%s", customer_id, self.name
            )
            return None

        interaction = build()
        customer.append_interaction(interaction)
        logger.info("%s recorded with %s", interaction.kind.value, customer.name)

        if customer.kind is CustomerKind.VIP:
            self._accrue_loyalty(customer, interaction)

        return interaction

    def _accrue_loyalty(self, customer: VIPCustomer, interaction: Interaction) -> None:
        customer.add_loyalty_points(loyalty_points_for(interaction, self._loyalty))

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def perform_customer_actions(self) -> list[CustomerAction]:
        """Run each portfolio member's kind-specific action, in portfolio order."""
        return [customer.perform_type_action() for customer in self.customers]

    def list_customers(self) -> list[CustomerSummary]:
        return [CustomerSummary.from_customer(c) for c in self.customers]

    def view_customer_interactions(self, customer_id: int) -> Optional[tuple[Interaction, ...]]:
        """Return the customer's history in recording order, or None."""
        customer = self.find_customer(customer_id)
        if customer is None:
            logger.warning(
                "Customer not found: id=%s, rep=%s", customer_id, self.name
            )
            return None
        return customer.history

    def total_interaction_time_report(self) -> InteractionTimeReport:
        """Weighted interaction time per portfolio member."""
        return InteractionTimeReport(
            rep_id=self.id,
            rep_name=self.name,
            entries=[
                InteractionTimeEntry(
                    customer_id=customer.id,
                    name=customer.name,
                    kind=customer.kind,
                    total_minutes=customer.total_interaction_time()
                )
                for customer in self.customers
            ]
        )
