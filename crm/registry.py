"""
CRM Registry - System of Record

The registry is the sole creator and owner of customers and sales
representatives. It hands out sequential ids starting at 1 (one
counter per entity type), mediates customer-to-representative
assignment, and produces the system-wide report.

Customers live in an id-keyed table; representatives resolve their
portfolio ids against that same table.
"""

from collections import Counter
from typing import Optional
import logging

from .config.settings import Settings, get_settings
from .core.customers import (
    Customer,
    CorporateCustomer,
    RegularCustomer,
    VIPCustomer
)
from .reports.schemas import CustomerSummary, SalesRepSummary, SystemReport
from .sales.representative import SalesRepresentative

logger = logging.getLogger(__name__)


class CRMRegistry:
    """
    Catalog of all customers and sales representatives.

    Nothing is ever removed, so ids are never reused.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._customers: dict[int, Customer] = {}
        self._sales_reps: dict[int, SalesRepresentative] = {}
        self._next_customer_id = 1
        self._next_sales_rep_id = 1

    @property
    def customers(self) -> list[Customer]:
        """All customers in creation order."""
        return list(self._customers.values())

    @property
    def sales_reps(self) -> list[SalesRepresentative]:
        """All sales representatives in creation order."""
        return list(self._sales_reps.values())

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    def _register(self, customer: Customer) -> Customer:
        # The id counter advances only once the customer has been constructed
        self._customers[customer.id] = customer
        self._next_customer_id = customer.id + 1
        logger.info(
            "Created %s customer %s (id=%s)",
            customer.kind.value, customer.name, customer.id
        )
        return customer

    def create_regular_customer(
        self,
        name: str,
        email: str,
        phone: str,
        segment: str
    ) -> RegularCustomer:
        return self._register(RegularCustomer(
            id=self._next_customer_id,
            name=name,
            email=email,
            phone=phone,
            segment=segment,
            scoring=self._settings.scoring
        ))

    def create_vip_customer(
        self,
        name: str,
        email: str,
        phone: str,
        account_manager: str
    ) -> VIPCustomer:
        return self._register(VIPCustomer(
            id=self._next_customer_id,
            name=name,
            email=email,
            phone=phone,
            account_manager=account_manager,
            scoring=self._settings.scoring
        ))

    def create_corporate_customer(
        self,
        name: str,
        email: str,
        phone: str,
        company_name: str,
        employee_count: int,
        annual_contract_value: float
    ) -> CorporateCustomer:
        return self._register(CorporateCustomer(
            id=self._next_customer_id,
            name=name,
            email=email,
            phone=phone,
            company_name=company_name,
            employee_count=employee_count,
            annual_contract_value=annual_contract_value,
            scoring=self._settings.scoring
        ))

    def create_sales_representative(self, name: str) -> SalesRepresentative:
        rep = SalesRepresentative(
            rep_id=self._next_sales_rep_id,
            name=name,
            resolve=self.get_customer,
            loyalty=self._settings.loyalty
        )
        self._next_sales_rep_id += 1
        self._sales_reps[rep.id] = rep
        logger.info("Created sales representative %s (id=%s)", rep.name, rep.id)
        return rep

    # -------------------------------------------------------------------------
    # Lookup and assignment
    # -------------------------------------------------------------------------

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def get_sales_rep(self, rep_id: int) -> Optional[SalesRepresentative]:
        return self._sales_reps.get(rep_id)

    def assign_customer_to_rep(self, customer_id: int, rep_id: int) -> bool:
        """
        Add a customer to a representative's portfolio.

        Returns False, without mutating anything, when either id is
        unknown. Repeat assignments are allowed.
        """
        customer = self.get_customer(customer_id)
        rep = self.get_sales_rep(rep_id)

        if customer is None or rep is None:
            logger.warning(
                "Customer or sales rep not found: customer_id=%s, rep_id=%s",
                customer_id, rep_id
            )
            return False

        rep.add_customer(customer)
        logger.info("Customer %s assigned to %s", customer.name, rep.name)
        return True

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def list_customers(self) -> list[CustomerSummary]:
        return [CustomerSummary.from_customer(c) for c in self._customers.values()]

    def list_sales_reps(self) -> list[SalesRepSummary]:
        return [
            SalesRepSummary(id=rep.id, name=rep.name, portfolio_size=len(rep.portfolio))
            for rep in self._sales_reps.values()
        ]

    def system_report(self) -> SystemReport:
        """Customer counts per kind and total weighted interaction time."""
        counts: Counter = Counter()
        total_minutes = 0

        for customer in self._customers.values():
            counts[customer.kind.value] += 1
            total_minutes += customer.total_interaction_time()

        return SystemReport(
            total_customers=len(self._customers),
            customers_by_kind=dict(sorted(counts.items())),
            total_sales_reps=len(self._sales_reps),
            total_interaction_minutes=total_minutes
        )
