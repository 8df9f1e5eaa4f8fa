"""Shared fixtures for CRM tests."""

from datetime import datetime

import pytest

from crm import CRMRegistry
from crm.config import Settings


@pytest.fixture
def settings():
    """Default settings, independent of the cached application settings."""
    return Settings()


@pytest.fixture
def registry(settings):
    return CRMRegistry(settings)


@pytest.fixture
def fixed_time():
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def populated(registry):
    """One customer of each kind and two representatives, assigned like the demo."""
    regular = registry.create_regular_customer(
        "John Doe", "john@example.com", "555-1234", "Small Business"
    )
    vip = registry.create_vip_customer(
        "Jane Smith", "jane@example.com", "555-5678", "Michael Johnson"
    )
    corporate = registry.create_corporate_customer(
        "Bob Anderson", "bob@megacorp.com", "555-9876", "MegaCorp", 1500, 50000.0
    )
    rep1 = registry.create_sales_representative("Alice Thompson")
    rep2 = registry.create_sales_representative("David Wilson")

    registry.assign_customer_to_rep(regular.id, rep1.id)
    registry.assign_customer_to_rep(vip.id, rep1.id)
    registry.assign_customer_to_rep(corporate.id, rep2.id)

    return {
        "registry": registry,
        "regular": regular,
        "vip": vip,
        "corporate": corporate,
        "rep1": rep1,
        "rep2": rep2,
    }
