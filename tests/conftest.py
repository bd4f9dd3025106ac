"""
Shared pytest fixtures for billdesk tests.

Provides fixtures for:
- Catalog and draft composer
- Gateway mocks (AsyncMock)
- Sample customers and bills
"""
import os
from decimal import Decimal
from typing import List
from unittest.mock import AsyncMock

import pytest

from billdesk.domain.entities import Catalog, CatalogItem, Customer
from billdesk.domain.services import BillComposer

from factories import CatalogItemFactory, CustomerFactory

# Test environment configuration
os.environ.setdefault("BILLDESK_ENVIRONMENT", "test")
os.environ.setdefault("BILLDESK_API_BASE_URL", "http://billing.test/api")


# ============================================================================
# Catalog Fixtures
# ============================================================================

@pytest.fixture
def book() -> CatalogItem:
    return CatalogItemFactory(id="1", item_code="ITEM001", name="Book", price=Decimal("25.99"))


@pytest.fixture
def notebook() -> CatalogItem:
    return CatalogItemFactory(id="2", item_code="ITEM002", name="Notebook", price=Decimal("5.99"))


@pytest.fixture
def pen() -> CatalogItem:
    return CatalogItemFactory(id="3", item_code="ITEM003", name="Pen", price=Decimal("2.99"))


@pytest.fixture
def catalog_items(book, notebook, pen) -> List[CatalogItem]:
    return [book, notebook, pen]


@pytest.fixture
def catalog(catalog_items) -> Catalog:
    return Catalog(catalog_items)


@pytest.fixture
def composer(catalog) -> BillComposer:
    """A fresh, empty draft over the sample catalog."""
    return BillComposer(catalog)


# ============================================================================
# Customer Fixtures
# ============================================================================

@pytest.fixture
def customer() -> Customer:
    return CustomerFactory(id="cust-1", account_no="ACC001", name="John Doe", phone="+1234567890")


@pytest.fixture
def customers(customer) -> List[Customer]:
    return [customer, CustomerFactory(id="cust-2", account_no="ACC002", name="Jane Smith")]


# ============================================================================
# Gateway Fixtures
# ============================================================================

@pytest.fixture
def mock_catalog_gateway(catalog_items):
    """Create a mock catalog gateway."""
    gateway = AsyncMock()
    gateway.list_items = AsyncMock(return_value=catalog_items)
    gateway.get_item = AsyncMock(return_value=None)
    gateway.create_item = AsyncMock()
    gateway.update_item = AsyncMock()
    gateway.delete_item = AsyncMock(return_value=None)
    return gateway


@pytest.fixture
def mock_customer_gateway(customers):
    """Create a mock customer gateway that knows the sample customers."""
    by_id = {c.id: c for c in customers}
    gateway = AsyncMock()
    gateway.list_customers = AsyncMock(return_value=customers)
    gateway.get_customer = AsyncMock(side_effect=lambda customer_id: by_id.get(customer_id))
    gateway.create_customer = AsyncMock()
    gateway.update_customer = AsyncMock()
    gateway.delete_customer = AsyncMock(return_value=None)
    return gateway


@pytest.fixture
def mock_billing_gateway():
    """Create a mock billing gateway."""
    gateway = AsyncMock()
    gateway.create_bill = AsyncMock()
    gateway.list_bills = AsyncMock(return_value=[])
    gateway.get_bill = AsyncMock(return_value=None)
    return gateway


@pytest.fixture
def mock_report_gateway():
    gateway = AsyncMock()
    gateway.get_report = AsyncMock()
    return gateway
