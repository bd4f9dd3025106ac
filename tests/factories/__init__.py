"""
Test data factories for billdesk.

Provides factory classes for generating test data.
"""
from .catalog_factory import CatalogItemFactory
from .customer_factory import CustomerFactory, CustomerPayloadFactory
from .bill_factory import BillFactory, BillPayloadFactory

__all__ = [
    "CatalogItemFactory",
    "CustomerFactory",
    "CustomerPayloadFactory",
    "BillFactory",
    "BillPayloadFactory",
]
