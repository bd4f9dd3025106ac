"""
External service interfaces (ports).

These interfaces define contracts for the billing API that the
application depends on.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ...domain.entities import Bill, BillSubmission, CatalogItem, Customer, SalesReport


class CatalogGateway(ABC):
    """Interface for the item catalog."""

    @abstractmethod
    async def list_items(self) -> List[CatalogItem]:
        """List all catalog items."""
        pass

    @abstractmethod
    async def get_item(self, item_id: str) -> Optional[CatalogItem]:
        """Get an item by id, None if it does not exist."""
        pass

    @abstractmethod
    async def create_item(self, data: Dict[str, Any]) -> CatalogItem:
        """Create an item."""
        pass

    @abstractmethod
    async def update_item(self, item_id: str, data: Dict[str, Any]) -> CatalogItem:
        """Update an item."""
        pass

    @abstractmethod
    async def delete_item(self, item_id: str) -> None:
        """Delete an item."""
        pass


class CustomerGateway(ABC):
    """Interface for customer records."""

    @abstractmethod
    async def list_customers(self) -> List[Customer]:
        """List all customers."""
        pass

    @abstractmethod
    async def get_customer(self, customer_id: str) -> Optional[Customer]:
        """Get a customer by id, None if it does not exist."""
        pass

    @abstractmethod
    async def create_customer(self, data: Dict[str, Any]) -> Customer:
        """Create a customer."""
        pass

    @abstractmethod
    async def update_customer(self, customer_id: str, data: Dict[str, Any]) -> Customer:
        """Update a customer."""
        pass

    @abstractmethod
    async def delete_customer(self, customer_id: str) -> None:
        """Delete a customer."""
        pass


class BillingGateway(ABC):
    """Interface for bill persistence."""

    @abstractmethod
    async def create_bill(self, submission: BillSubmission) -> Bill:
        """
        Persist a new bill.

        Raises ExternalServiceException when the service rejects the bill
        or cannot be reached.
        """
        pass

    @abstractmethod
    async def list_bills(self) -> List[Bill]:
        """List all bills."""
        pass

    @abstractmethod
    async def get_bill(self, bill_id: str) -> Optional[Bill]:
        """Get a bill by id."""
        pass


class ReportGateway(ABC):
    """Interface for server-side reports."""

    @abstractmethod
    async def get_report(self) -> SalesReport:
        """Fetch the sales report."""
        pass
