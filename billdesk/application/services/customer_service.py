"""
Customer Application Service.

Validates customer forms and forwards CRUD calls to the customer gateway.
"""
import logging
from typing import Iterable, List, Optional

from ...domain.entities import Customer
from ...domain.services import CustomerForm, validate_customer_form
from ..interfaces import CustomerGateway

logger = logging.getLogger(__name__)


class CustomerService:
    """Application service for customer records."""

    def __init__(self, customer_gateway: CustomerGateway):
        self._gateway = customer_gateway

    async def list_customers(self) -> List[Customer]:
        return await self._gateway.list_customers()

    async def get_customer(self, customer_id: str) -> Optional[Customer]:
        return await self._gateway.get_customer(customer_id)

    async def create_customer(self, form: CustomerForm) -> Customer:
        """Validate the form and create the customer."""
        clean = validate_customer_form(form)
        created = await self._gateway.create_customer(self._payload(clean))
        logger.info("Created customer %s (%s)", created.id, created.account_no)
        return created

    async def update_customer(self, customer_id: str, form: CustomerForm) -> Customer:
        """Validate the form and update the customer."""
        clean = validate_customer_form(form)
        updated = await self._gateway.update_customer(customer_id, self._payload(clean))
        logger.info("Updated customer %s", customer_id)
        return updated

    async def delete_customer(self, customer_id: str) -> None:
        await self._gateway.delete_customer(customer_id)
        logger.info("Deleted customer %s", customer_id)

    @staticmethod
    def search(customers: Iterable[Customer], term: str) -> List[Customer]:
        """Filter customers by name, account number or phone."""
        return [customer for customer in customers if customer.matches(term)]

    @staticmethod
    def _payload(form: CustomerForm) -> dict:
        return {
            'account_no': form.account_no,
            'name': form.name,
            'phone': form.phone,
            'address': form.address,
        }
