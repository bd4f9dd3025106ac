"""
Item Application Service.

Validates item forms and forwards CRUD calls to the catalog gateway.
"""
import logging
from typing import Iterable, List, Optional

from ...domain.entities import CatalogItem
from ...domain.services import ItemForm, validate_item_form
from ..interfaces import CatalogGateway

logger = logging.getLogger(__name__)


class ItemService:
    """
    Application service for catalog items.

    Price changes only affect bills created afterwards; existing bills
    keep the rates they were created with.
    """

    def __init__(self, catalog_gateway: CatalogGateway):
        self._gateway = catalog_gateway

    async def list_items(self) -> List[CatalogItem]:
        return await self._gateway.list_items()

    async def get_item(self, item_id: str) -> Optional[CatalogItem]:
        return await self._gateway.get_item(item_id)

    async def create_item(self, form: ItemForm) -> CatalogItem:
        """Validate the form and create the item."""
        clean = validate_item_form(form)
        created = await self._gateway.create_item(self._payload(clean))
        logger.info("Created item %s (%s) at %s", created.id, created.item_code, created.price)
        return created

    async def update_item(self, item_id: str, form: ItemForm) -> CatalogItem:
        """Validate the form and update the item."""
        clean = validate_item_form(form)
        updated = await self._gateway.update_item(item_id, self._payload(clean))
        logger.info("Updated item %s", item_id)
        return updated

    async def delete_item(self, item_id: str) -> None:
        await self._gateway.delete_item(item_id)
        logger.info("Deleted item %s", item_id)

    @staticmethod
    def search(items: Iterable[CatalogItem], term: str) -> List[CatalogItem]:
        """Filter items by name, item code or description."""
        needle = term.strip().lower()
        if not needle:
            return list(items)
        return [
            item for item in items
            if needle in item.name.lower()
            or needle in (item.item_code or "").lower()
            or needle in (item.description or "").lower()
        ]

    @staticmethod
    def _payload(form: ItemForm) -> dict:
        return {
            'item_code': form.item_code,
            'name': form.name,
            'price': form.price,
            'description': form.description or None,
        }
