"""
Billing API client.

Talks to the external billing REST API for customers, items, bills
and reports.
"""
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ...application.interfaces import (
    BillingGateway,
    CatalogGateway,
    CustomerGateway,
    ReportGateway,
)
from ...config import ApiSettings, get_settings
from ...domain.entities import Bill, BillSubmission, CatalogItem, Customer, SalesReport
from ...domain.exceptions import (
    AuthenticationExpired,
    ExternalServiceException,
    SubmissionFailed,
)
from ..security import TokenStore
from .schemas import (
    AuthResponse,
    BillCreate,
    BillSchema,
    CustomerSchema,
    CustomerWrite,
    ItemSchema,
    ItemWrite,
    LoginRequest,
    ReportSchema,
)

logger = logging.getLogger(__name__)

SERVICE_NAME = "billing-api"

M = TypeVar('M', bound=BaseModel)


class BillingApiClient(CatalogGateway, CustomerGateway, BillingGateway, ReportGateway):
    """
    Client for the billing REST API.

    Responsibilities:
    - Attach the session bearer token to every request
    - Drop the session when the API answers 401
    - Translate payloads to domain entities

    Usage:
        async with BillingApiClient() as client:
            items = await client.list_items()
    """

    def __init__(
        self,
        settings: Optional[ApiSettings] = None,
        token_store: Optional[TokenStore] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            settings: API settings; defaults to application settings.
            token_store: Session token holder.
            transport: Custom httpx transport, used by tests.
        """
        self.settings = settings or get_settings().api
        self.token_store = token_store or TokenStore(token=self.settings.token)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def connect(self) -> None:
        """Initialize HTTP client."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            base_url=self.settings.base_url,
            headers={"Content-Type": "application/json"},
            timeout=self.settings.timeout,
            transport=self._transport,
        )
        logger.info("Billing API client initialized: %s", self.settings.base_url)

    async def disconnect(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Billing API client disconnected")

    async def __aenter__(self) -> 'BillingApiClient':
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.disconnect()

    # =========================================================================
    # Transport
    # =========================================================================

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        allow_not_found: bool = False,
    ) -> Optional[httpx.Response]:
        """
        Send a request and map failures to domain exceptions.

        Returns None for a 404 when allow_not_found is set.
        """
        if self._client is None:
            raise ExternalServiceException(SERVICE_NAME, "Client is not connected")

        try:
            response = await self._client.request(
                method,
                path,
                json=json,
                headers=self.token_store.auth_headers(),
            )
        except httpx.RequestError as e:
            logger.error("Could not connect to billing API (%s %s): %s", method, path, e)
            raise ExternalServiceException(
                SERVICE_NAME,
                "Could not connect to the billing service",
                original_error=str(e),
            ) from e

        if response.status_code == 401:
            logger.warning("Billing API rejected credentials on %s %s", method, path)
            self.token_store.clear()
            raise AuthenticationExpired(SERVICE_NAME)

        if response.status_code == 404 and allow_not_found:
            return None

        if response.is_error:
            message = self._error_message(response)
            logger.error(
                "Billing API returned status %s for %s %s: %s",
                response.status_code,
                method,
                path,
                response.text[:500],
            )
            raise ExternalServiceException(
                SERVICE_NAME,
                message,
                original_error=response.text[:500],
                status_code=response.status_code,
            )

        return response

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Server-provided message if the body carries one."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"Request failed with status {response.status_code}"

    @staticmethod
    def _parse(response: httpx.Response, model: Type[M]) -> M:
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ExternalServiceException(
                SERVICE_NAME,
                f"Malformed {model.__name__} response",
                original_error=str(e),
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _parse_list(response: httpx.Response, model: Type[M]) -> List[M]:
        try:
            data = response.json()
            if not isinstance(data, list):
                raise ValueError("expected a JSON array")
            return [model.model_validate(entry) for entry in data]
        except (ValueError, ValidationError) as e:
            raise ExternalServiceException(
                SERVICE_NAME,
                f"Malformed {model.__name__} list response",
                original_error=str(e),
                status_code=response.status_code,
            ) from e

    # =========================================================================
    # Authentication
    # =========================================================================

    async def login(self, username: str, password: str) -> AuthResponse:
        """Log in and keep the returned token for later requests."""
        body = LoginRequest(username=username, password=password).to_wire()
        response = await self._request("POST", "/auth/login", json=body)
        auth = self._parse(response, AuthResponse)
        self.token_store.set(auth.token, auth.user.model_dump())
        logger.info("Logged in as %s", auth.user.username)
        return auth

    async def logout(self) -> None:
        """Log out; the local session is dropped even if the call fails."""
        try:
            await self._request("POST", "/auth/logout")
        finally:
            self.token_store.clear()

    # =========================================================================
    # Customers
    # =========================================================================

    async def list_customers(self) -> List[Customer]:
        response = await self._request("GET", "/customers")
        return [c.to_entity() for c in self._parse_list(response, CustomerSchema)]

    async def get_customer(self, customer_id: str) -> Optional[Customer]:
        response = await self._request("GET", f"/customers/{customer_id}", allow_not_found=True)
        if response is None:
            return None
        return self._parse(response, CustomerSchema).to_entity()

    async def create_customer(self, data: Dict[str, Any]) -> Customer:
        body = CustomerWrite(**data).to_wire()
        response = await self._request("POST", "/customers", json=body)
        return self._parse(response, CustomerSchema).to_entity()

    async def update_customer(self, customer_id: str, data: Dict[str, Any]) -> Customer:
        body = CustomerWrite(**data).to_wire()
        response = await self._request("PUT", f"/customers/{customer_id}", json=body)
        return self._parse(response, CustomerSchema).to_entity()

    async def delete_customer(self, customer_id: str) -> None:
        await self._request("DELETE", f"/customers/{customer_id}")

    # =========================================================================
    # Items
    # =========================================================================

    async def list_items(self) -> List[CatalogItem]:
        response = await self._request("GET", "/items")
        return [i.to_entity() for i in self._parse_list(response, ItemSchema)]

    async def get_item(self, item_id: str) -> Optional[CatalogItem]:
        response = await self._request("GET", f"/items/{item_id}", allow_not_found=True)
        if response is None:
            return None
        return self._parse(response, ItemSchema).to_entity()

    async def create_item(self, data: Dict[str, Any]) -> CatalogItem:
        body = ItemWrite(**data).to_wire()
        response = await self._request("POST", "/items", json=body)
        return self._parse(response, ItemSchema).to_entity()

    async def update_item(self, item_id: str, data: Dict[str, Any]) -> CatalogItem:
        body = ItemWrite(**data).to_wire()
        response = await self._request("PUT", f"/items/{item_id}", json=body)
        return self._parse(response, ItemSchema).to_entity()

    async def delete_item(self, item_id: str) -> None:
        await self._request("DELETE", f"/items/{item_id}")

    # =========================================================================
    # Bills
    # =========================================================================

    async def create_bill(self, submission: BillSubmission) -> Bill:
        """
        Create a bill from a draft submission.

        Raises:
            SubmissionFailed: the service rejected the bill or was unreachable
            AuthenticationExpired: the session is no longer valid
        """
        body = BillCreate.from_submission(submission).to_wire()
        try:
            response = await self._request("POST", "/bills", json=body)
            return self._parse(response, BillSchema).to_entity()
        except AuthenticationExpired:
            raise
        except ExternalServiceException as e:
            raise SubmissionFailed(
                reason=e.reason,
                original_error=e.details.get('original_error'),
                status_code=e.status_code,
            ) from e

    async def list_bills(self) -> List[Bill]:
        response = await self._request("GET", "/bills")
        return [b.to_entity() for b in self._parse_list(response, BillSchema)]

    async def get_bill(self, bill_id: str) -> Optional[Bill]:
        response = await self._request("GET", f"/bills/{bill_id}", allow_not_found=True)
        if response is None:
            return None
        return self._parse(response, BillSchema).to_entity()

    # =========================================================================
    # Reports
    # =========================================================================

    async def get_report(self) -> SalesReport:
        response = await self._request("GET", "/reports")
        return self._parse(response, ReportSchema).to_entity()
