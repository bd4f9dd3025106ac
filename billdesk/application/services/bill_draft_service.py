"""
Bill Draft Application Service.

Drives a BillComposer against the catalog, customer and billing
gateways: loads the catalog, forwards line edits, and submits the
draft as a new bill.
"""
import asyncio
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Tuple

from ...config import AppSettings, get_settings
from ...domain.entities import Bill, Catalog, DraftLine, DraftState
from ...domain.exceptions import (
    AuthenticationExpired,
    DomainException,
    EmptyDraft,
    ExternalServiceException,
    NoCustomerSelected,
    SubmissionFailed,
    SubmissionInProgress,
    UnknownCustomer,
)
from ...domain.services import BillComposer
from ...domain.value_objects import Money
from ..interfaces import BillingGateway, CatalogGateway, CustomerGateway

logger = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    """Outcome of a draft submission."""
    success: bool
    bill: Optional[Bill] = None
    error: Optional[DomainException] = None

    @property
    def error_code(self) -> Optional[str]:
        return self.error.code if self.error else None

    @property
    def message(self) -> str:
        if self.success:
            return "Bill created successfully!"
        return self.error.message if self.error else "Failed to create bill"

    @classmethod
    def ok(cls, bill: Bill) -> 'SubmissionResult':
        return cls(success=True, bill=bill)

    @classmethod
    def failed(cls, error: DomainException) -> 'SubmissionResult':
        return cls(success=False, error=error)


class BillDraftService:
    """
    Application service for composing and submitting bills.

    One service instance owns one draft at a time. Opening a new draft
    closes the previous one, so a late acknowledgement for it is dropped.
    """

    def __init__(
        self,
        catalog_gateway: CatalogGateway,
        billing_gateway: BillingGateway,
        customer_gateway: Optional[CustomerGateway] = None,
        composer: Optional[BillComposer] = None,
        settings: Optional[AppSettings] = None,
    ):
        self._catalog_gateway = catalog_gateway
        self._billing_gateway = billing_gateway
        self._customer_gateway = customer_gateway
        self._composer = composer or BillComposer()
        self._currency = (settings or get_settings()).default_currency

    @property
    def composer(self) -> BillComposer:
        return self._composer

    @property
    def state(self) -> DraftState:
        return self._composer.state

    # =========================================================================
    # Draft lifecycle
    # =========================================================================

    async def load_catalog(self) -> Catalog:
        """Fetch catalog items and install them on the current draft."""
        items = await self._catalog_gateway.list_items()
        catalog = Catalog(items)
        self._composer.use_catalog(catalog)
        logger.info("Loaded catalog with %d item(s)", len(catalog))
        return catalog

    def open_draft(self) -> BillComposer:
        """Start a fresh draft, discarding the current one."""
        catalog = self._composer.catalog
        self._composer.close()
        self._composer = BillComposer(catalog)
        return self._composer

    def close(self) -> None:
        """Detach the current draft, e.g. when the user navigates away."""
        self._composer.close()

    # =========================================================================
    # Editing
    # =========================================================================

    def select_customer(self, customer_id: Optional[str]) -> None:
        self._composer.select_customer(customer_id)

    def add_line(self, item_id: Any, quantity: Any, rate: Any = None) -> Tuple[DraftLine, ...]:
        """Add a line; validation errors propagate to the caller."""
        return self._composer.add_line(item_id, quantity, rate)

    def remove_line(self, line_id: str) -> Tuple[DraftLine, ...]:
        return self._composer.remove_line(line_id)

    def total(self) -> Decimal:
        return self._composer.total()

    def display_total(self) -> Money:
        """Draft total in the configured currency, rounded for display."""
        return Money(self._composer.total(), self._currency)

    # =========================================================================
    # Submission
    # =========================================================================

    async def submit(self, customer_id: Optional[str] = None) -> SubmissionResult:
        """
        Submit the current draft as a new bill.

        Args:
            customer_id: Customer to bill; None uses the selected customer

        Returns:
            SubmissionResult; on failure the draft is left as it was so
            the user can fix it and try again
        """
        composer = self._composer
        try:
            submission = composer.begin_submission(customer_id)
        except (EmptyDraft, NoCustomerSelected, SubmissionInProgress) as e:
            logger.info("Bill submission rejected: %s", e.message)
            return SubmissionResult.failed(e)

        try:
            if self._customer_gateway is not None:
                customer = await self._customer_gateway.get_customer(submission.customer_id)
                if customer is None:
                    raise UnknownCustomer(submission.customer_id)
            bill = await self._billing_gateway.create_bill(submission)
        except (UnknownCustomer, AuthenticationExpired, SubmissionFailed) as e:
            composer.abort_submission(e.message)
            return SubmissionResult.failed(e)
        except ExternalServiceException as e:
            error = SubmissionFailed(
                reason=e.reason,
                original_error=e.details.get('original_error'),
                status_code=e.status_code,
            )
            composer.abort_submission(error.message)
            return SubmissionResult.failed(error)
        except asyncio.CancelledError:
            if not composer.is_closed:
                composer.abort_submission("cancelled")
            raise
        except Exception as e:
            logger.exception("Unexpected error while submitting bill %s", submission.bill_no)
            composer.abort_submission(str(e) or type(e).__name__)
            raise

        composer.complete_submission()
        logger.info("Created bill %s (%s) for customer %s", bill.bill_no, bill.id, bill.customer_id)
        return SubmissionResult.ok(bill)
