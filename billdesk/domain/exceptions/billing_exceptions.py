"""
Errors raised while composing and submitting a bill.

Every error here is recoverable by the user: the draft is never
mutated when one of them is raised.
"""
from typing import Any, Optional

from .domain_exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    ExternalServiceException,
    InvalidStateTransitionException,
    ValidationException,
)


class UnknownItem(EntityNotFoundException):
    """The referenced catalog item does not exist."""

    def __init__(self, item_id: Any):
        super().__init__(
            entity_type="CatalogItem",
            entity_id=str(item_id) if item_id not in (None, "") else None,
            message="Please select an item" if item_id in (None, "") else None,
            code='UNKNOWN_ITEM',
        )
        self.details['field'] = 'item_id'


class UnknownCustomer(EntityNotFoundException):
    """The selected customer does not exist on the billing service."""

    def __init__(self, customer_id: str):
        super().__init__(
            entity_type="Customer",
            entity_id=customer_id,
            code='UNKNOWN_CUSTOMER',
        )


class InvalidQuantity(ValidationException):
    """Quantity is not an integer greater than or equal to one."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            message="Quantity must be greater than 0",
            errors={'quantity': ["Quantity must be greater than 0"]},
            code='INVALID_QUANTITY',
        )


class InvalidRate(ValidationException):
    """Rate is not a finite decimal greater than zero."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            message="Rate must be greater than 0",
            errors={'rate': ["Rate must be greater than 0"]},
            code='INVALID_RATE',
        )


class NoCustomerSelected(BusinessRuleViolationException):
    """A bill cannot be submitted without a customer."""

    def __init__(self):
        super().__init__(
            rule="customer_required",
            message="Please select a customer",
            code='NO_CUSTOMER_SELECTED',
        )


class EmptyDraft(BusinessRuleViolationException):
    """A bill cannot be submitted without at least one line."""

    def __init__(self):
        super().__init__(
            rule="at_least_one_line",
            message="Please add at least one item",
            code='EMPTY_DRAFT',
        )


class SubmissionInProgress(InvalidStateTransitionException):
    """A second submit was attempted while the first is still in flight."""

    def __init__(self):
        super().__init__(
            entity_type="Draft",
            current_state="submitting",
            target_state="submitting",
            message="Bill submission already in progress",
            code='SUBMISSION_IN_PROGRESS',
        )


class SubmissionFailed(ExternalServiceException):
    """The billing service rejected or could not receive the bill."""

    def __init__(
        self,
        reason: str,
        original_error: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(
            service="billing",
            message=reason,
            original_error=original_error,
            status_code=status_code,
            code='SUBMISSION_FAILED',
        )


class AuthenticationExpired(ExternalServiceException):
    """The API answered 401; the stored session token was discarded."""

    def __init__(self, service: str = "billing-api"):
        super().__init__(
            service=service,
            message="Session expired, please log in again",
            status_code=401,
            code='AUTHENTICATION_EXPIRED',
        )
