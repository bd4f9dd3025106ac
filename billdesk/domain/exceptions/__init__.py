# Domain Exceptions
from .domain_exceptions import (
    DomainException,
    EntityNotFoundException,
    ValidationException,
    BusinessRuleViolationException,
    InvalidStateTransitionException,
    ExternalServiceException,
)
from .billing_exceptions import (
    UnknownItem,
    UnknownCustomer,
    InvalidQuantity,
    InvalidRate,
    NoCustomerSelected,
    EmptyDraft,
    SubmissionInProgress,
    SubmissionFailed,
    AuthenticationExpired,
)

__all__ = [
    'DomainException',
    'EntityNotFoundException',
    'ValidationException',
    'BusinessRuleViolationException',
    'InvalidStateTransitionException',
    'ExternalServiceException',
    'UnknownItem',
    'UnknownCustomer',
    'InvalidQuantity',
    'InvalidRate',
    'NoCustomerSelected',
    'EmptyDraft',
    'SubmissionInProgress',
    'SubmissionFailed',
    'AuthenticationExpired',
]
