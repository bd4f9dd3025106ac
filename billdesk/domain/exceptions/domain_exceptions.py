"""
Domain Exceptions - Custom exceptions for domain-specific errors.
"""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    All domain exceptions inherit from this class so the caller can
    surface any of them as a form-level or field-level message.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for display."""
        return {
            'error': self.code,
            'message': self.message,
            'details': self.details
        }


class EntityNotFoundException(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        entity_type: str,
        entity_id: Optional[str] = None,
        message: Optional[str] = None,
        code: str = 'ENTITY_NOT_FOUND'
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} not found"
        if entity_id and not message:
            msg = f"{entity_type} with id '{entity_id}' not found"
        super().__init__(
            message=msg,
            code=code,
            details={'entity_type': entity_type, 'entity_id': entity_id}
        )


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Can contain multiple validation errors for different fields.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[Dict[str, list]] = None,
        code: str = 'VALIDATION_ERROR'
    ):
        self.errors = errors or {}
        super().__init__(
            message=message,
            code=code,
            details={'validation_errors': self.errors}
        )

    def add_error(self, field: str, error: str) -> None:
        """Add a validation error for a specific field."""
        if field not in self.errors:
            self.errors[field] = []
        self.errors[field].append(error)
        self.details['validation_errors'] = self.errors

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def field_messages(self) -> Dict[str, str]:
        """Return the first message per field, as shown next to form inputs."""
        return {field: messages[0] for field, messages in self.errors.items() if messages}


class BusinessRuleViolationException(DomainException):
    """
    Raised when a business rule is violated.

    Used for domain invariant violations that are not simple validations.
    """

    def __init__(
        self,
        rule: str,
        message: Optional[str] = None,
        code: str = 'BUSINESS_RULE_VIOLATION'
    ):
        self.rule = rule
        super().__init__(
            message=message or f"Business rule violated: {rule}",
            code=code,
            details={'rule': rule}
        )


class InvalidStateTransitionException(DomainException):
    """Raised when an invalid state transition is attempted."""

    def __init__(
        self,
        entity_type: str,
        current_state: str,
        target_state: str,
        message: Optional[str] = None,
        code: str = 'INVALID_STATE_TRANSITION'
    ):
        msg = message or f"Cannot transition {entity_type} from '{current_state}' to '{target_state}'"
        super().__init__(
            message=msg,
            code=code,
            details={
                'entity_type': entity_type,
                'current_state': current_state,
                'target_state': target_state
            }
        )


class ExternalServiceException(DomainException):
    """Raised when an external service call fails."""

    def __init__(
        self,
        service: str,
        message: str,
        original_error: Optional[str] = None,
        status_code: Optional[int] = None,
        code: str = 'EXTERNAL_SERVICE_ERROR'
    ):
        self.service = service
        self.reason = message
        self.status_code = status_code
        super().__init__(
            message=f"External service error ({service}): {message}",
            code=code,
            details={
                'service': service,
                'original_error': original_error,
                'status_code': status_code
            }
        )
