# External Service Adapters - billing REST API

from .billing_api_client import BillingApiClient
from .schemas import (
    AuthResponse,
    BillCreate,
    BillSchema,
    CustomerSchema,
    ItemSchema,
    ReportSchema,
)

__all__ = [
    'BillingApiClient',
    'AuthResponse',
    'BillCreate',
    'BillSchema',
    'CustomerSchema',
    'ItemSchema',
    'ReportSchema',
]
