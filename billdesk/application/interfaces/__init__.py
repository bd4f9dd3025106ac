"""
Application interfaces (ports) for external collaborators.
"""
from .gateways import (
    CatalogGateway,
    CustomerGateway,
    BillingGateway,
    ReportGateway,
)

__all__ = [
    'CatalogGateway',
    'CustomerGateway',
    'BillingGateway',
    'ReportGateway',
]
