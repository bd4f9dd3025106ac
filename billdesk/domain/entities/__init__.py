# Domain Entities
from .base import (
    Entity,
    DomainEvent,
    new_id,
    utc_now,
)
from .billing import (
    BillStatus,
    DraftState,
    CatalogItem,
    Catalog,
    DraftLine,
    SubmissionLine,
    BillSubmission,
    BillLine,
    Bill,
    generate_bill_no,
    lines_total,
)
from .customer import Customer
from .report import (
    SalesReport,
    StatusTotals,
    CustomerTotals,
    ReportSummary,
)

__all__ = [
    # Base
    'Entity',
    'DomainEvent',
    'new_id',
    'utc_now',
    # Billing
    'BillStatus',
    'DraftState',
    'CatalogItem',
    'Catalog',
    'DraftLine',
    'SubmissionLine',
    'BillSubmission',
    'BillLine',
    'Bill',
    'generate_bill_no',
    'lines_total',
    # Customers
    'Customer',
    # Reports
    'SalesReport',
    'StatusTotals',
    'CustomerTotals',
    'ReportSummary',
]
