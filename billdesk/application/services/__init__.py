"""
Application services - orchestration and cross-cutting concerns.
"""
from .bill_draft_service import BillDraftService, SubmissionResult
from .customer_service import CustomerService
from .item_service import ItemService
from .report_service import ReportService

__all__ = [
    'BillDraftService',
    'SubmissionResult',
    'CustomerService',
    'ItemService',
    'ReportService',
]
