# Domain Services - Business logic that doesn't belong to a single entity

from .bill_composer import BillComposer
from .form_validation import (
    CustomerForm,
    ItemForm,
    parse_decimal,
    parse_integer,
    parse_quantity,
    parse_rate,
    validate_customer_form,
    validate_item_form,
)
from .report_aggregator import ReportAggregator

__all__ = [
    'BillComposer',
    'CustomerForm',
    'ItemForm',
    'parse_decimal',
    'parse_integer',
    'parse_quantity',
    'parse_rate',
    'validate_customer_form',
    'validate_item_form',
    'ReportAggregator',
]
