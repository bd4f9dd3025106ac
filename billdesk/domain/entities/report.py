"""
Reporting entities.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List

from ..value_objects import Currency, Money
from .billing import Bill, BillStatus


@dataclass
class SalesReport:
    """Headline figures as served by the reports endpoint."""
    total_sales: Decimal = Decimal("0")
    total_bills: int = 0
    pending_amount: Decimal = Decimal("0")
    paid_amount: Decimal = Decimal("0")
    recent_bills: List[Bill] = field(default_factory=list)


@dataclass
class StatusTotals:
    """Count and amount of bills in one status."""
    status: BillStatus
    count: int = 0
    amount: Decimal = Decimal("0")


@dataclass
class CustomerTotals:
    """Billing figures for one customer."""
    customer_id: str
    customer_name: str = "Unknown"
    bill_count: int = 0
    total_amount: Decimal = Decimal("0")


@dataclass
class ReportSummary:
    """Summary computed locally from a list of bills."""
    total_sales: Decimal = Decimal("0")
    total_bills: int = 0
    paid_amount: Decimal = Decimal("0")
    pending_amount: Decimal = Decimal("0")
    by_status: Dict[BillStatus, StatusTotals] = field(default_factory=dict)
    by_customer: List[CustomerTotals] = field(default_factory=list)
    recent_bills: List[Bill] = field(default_factory=list)
    currency: Currency = Currency.USD

    def money(self, amount: Decimal) -> Money:
        return Money(amount, self.currency)

    def formatted_totals(self) -> Dict[str, str]:
        """Headline figures as shown on the reports page."""
        return {
            'total_sales': self.money(self.total_sales).formatted,
            'paid_amount': self.money(self.paid_amount).formatted,
            'pending_amount': self.money(self.pending_amount).formatted,
        }
