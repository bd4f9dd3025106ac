"""
Report Aggregator Domain Service.

Summarizes a list of bills into the figures shown on the reports page.
"""
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from ..entities.billing import Bill, BillStatus
from ..entities.customer import Customer
from ..entities.report import CustomerTotals, ReportSummary, StatusTotals
from ..value_objects import Currency


class ReportAggregator:
    """
    Pure domain service for bill summaries.

    Sales are measured on each bill's final amount. Paid covers PAID
    bills; pending covers every bill still expecting payment.
    """

    DEFAULT_RECENT_LIMIT = 5

    def summarize(
        self,
        bills: Iterable[Bill],
        customers: Optional[Iterable[Customer]] = None,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
        currency: Currency = Currency.USD,
    ) -> ReportSummary:
        """
        Build a summary of the given bills.

        Args:
            bills: Bills to summarize
            customers: Used to resolve customer names; unknown ids read "Unknown"
            recent_limit: Number of most recent bills to keep
            currency: Currency the summary amounts are displayed in

        Returns:
            ReportSummary with totals per status and per customer
        """
        bills = list(bills)
        names = {customer.id: customer.name for customer in (customers or [])}

        summary = ReportSummary(total_bills=len(bills), currency=currency)
        summary.by_status = {status: StatusTotals(status=status) for status in BillStatus}
        per_customer: Dict[str, CustomerTotals] = {}

        for bill in bills:
            amount = bill.final_amount
            summary.total_sales += amount

            bucket = summary.by_status[bill.status]
            bucket.count += 1
            bucket.amount += amount

            if bill.is_settled:
                summary.paid_amount += amount
            elif bill.is_outstanding:
                summary.pending_amount += amount

            totals = per_customer.get(bill.customer_id)
            if totals is None:
                totals = CustomerTotals(
                    customer_id=bill.customer_id,
                    customer_name=names.get(bill.customer_id, "Unknown"),
                )
                per_customer[bill.customer_id] = totals
            totals.bill_count += 1
            totals.total_amount += amount

        summary.by_customer = sorted(
            per_customer.values(),
            key=lambda t: (-t.total_amount, t.customer_name),
        )
        summary.recent_bills = self.recent(bills, recent_limit)
        return summary

    @staticmethod
    def recent(bills: Iterable[Bill], limit: int) -> List[Bill]:
        """Most recently created bills first; bills without a timestamp sort last."""
        dated = [bill for bill in bills if bill.created_at is not None]
        undated = [bill for bill in bills if bill.created_at is None]
        dated.sort(key=lambda b: b.created_at, reverse=True)
        return (dated + undated)[:max(limit, 0)]
