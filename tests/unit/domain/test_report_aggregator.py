"""
Unit tests for ReportAggregator.
"""
from decimal import Decimal

from billdesk.domain.entities import BillStatus
from billdesk.domain.services import ReportAggregator

from factories import BillFactory


class TestSummarize:

    def test_empty(self):
        summary = ReportAggregator().summarize([])

        assert summary.total_bills == 0
        assert summary.total_sales == Decimal("0")
        assert summary.recent_bills == []
        assert summary.by_status[BillStatus.PAID].count == 0

    def test_paid_and_pending_amounts(self, customers):
        bills = [
            BillFactory(customer_id="cust-1", status=BillStatus.PAID, total_amount=Decimal("157.94")),
            BillFactory(customer_id="cust-2", status=BillStatus.PENDING, total_amount=Decimal("89.97")),
            BillFactory(customer_id="cust-1", status=BillStatus.PAID, total_amount=Decimal("234.50")),
            BillFactory(customer_id="cust-2", status=BillStatus.OVERDUE, total_amount=Decimal("10.00")),
            BillFactory(customer_id="cust-3", status=BillStatus.DRAFT, total_amount=Decimal("5.00")),
        ]

        summary = ReportAggregator().summarize(bills, customers)

        assert summary.total_bills == 5
        assert summary.total_sales == Decimal("497.41")
        assert summary.paid_amount == Decimal("392.44")
        assert summary.pending_amount == Decimal("99.97")
        assert summary.by_status[BillStatus.PAID].count == 2
        assert summary.by_status[BillStatus.DRAFT].amount == Decimal("5.00")

    def test_customer_totals_sorted_by_amount(self, customers):
        bills = [
            BillFactory(customer_id="cust-2", total_amount=Decimal("10")),
            BillFactory(customer_id="cust-1", total_amount=Decimal("30")),
            BillFactory(customer_id="cust-2", total_amount=Decimal("5")),
            BillFactory(customer_id="ghost", total_amount=Decimal("1")),
        ]

        summary = ReportAggregator().summarize(bills, customers)

        assert [(t.customer_name, t.bill_count, t.total_amount) for t in summary.by_customer] == [
            ("John Doe", 1, Decimal("30")),
            ("Jane Smith", 2, Decimal("15")),
            ("Unknown", 1, Decimal("1")),
        ]

    def test_recent_bills_newest_first(self):
        bills = BillFactory.build_batch(7)

        summary = ReportAggregator().summarize(bills, recent_limit=3)

        assert summary.recent_bills == [bills[6], bills[5], bills[4]]

    def test_undated_bills_sort_last(self):
        dated = BillFactory()
        undated = BillFactory(created_at=None)

        assert ReportAggregator.recent([undated, dated], 5) == [dated, undated]
