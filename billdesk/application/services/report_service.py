"""
Report Application Service.
"""
import asyncio
import logging
from typing import Optional

from ...config import AppSettings, get_settings
from ...domain.entities import ReportSummary, SalesReport
from ...domain.services import ReportAggregator
from ..interfaces import BillingGateway, CustomerGateway, ReportGateway

logger = logging.getLogger(__name__)


class ReportService:
    """Fetches the server report and builds local bill summaries."""

    def __init__(
        self,
        report_gateway: ReportGateway,
        billing_gateway: BillingGateway,
        customer_gateway: Optional[CustomerGateway] = None,
        aggregator: Optional[ReportAggregator] = None,
        recent_limit: Optional[int] = None,
        settings: Optional[AppSettings] = None,
    ):
        settings = settings or get_settings()
        self._report_gateway = report_gateway
        self._billing_gateway = billing_gateway
        self._customer_gateway = customer_gateway
        self._aggregator = aggregator or ReportAggregator()
        self._recent_limit = settings.recent_bills_limit if recent_limit is None else recent_limit
        self._currency = settings.default_currency

    async def get_report(self) -> SalesReport:
        """Headline figures as computed by the server."""
        return await self._report_gateway.get_report()

    async def get_summary(self) -> ReportSummary:
        """
        Summarize all bills locally.

        Bills and customers are fetched concurrently.
        """
        if self._customer_gateway is not None:
            bills, customers = await asyncio.gather(
                self._billing_gateway.list_bills(),
                self._customer_gateway.list_customers(),
            )
        else:
            bills, customers = await self._billing_gateway.list_bills(), []

        summary = self._aggregator.summarize(
            bills, customers, self._recent_limit, currency=self._currency
        )
        logger.debug(
            "Summarized %d bill(s): sales %s, paid %s, pending %s",
            summary.total_bills,
            summary.total_sales,
            summary.paid_amount,
            summary.pending_amount,
        )
        return summary
