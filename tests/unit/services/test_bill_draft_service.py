"""
Unit tests for BillDraftService.

Tests catalog loading and draft submission against mocked gateways.
"""
import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from billdesk.application.services import BillDraftService, SubmissionResult
from billdesk.config import AppSettings
from billdesk.domain.entities import BillSubmission, DraftState
from billdesk.domain.exceptions import (
    AuthenticationExpired,
    EmptyDraft,
    ExternalServiceException,
    NoCustomerSelected,
    SubmissionFailed,
    SubmissionInProgress,
    UnknownCustomer,
)

from factories import BillFactory


@pytest.fixture
def service(mock_catalog_gateway, mock_billing_gateway, mock_customer_gateway):
    """Create a BillDraftService with mock gateways."""
    return BillDraftService(
        catalog_gateway=mock_catalog_gateway,
        billing_gateway=mock_billing_gateway,
        customer_gateway=mock_customer_gateway,
    )


@pytest.fixture
def echo_bill(mock_billing_gateway):
    """Billing gateway that accepts every submission."""
    def accept(submission: BillSubmission):
        return BillFactory(
            bill_no=submission.bill_no,
            customer_id=submission.customer_id,
            total_amount=submission.total_amount,
        )

    mock_billing_gateway.create_bill = AsyncMock(side_effect=accept)
    return mock_billing_gateway


class TestLoadCatalog:

    @pytest.mark.asyncio
    async def test_installs_catalog_on_draft(self, service, mock_catalog_gateway):
        catalog = await service.load_catalog()

        assert len(catalog) == 3
        assert service.composer.catalog is catalog
        mock_catalog_gateway.list_items.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_lines_can_be_added_after_loading(self, service):
        await service.load_catalog()

        service.add_line("1", 2, "25.99")
        service.add_line("3", 3, "2.99")

        assert service.total() == Decimal("60.95")

    @pytest.mark.asyncio
    async def test_display_total_uses_configured_currency(
        self, mock_catalog_gateway, mock_billing_gateway
    ):
        service = BillDraftService(
            catalog_gateway=mock_catalog_gateway,
            billing_gateway=mock_billing_gateway,
            settings=AppSettings(_env_file=None, default_currency="EUR"),
        )
        await service.load_catalog()
        service.add_line("2", 3)

        assert service.display_total().formatted == "€17.97"


class TestSubmit:

    @pytest.mark.asyncio
    async def test_successful_submit_resets_draft(self, service, echo_bill):
        await service.load_catalog()
        service.add_line("1", 2, "25.99")
        service.add_line("3", 3, "2.99")

        result = await service.submit("cust-1")

        assert result.success
        assert result.bill.total_amount == Decimal("60.95")
        assert result.message == "Bill created successfully!"
        assert service.composer.lines == ()
        assert service.total() == Decimal("0")
        assert service.state == DraftState.EMPTY

    @pytest.mark.asyncio
    async def test_submission_payload(self, service, echo_bill):
        await service.load_catalog()
        service.add_line("2", 4)

        await service.submit("cust-2")

        submission = echo_bill.create_bill.await_args.args[0]
        assert submission.customer_id == "cust-2"
        assert submission.total_amount == Decimal("23.96")
        assert submission.status.value == "draft"

    @pytest.mark.asyncio
    async def test_submit_uses_selected_customer(self, service, echo_bill):
        await service.load_catalog()
        service.select_customer("cust-1")
        service.add_line("1", 1)

        result = await service.submit()

        assert result.success
        assert result.bill.customer_id == "cust-1"

    @pytest.mark.asyncio
    async def test_empty_customer_is_rejected(self, service, mock_billing_gateway):
        await service.load_catalog()
        service.add_line("1", 1)

        result = await service.submit("")

        assert not result.success
        assert isinstance(result.error, NoCustomerSelected)
        assert result.error_code == "NO_CUSTOMER_SELECTED"
        assert len(service.composer.lines) == 1
        mock_billing_gateway.create_bill.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_draft_is_rejected(self, service, mock_billing_gateway):
        result = await service.submit("cust-1")

        assert isinstance(result.error, EmptyDraft)
        mock_billing_gateway.create_bill.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_customer_keeps_draft(self, service, mock_billing_gateway):
        await service.load_catalog()
        service.add_line("1", 1)

        result = await service.submit("cust-404")

        assert isinstance(result.error, UnknownCustomer)
        assert service.state == DraftState.BUILDING
        assert len(service.composer.lines) == 1
        mock_billing_gateway.create_bill.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_service_failure_keeps_draft_for_retry(self, service, mock_billing_gateway):
        await service.load_catalog()
        service.add_line("1", 2)
        mock_billing_gateway.create_bill = AsyncMock(
            side_effect=SubmissionFailed(reason="Customer account is locked", status_code=422)
        )

        result = await service.submit("cust-1")

        assert isinstance(result.error, SubmissionFailed)
        assert result.error.reason == "Customer account is locked"
        assert service.state == DraftState.BUILDING
        assert service.total() == Decimal("51.98")

    @pytest.mark.asyncio
    async def test_generic_service_error_becomes_submission_failed(self, service, mock_billing_gateway):
        await service.load_catalog()
        service.add_line("1", 1)
        mock_billing_gateway.create_bill = AsyncMock(
            side_effect=ExternalServiceException("billing-api", "Could not connect to the billing service")
        )

        result = await service.submit("cust-1")

        assert isinstance(result.error, SubmissionFailed)
        assert result.error.reason == "Could not connect to the billing service"

    @pytest.mark.asyncio
    async def test_customer_lookup_failure_becomes_submission_failed(self, service, mock_customer_gateway):
        await service.load_catalog()
        service.add_line("1", 1)
        mock_customer_gateway.get_customer = AsyncMock(
            side_effect=ExternalServiceException("billing-api", "Request failed with status 500", status_code=500)
        )

        result = await service.submit("cust-1")

        assert isinstance(result.error, SubmissionFailed)
        assert result.error.status_code == 500
        assert service.state == DraftState.BUILDING

    @pytest.mark.asyncio
    async def test_expired_session_is_reported_as_such(self, service, mock_billing_gateway):
        await service.load_catalog()
        service.add_line("1", 1)
        mock_billing_gateway.create_bill = AsyncMock(side_effect=AuthenticationExpired())

        result = await service.submit("cust-1")

        assert isinstance(result.error, AuthenticationExpired)
        assert len(service.composer.lines) == 1

    @pytest.mark.asyncio
    async def test_retry_after_failure_succeeds(self, service, mock_billing_gateway):
        await service.load_catalog()
        service.add_line("1", 1)
        mock_billing_gateway.create_bill = AsyncMock(side_effect=[
            SubmissionFailed(reason="try again"),
            BillFactory(customer_id="cust-1"),
        ])

        first = await service.submit("cust-1")
        second = await service.submit("cust-1")

        assert not first.success
        assert second.success
        assert service.state == DraftState.EMPTY

    @pytest.mark.asyncio
    async def test_second_submit_while_in_flight_is_rejected(self, service, mock_billing_gateway):
        await service.load_catalog()
        service.add_line("1", 1)
        release = asyncio.Event()

        async def slow_create(submission):
            await release.wait()
            return BillFactory(customer_id=submission.customer_id)

        mock_billing_gateway.create_bill = AsyncMock(side_effect=slow_create)

        first = asyncio.create_task(service.submit("cust-1"))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert service.state == DraftState.SUBMITTING

        second = await service.submit("cust-1")
        assert isinstance(second.error, SubmissionInProgress)

        release.set()
        assert (await first).success
        assert mock_billing_gateway.create_bill.await_count == 1

    @pytest.mark.asyncio
    async def test_edits_while_in_flight_are_not_sent(self, service, mock_billing_gateway):
        await service.load_catalog()
        service.add_line("1", 1)
        release = asyncio.Event()

        async def slow_create(submission):
            await release.wait()
            return BillFactory(customer_id=submission.customer_id, total_amount=submission.total_amount)

        mock_billing_gateway.create_bill = AsyncMock(side_effect=slow_create)

        task = asyncio.create_task(service.submit("cust-1"))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        service.add_line("3", 10)
        release.set()
        result = await task

        assert result.bill.total_amount == Decimal("25.99")
        assert service.state == DraftState.EMPTY

    @pytest.mark.asyncio
    async def test_acknowledgement_discarded_after_navigation(self, service, mock_billing_gateway):
        await service.load_catalog()
        service.add_line("1", 1)
        draft = service.composer
        release = asyncio.Event()

        async def slow_create(submission):
            await release.wait()
            return BillFactory(customer_id=submission.customer_id)

        mock_billing_gateway.create_bill = AsyncMock(side_effect=slow_create)

        task = asyncio.create_task(service.submit("cust-1"))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        service.open_draft()
        release.set()
        result = await task

        assert result.success
        assert len(draft.lines) == 1
        assert service.composer is not draft
        assert service.composer.state == DraftState.EMPTY
        assert len(service.composer.catalog) == 3

    @pytest.mark.asyncio
    async def test_cancelled_submit_returns_draft_to_building(self, service, mock_billing_gateway):
        await service.load_catalog()
        service.add_line("1", 1)
        never = asyncio.Event()

        async def hang(submission):
            await never.wait()

        mock_billing_gateway.create_bill = AsyncMock(side_effect=hang)

        task = asyncio.create_task(service.submit("cust-1"))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert service.state == DraftState.BUILDING

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_draft_to_building(self, service, mock_billing_gateway):
        await service.load_catalog()
        service.add_line("1", 1)
        mock_billing_gateway.create_bill = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            await service.submit("cust-1")

        assert service.state == DraftState.BUILDING
        assert len(service.composer.lines) == 1

        mock_billing_gateway.create_bill = AsyncMock(return_value=BillFactory(customer_id="cust-1"))
        retry = await service.submit("cust-1")

        assert retry.success
        assert service.state == DraftState.EMPTY


class TestSubmissionResult:

    def test_failed_message(self):
        result = SubmissionResult.failed(EmptyDraft())
        assert result.message == "Please add at least one item"
        assert result.error_code == "EMPTY_DRAFT"
