"""
Bill Composer Domain Service.

Holds one draft bill: the lines a user has picked from the catalog,
the selected customer, and the submission state.
"""
import logging
from decimal import Decimal
from typing import Any, Callable, List, Optional, Tuple

from ..entities.base import DomainEvent
from ..entities.billing import (
    BillSubmission,
    Catalog,
    DraftLine,
    DraftState,
    lines_total,
)
from ..events import (
    CustomerSelected,
    DraftReset,
    DraftSubmitted,
    LineAdded,
    LineRemoved,
    SubmissionAborted,
)
from ..exceptions import (
    EmptyDraft,
    InvalidStateTransitionException,
    NoCustomerSelected,
    SubmissionInProgress,
    UnknownItem,
)
from .form_validation import parse_quantity, parse_rate

logger = logging.getLogger(__name__)

DraftListener = Callable[[DomainEvent], None]


class BillComposer:
    """
    Owner of a single draft bill.

    State machine:
    - EMPTY: no lines, no customer
    - BUILDING: at least one line or a selected customer
    - SUBMITTING: a snapshot has been dispatched and not yet acknowledged

    Lines may still be added or removed while SUBMITTING; the dispatched
    snapshot is frozen and never sees those edits. The total is always
    recomputed from the current lines.
    """

    def __init__(self, catalog: Optional[Catalog] = None):
        self._catalog = catalog or Catalog()
        self._lines: List[DraftLine] = []
        self._customer_id: Optional[str] = None
        self._in_flight: Optional[BillSubmission] = None
        self._closed = False
        self._listeners: List[DraftListener] = []

    # =========================================================================
    # State
    # =========================================================================

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def use_catalog(self, catalog: Catalog) -> None:
        """Replace the catalog used to resolve item ids. Existing lines are kept."""
        self._catalog = catalog

    @property
    def lines(self) -> Tuple[DraftLine, ...]:
        return tuple(self._lines)

    @property
    def customer_id(self) -> Optional[str]:
        return self._customer_id

    @property
    def in_flight(self) -> Optional[BillSubmission]:
        """Snapshot currently awaiting acknowledgement, if any."""
        return self._in_flight

    @property
    def state(self) -> DraftState:
        if self._in_flight is not None:
            return DraftState.SUBMITTING
        if self._lines or self._customer_id:
            return DraftState.BUILDING
        return DraftState.EMPTY

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def is_closed(self) -> bool:
        return self._closed

    def total(self) -> Decimal:
        """Sum of the current line amounts."""
        return lines_total(self._lines)

    # =========================================================================
    # Lines
    # =========================================================================

    def add_line(
        self,
        item_id: Any,
        quantity: Any,
        rate: Any = None,
    ) -> Tuple[DraftLine, ...]:
        """
        Validate and append a line.

        Args:
            item_id: Catalog item id
            quantity: Integer >= 1, or its string form
            rate: Decimal > 0, or its string form; None uses the catalog price

        Returns:
            The updated line tuple

        Raises:
            UnknownItem, InvalidQuantity, InvalidRate. The draft is not
            touched when any of them is raised.
        """
        item = self._catalog.get(item_id)
        if item is None:
            raise UnknownItem(item_id)

        parsed_quantity = parse_quantity(quantity)
        parsed_rate = parse_rate(item.price if rate is None else rate)

        line = DraftLine(
            item_id=item.id,
            item_name=item.name,
            quantity=parsed_quantity,
            rate=parsed_rate,
        )
        self._lines.append(line)

        logger.debug(
            "Added line %s: %s x %s @ %s", line.id, item.name, parsed_quantity, parsed_rate
        )
        self._emit(LineAdded(
            line_id=line.id,
            item_id=line.item_id,
            quantity=line.quantity,
            rate=str(line.rate),
            amount=str(line.amount),
            total=str(self.total()),
        ))
        return self.lines

    def remove_line(self, line_id: str) -> Tuple[DraftLine, ...]:
        """Remove the line with this id. Unknown ids are ignored."""
        for index, line in enumerate(self._lines):
            if line.id == line_id:
                del self._lines[index]
                logger.debug("Removed line %s", line_id)
                self._emit(LineRemoved(line_id=line_id, total=str(self.total())))
                break
        return self.lines

    # =========================================================================
    # Customer
    # =========================================================================

    def select_customer(self, customer_id: Optional[str]) -> None:
        """Set the customer the bill will be issued to."""
        customer_id = customer_id or None
        if customer_id == self._customer_id:
            return
        self._customer_id = customer_id
        self._emit(CustomerSelected(customer_id=customer_id))

    def clear_customer(self) -> None:
        self.select_customer(None)

    # =========================================================================
    # Submission
    # =========================================================================

    def begin_submission(self, customer_id: Optional[str] = None) -> BillSubmission:
        """
        Freeze the draft into a submission and enter SUBMITTING.

        Args:
            customer_id: Customer to bill; None uses the selected customer

        Returns:
            Immutable snapshot to hand to the billing service

        Raises:
            SubmissionInProgress: a previous snapshot is still in flight
            EmptyDraft: there are no lines, whatever the customer
            NoCustomerSelected: the customer id is empty
        """
        if self._in_flight is not None:
            raise SubmissionInProgress()
        if not self._lines:
            raise EmptyDraft()

        customer = self._customer_id if customer_id is None else customer_id
        if not customer or not str(customer).strip():
            raise NoCustomerSelected()
        customer = str(customer).strip()

        submission = BillSubmission.from_draft(customer, self._lines)
        self._customer_id = customer
        self._in_flight = submission

        logger.info(
            "Submitting bill %s for customer %s: %d line(s), total %s",
            submission.bill_no,
            customer,
            len(submission.lines),
            submission.total_amount,
        )
        self._emit(DraftSubmitted(
            bill_no=submission.bill_no,
            customer_id=customer,
            line_count=len(submission.lines),
            total=str(submission.total_amount),
        ))
        return submission

    def complete_submission(self) -> None:
        """
        Acknowledge a successful submission and reset to EMPTY.

        Once the composer is closed the acknowledgement is discarded and
        no local state changes.
        """
        if self._in_flight is None:
            raise InvalidStateTransitionException(
                entity_type="Draft",
                current_state=self.state.value,
                target_state=DraftState.EMPTY.value,
                message="No submission in progress",
            )
        if self._closed:
            logger.info("Discarding acknowledgement for bill %s: draft closed", self._in_flight.bill_no)
            self._in_flight = None
            return

        self._in_flight = None
        self._lines.clear()
        self._customer_id = None
        self._emit(DraftReset(reason="submitted"))

    def abort_submission(self, reason: str = "") -> None:
        """Leave SUBMITTING after a failed submission. Lines are kept for retry."""
        if self._in_flight is None:
            return
        bill_no = self._in_flight.bill_no
        self._in_flight = None
        logger.warning("Submission of bill %s failed: %s", bill_no, reason or "unknown reason")
        self._emit(SubmissionAborted(bill_no=bill_no, reason=reason))

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def reset(self) -> None:
        """Drop all lines and the selected customer. An in-flight snapshot is unaffected."""
        self._lines.clear()
        self._customer_id = None
        self._emit(DraftReset(reason="reset"))

    def close(self) -> None:
        """Detach the draft; pending acknowledgements will be discarded."""
        self._closed = True
        self._listeners.clear()

    def subscribe(self, listener: DraftListener) -> Callable[[], None]:
        """
        Register a state-change listener.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: DomainEvent) -> None:
        if self._closed:
            return
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Draft listener failed on %s", event.event_type)
