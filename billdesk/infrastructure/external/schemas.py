"""
Pydantic schemas for the billing API payloads.

The API speaks camelCase JSON with plain numbers for money; models
accept either the wire names or the Python field names.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from ...domain.entities import (
    Bill,
    BillLine,
    BillStatus,
    BillSubmission,
    CatalogItem,
    Customer,
    SalesReport,
)

# Money travels as a JSON number
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used='json')]


class ApiModel(BaseModel):
    """Base for all wire models."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra='ignore',
    )

    def to_wire(self) -> dict:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


# =========================================================================
# Auth Schemas
# =========================================================================

class LoginRequest(ApiModel):
    username: str
    password: str


class UserSchema(ApiModel):
    id: str
    username: str
    email: Optional[str] = None
    role: Optional[str] = None


class AuthResponse(ApiModel):
    token: str
    user: UserSchema


# =========================================================================
# Customer Schemas
# =========================================================================

class CustomerWrite(ApiModel):
    """Body for creating or updating a customer."""
    account_no: str
    name: str
    phone: str
    address: Optional[str] = ""


class CustomerSchema(CustomerWrite):
    """Customer as returned by the API."""
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_entity(self) -> Customer:
        return Customer(
            id=self.id,
            account_no=self.account_no,
            name=self.name,
            phone=self.phone,
            address=self.address or "",
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


# =========================================================================
# Item Schemas
# =========================================================================

class ItemWrite(ApiModel):
    """Body for creating or updating an item."""
    item_code: str = Field(alias='itemId')
    name: str
    price: Amount = Field(ge=0)
    description: Optional[str] = None


class ItemSchema(ItemWrite):
    """Item as returned by the API."""
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_entity(self) -> CatalogItem:
        return CatalogItem(
            id=self.id,
            item_code=self.item_code,
            name=self.name,
            price=self.price,
            description=self.description,
        )


# =========================================================================
# Bill Schemas
# =========================================================================

class BillLineWrite(ApiModel):
    """Line of a new bill."""
    item_id: str
    quantity: int = Field(ge=1)
    rate: Amount = Field(gt=0)
    amount: Amount


class BillCreate(ApiModel):
    """Body for creating a bill."""
    bill_no: str
    customer_id: str
    items: List[BillLineWrite] = Field(..., min_length=1)
    total_amount: Amount
    final_amount: Amount
    status: BillStatus = BillStatus.DRAFT
    created_at: datetime

    @classmethod
    def from_submission(cls, submission: BillSubmission) -> 'BillCreate':
        return cls(
            bill_no=submission.bill_no,
            customer_id=submission.customer_id,
            items=[
                BillLineWrite(
                    item_id=line.item_id,
                    quantity=line.quantity,
                    rate=line.rate,
                    amount=line.amount,
                )
                for line in submission.lines
            ],
            total_amount=submission.total_amount,
            final_amount=submission.final_amount,
            status=submission.status,
            created_at=submission.created_at,
        )


class BillLineSchema(ApiModel):
    """Line of a stored bill."""
    id: Optional[str] = None
    item_id: str
    item: Optional[ItemSchema] = None
    quantity: int
    rate: Amount
    amount: Amount


class BillSchema(ApiModel):
    """Bill as returned by the API."""
    id: str
    bill_no: str
    customer_id: str
    customer: Optional[CustomerSchema] = None
    items: List[BillLineSchema] = Field(default_factory=list)
    total_amount: Amount
    tax: Optional[Amount] = None
    final_amount: Amount
    status: BillStatus
    created_at: Optional[datetime] = None
    due_date: Optional[datetime] = None

    def to_entity(self) -> Bill:
        return Bill(
            id=self.id,
            bill_no=self.bill_no,
            customer_id=self.customer_id,
            lines=[
                BillLine(
                    id=line.id,
                    item_id=line.item_id,
                    item_name=line.item.name if line.item else None,
                    quantity=line.quantity,
                    rate=line.rate,
                    amount=line.amount,
                )
                for line in self.items
            ],
            total_amount=self.total_amount,
            tax=self.tax,
            final_amount=self.final_amount,
            status=self.status,
            created_at=self.created_at,
            due_date=self.due_date,
        )


# =========================================================================
# Report Schemas
# =========================================================================

class ReportSchema(ApiModel):
    """Sales report as returned by the API."""
    total_sales: Amount = Decimal("0")
    total_bills: int = 0
    pending_amount: Amount = Decimal("0")
    paid_amount: Amount = Decimal("0")
    recent_bills: List[BillSchema] = Field(default_factory=list)

    def to_entity(self) -> SalesReport:
        return SalesReport(
            total_sales=self.total_sales,
            total_bills=self.total_bills,
            pending_amount=self.pending_amount,
            paid_amount=self.paid_amount,
            recent_bills=[bill.to_entity() for bill in self.recent_bills],
        )
