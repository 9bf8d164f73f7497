"""
Pydantic Schemas for Request/Response Validation

JSON bodies use camelCase keys (``menuId``, ``cartIds``, ``insertedId``) and
documents expose their identifier as ``_id``, matching the web client.
Python code works with the snake_case field names.

Author: Khalil Bannouri
Version: 4.0.0
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime
import re

from app.models import is_valid_object_id

EMAIL_PATTERN = re.compile(r'^[\w\.\+-]+@[\w\.-]+\.\w+$')


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _validate_email(v: str) -> str:
    v = v.strip()
    if not EMAIL_PATTERN.match(v):
        raise ValueError('Invalid email format')
    return v


def _validate_object_ids(values: List[str]) -> List[str]:
    for value in values:
        if not is_valid_object_id(value):
            raise ValueError('Invalid ID format')
    return [value.lower() for value in values]


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class TokenRequest(CamelModel):
    """Identity claims to sign. Extra claims are carried into the token."""
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=3, examples=["guest@bistro.com"])

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _validate_email(v)


class UserCreate(CamelModel):
    name: Optional[str] = Field(None, max_length=100, examples=["Jane Doe"])
    email: str = Field(..., examples=["jane@example.com"])
    photo: Optional[str] = Field(None, max_length=500)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _validate_email(v)


class MenuItemCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Caesar Salad"])
    category: str = Field(..., min_length=1, max_length=50, examples=["salad"])
    price: float = Field(..., ge=0, examples=[12.5])
    recipe: Optional[str] = Field(None)
    image: Optional[str] = Field(None, max_length=500)


class MenuItemUpdate(CamelModel):
    """Partial update; only fields present in the body are written."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[str] = Field(None, min_length=1, max_length=50)
    price: Optional[float] = Field(None, ge=0)
    recipe: Optional[str] = None
    image: Optional[str] = Field(None, max_length=500)

    @field_validator('name', 'category', 'price')
    @classmethod
    def reject_null(cls, v):
        # Omitting a field keeps it; an explicit null would clear a required column
        if v is None:
            raise ValueError('must not be null')
        return v


class CartItemCreate(CamelModel):
    email: str = Field(..., examples=["jane@example.com"])
    menu_id: Optional[str] = Field(None, examples=["642c155b2c4774f05c36eeaa"])
    name: Optional[str] = Field(None, max_length=100)
    image: Optional[str] = Field(None, max_length=500)
    price: Optional[float] = Field(None, ge=0)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _validate_email(v)

    @field_validator('menu_id')
    @classmethod
    def validate_menu_id(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _validate_object_ids([v])[0]


class PaymentIntentRequest(CamelModel):
    """Amount in major currency units (dollars)."""
    price: float = Field(..., gt=0, examples=[24.5])


class PaymentCreate(CamelModel):
    email: str
    price: float = Field(..., ge=0)
    transaction_id: Optional[str] = Field(None, max_length=100)
    date: Optional[datetime] = None
    status: str = Field(default="pending", max_length=20)
    cart_ids: List[str] = Field(default_factory=list)
    menu_item_ids: List[str] = Field(default_factory=list)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _validate_email(v)

    @field_validator('cart_ids', 'menu_item_ids')
    @classmethod
    def validate_ids(cls, v: List[str]) -> List[str]:
        return _validate_object_ids(v)


# =============================================================================
# DOCUMENT SCHEMAS
# =============================================================================

class DocumentResponse(CamelModel):
    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )


class UserResponse(DocumentResponse):
    name: Optional[str] = None
    email: str
    photo: Optional[str] = None
    role: Optional[str] = None


class MenuItemResponse(DocumentResponse):
    name: str
    category: str
    price: float
    recipe: Optional[str] = None
    image: Optional[str] = None


class ReviewResponse(DocumentResponse):
    name: str
    details: str
    rating: float
    image: Optional[str] = None


class CartItemResponse(DocumentResponse):
    email: str
    menu_id: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = None


class PaymentResponse(DocumentResponse):
    email: str
    price: float
    transaction_id: Optional[str] = None
    date: Optional[datetime] = None
    status: str
    cart_ids: List[str]
    menu_item_ids: List[str]


# =============================================================================
# OPERATION RESULT SCHEMAS
# =============================================================================

class InsertResult(CamelModel):
    acknowledged: bool = True
    inserted_id: Optional[str] = None


class UserExistsResult(CamelModel):
    message: str = "User already exists"
    inserted_id: None = None


class UpdateResult(CamelModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int


class DeleteResult(CamelModel):
    acknowledged: bool = True
    deleted_count: int


class TokenResponse(CamelModel):
    token: str


class AdminStatusResponse(CamelModel):
    admin: bool


class PaymentIntentResponse(CamelModel):
    client_secret: str


class PaymentRecordResponse(CamelModel):
    payment_result: InsertResult
    delete_result: DeleteResult


class AdminStatsResponse(CamelModel):
    users: int
    menu_items: int
    orders: int
    revenue: float


class CategoryStatsResponse(CamelModel):
    category: str
    quantity: int
    revenue: float


class ErrorResponse(BaseModel):
    """Standard error response."""
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    database: str
    payment_gateway: str
    timestamp: datetime
