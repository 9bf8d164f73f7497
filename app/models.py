"""
SQLAlchemy Database Models

One table per resource: users, menu, reviews, carts, payments. Every primary
key is a 24-character hexadecimal object identifier (creation timestamp plus
random bytes), so ids stay opaque to clients and sort by creation time.

Author: Khalil Bannouri
Version: 4.0.0
"""

import re
import secrets
import time
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from app.core.exceptions import BadRequest
from app.database import Base

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-f]{24}$")

ADMIN_ROLE = "admin"


def new_object_id() -> str:
    """Generate an object id: 4-byte timestamp followed by 8 random bytes."""
    return f"{int(time.time()):08x}{secrets.token_hex(8)}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_valid_object_id(value: object) -> bool:
    return isinstance(value, str) and bool(OBJECT_ID_PATTERN.match(value.lower()))


def parse_object_id(value: object) -> str:
    """
    Normalize an object id received from a client.

    Raises:
        BadRequest: If the value is not a well-formed object id
    """
    if not is_valid_object_id(value):
        raise BadRequest("Invalid ID format")
    return value.lower()


class User(Base):
    """Registered user. ``role`` is NULL for regular users."""
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    photo = Column(String(500), nullable=True)
    role = Column(String(20), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE

    def __repr__(self):
        return f"<User {self.email} role={self.role or 'user'}>"


class MenuItem(Base):
    __tablename__ = "menu"

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String(100), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    price = Column(Float, nullable=False)
    recipe = Column(Text, nullable=True)
    image = Column(String(500), nullable=True)

    def __repr__(self):
        return f"<MenuItem {self.name} ({self.category}) ${self.price}>"


class Review(Base):
    __tablename__ = "reviews"

    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String(100), nullable=False)
    details = Column(Text, nullable=False)
    rating = Column(Float, nullable=False)
    image = Column(String(500), nullable=True)


class CartItem(Base):
    """A menu item waiting in a user's cart. Owned by ``email``."""
    __tablename__ = "carts"

    id = Column(String(24), primary_key=True, default=new_object_id)
    email = Column(String(255), nullable=False, index=True)
    menu_id = Column(String(24), nullable=True)
    name = Column(String(100), nullable=True)
    image = Column(String(500), nullable=True)
    price = Column(Float, nullable=True)


class Payment(Base):
    """
    A completed checkout. Immutable once inserted.

    ``cart_ids`` lists the cart rows this payment replaced. Purchased menu
    items are kept one row per occurrence in ``payment_menu_items`` so that
    statistics count repeated items once per occurrence.
    """
    __tablename__ = "payments"

    id = Column(String(24), primary_key=True, default=new_object_id)
    email = Column(String(255), nullable=False, index=True)
    price = Column(Float, nullable=False)
    transaction_id = Column(String(100), nullable=True)
    date = Column(DateTime(timezone=True), default=utcnow)
    status = Column(String(20), nullable=False, default="pending")
    cart_ids = Column(JSON, nullable=False, default=list)

    menu_items = relationship(
        "PaymentMenuItem",
        order_by="PaymentMenuItem.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def menu_item_ids(self) -> list[str]:
        return [entry.menu_item_id for entry in self.menu_items]

    def __repr__(self):
        return f"<Payment {self.id} - {self.email} - ${self.price}>"


class PaymentMenuItem(Base):
    __tablename__ = "payment_menu_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    payment_id = Column(
        String(24),
        ForeignKey("payments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position = Column(Integer, nullable=False)
    # Not a foreign key: menu items may be deleted after purchase
    menu_item_id = Column(String(24), nullable=False, index=True)
