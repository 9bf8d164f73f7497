"""
Repository Layer
Data access for the five resource tables.
"""

from app.repositories.base import Repository
from app.repositories.carts import CartRepository
from app.repositories.menu import MenuRepository
from app.repositories.payments import PaymentRepository
from app.repositories.reviews import ReviewRepository
from app.repositories.users import UserRepository

__all__ = [
    "Repository",
    "CartRepository",
    "MenuRepository",
    "PaymentRepository",
    "ReviewRepository",
    "UserRepository",
]
