"""Cart repository, scoped by owner email."""

from typing import Sequence

from app.models import CartItem
from app.repositories.base import Repository


class CartRepository(Repository[CartItem]):
    model = CartItem

    async def list_for_email(self, email: str) -> Sequence[CartItem]:
        return await self.list(email=email)
