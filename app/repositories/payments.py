"""Payment repository."""

from typing import Any, Sequence

from sqlalchemy import select

from app.models import Payment, PaymentMenuItem
from app.repositories.base import Repository


class PaymentRepository(Repository[Payment]):
    model = Payment

    async def create(self, doc: dict[str, Any], commit: bool = True) -> Payment:
        """Insert a payment, storing each purchased menu item id as its own row."""
        doc = dict(doc)
        menu_item_ids = doc.pop("menu_item_ids", None) or []
        if doc.get("date") is None:
            doc.pop("date", None)

        payment = Payment(**doc)
        payment.menu_items = [
            PaymentMenuItem(position=position, menu_item_id=menu_item_id)
            for position, menu_item_id in enumerate(menu_item_ids)
        ]
        self.session.add(payment)
        await self._commit(commit)
        return payment

    async def list_for_email(self, email: str) -> Sequence[Payment]:
        query = (
            select(Payment)
            .where(Payment.email == email)
            .order_by(Payment.date.desc(), Payment.id.desc())
        )
        result = await self.session.execute(query)
        return result.scalars().all()
