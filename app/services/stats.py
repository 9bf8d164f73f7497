"""
Statistics Aggregator

Revenue and order reporting for the admin dashboard.
"""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import MenuItem, Payment, PaymentMenuItem, User


async def admin_stats(session: AsyncSession) -> dict[str, Any]:
    """
    Collection counts plus total revenue.

    Returns:
        {"users", "menu_items", "orders", "revenue"}; revenue is 0 when no
        payment exists
    """
    users = await session.scalar(select(func.count(User.id)))
    menu_items = await session.scalar(select(func.count(MenuItem.id)))
    orders = await session.scalar(select(func.count(Payment.id)))
    revenue = await session.scalar(select(func.coalesce(func.sum(Payment.price), 0)))

    return {
        "users": users or 0,
        "menu_items": menu_items or 0,
        "orders": orders or 0,
        "revenue": revenue or 0,
    }


async def order_stats(session: AsyncSession) -> list[dict[str, Any]]:
    """
    Quantity sold and revenue per menu category.

    Every purchased menu item occurrence counts once, so a payment listing
    the same item twice contributes two units. Occurrences whose menu item
    no longer exists are left out.
    """
    query = (
        select(
            MenuItem.category.label("category"),
            func.count(PaymentMenuItem.id).label("quantity"),
            func.sum(MenuItem.price).label("revenue"),
        )
        .select_from(PaymentMenuItem)
        .join(MenuItem, MenuItem.id == PaymentMenuItem.menu_item_id)
        .group_by(MenuItem.category)
        .order_by(MenuItem.category)
    )
    result = await session.execute(query)
    return [
        {"category": row.category, "quantity": row.quantity, "revenue": row.revenue}
        for row in result
    ]
