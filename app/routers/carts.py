"""
Cart Endpoints

Carts are keyed by the owner's email; listing only returns rows of the
requested email.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BadRequest
from app.database import get_db
from app.repositories import CartRepository
from app.schemas import (
    CartItemCreate,
    CartItemResponse,
    DeleteResult,
    ErrorResponse,
    InsertResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/carts", tags=["Carts"])


@router.get(
    "",
    response_model=List[CartItemResponse],
    responses={400: {"model": ErrorResponse}},
    summary="List Cart Items Of An Email",
)
async def list_cart(
    email: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    if not email:
        raise BadRequest("Email is required")

    items = await CartRepository(db).list_for_email(email)
    logger.debug(f"Fetched {len(items)} cart items for {email}")
    return items


@router.post(
    "",
    response_model=InsertResult,
    responses={400: {"model": ErrorResponse}},
    summary="Add Item To Cart",
)
async def add_to_cart(
    payload: CartItemCreate,
    db: AsyncSession = Depends(get_db),
) -> InsertResult:
    item = await CartRepository(db).create(payload.model_dump())
    logger.info(f"Cart item {item.id} added for {item.email}")
    return InsertResult(inserted_id=item.id)


@router.delete(
    "/{item_id}",
    response_model=DeleteResult,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Remove Cart Item",
)
async def remove_from_cart(
    item_id: str,
    db: AsyncSession = Depends(get_db),
) -> DeleteResult:
    deleted = await CartRepository(db).delete_by_id(item_id)
    return DeleteResult(deleted_count=deleted)
