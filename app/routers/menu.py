"""
Menu Endpoints

Anyone may browse the menu; writes require an admin token.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InternalError, NotFound
from app.database import get_db
from app.dependencies import Claims, verify_admin
from app.repositories import MenuRepository
from app.schemas import (
    DeleteResult,
    ErrorResponse,
    InsertResult,
    MenuItemCreate,
    MenuItemResponse,
    MenuItemUpdate,
    UpdateResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menu", tags=["Menu"])

ADMIN_ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[MenuItemResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List Menu",
)
async def list_menu(db: AsyncSession = Depends(get_db)):
    try:
        items = await MenuRepository(db).list()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching menu: {e}")
        raise InternalError("Failed to fetch menu")

    logger.debug(f"Fetched {len(items)} menu items")
    return items


@router.get(
    "/{item_id}",
    response_model=MenuItemResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get Menu Item",
)
async def get_menu_item(item_id: str, db: AsyncSession = Depends(get_db)):
    item = await MenuRepository(db).get_by_id(item_id)
    if item is None:
        raise NotFound()
    return item


@router.post(
    "",
    response_model=InsertResult,
    responses=ADMIN_ERRORS,
    summary="Add Menu Item (admin)",
)
async def create_menu_item(
    payload: MenuItemCreate,
    claims: Claims = Depends(verify_admin),
    db: AsyncSession = Depends(get_db),
) -> InsertResult:
    item = await MenuRepository(db).create(payload.model_dump())
    logger.info(f"Menu item {item.id} ({item.name}) added by {claims['email']}")
    return InsertResult(inserted_id=item.id)


@router.patch(
    "/{item_id}",
    response_model=UpdateResult,
    responses=ADMIN_ERRORS,
    summary="Update Menu Item (admin)",
)
async def update_menu_item(
    item_id: str,
    payload: MenuItemUpdate,
    claims: Claims = Depends(verify_admin),
    db: AsyncSession = Depends(get_db),
) -> UpdateResult:
    modified = await MenuRepository(db).update(item_id, payload.model_dump(exclude_unset=True))
    logger.info(f"Menu item {item_id} updated by {claims['email']}")
    return UpdateResult(matched_count=1, modified_count=modified)


@router.delete(
    "/{item_id}",
    response_model=DeleteResult,
    responses=ADMIN_ERRORS,
    summary="Delete Menu Item (admin)",
)
async def delete_menu_item(
    item_id: str,
    claims: Claims = Depends(verify_admin),
    db: AsyncSession = Depends(get_db),
) -> DeleteResult:
    deleted = await MenuRepository(db).delete_by_id(item_id)
    logger.info(f"Menu item {item_id} deleted by {claims['email']}")
    return DeleteResult(deleted_count=deleted)
