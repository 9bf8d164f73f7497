"""
User Endpoints

Sign-up (create-if-absent), admin listing, role promotion and deletion, and
the self-scoped admin flag lookup used by the web client.
"""

import logging
from typing import List, Union

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import Claims, require_self, verify_admin, verify_token
from app.repositories import UserRepository
from app.schemas import (
    AdminStatusResponse,
    DeleteResult,
    ErrorResponse,
    InsertResult,
    UpdateResult,
    UserCreate,
    UserExistsResult,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=List[UserResponse],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
    summary="List Users (admin)",
)
async def list_users(
    _: Claims = Depends(verify_admin),
    db: AsyncSession = Depends(get_db),
):
    return await UserRepository(db).list()


@router.get(
    "/admin/{email}",
    response_model=AdminStatusResponse,
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
    summary="Check Own Admin Flag",
)
async def get_admin_status(
    email: str,
    claims: Claims = Depends(verify_token),
    db: AsyncSession = Depends(get_db),
) -> AdminStatusResponse:
    """Only the owner of ``email`` may ask whether it is an admin."""
    require_self(email, claims)
    return AdminStatusResponse(admin=await UserRepository(db).is_admin(email))


@router.post(
    "",
    response_model=None,
    responses={
        200: {"model": Union[InsertResult, UserExistsResult]},
        400: {"model": ErrorResponse},
    },
    summary="Create User If Absent",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db),
) -> Union[InsertResult, UserExistsResult]:
    """
    Register a user on first sign-in.

    Signing in again with the same email is not an error: the response
    carries ``insertedId: null`` and no second record is written.
    """
    user, created = await UserRepository(db).create_if_absent(
        payload.model_dump(exclude_none=True)
    )
    if not created:
        return UserExistsResult()
    return InsertResult(inserted_id=user.id)


@router.delete(
    "/{user_id}",
    response_model=DeleteResult,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete User (admin)",
)
async def delete_user(
    user_id: str,
    claims: Claims = Depends(verify_admin),
    db: AsyncSession = Depends(get_db),
) -> DeleteResult:
    deleted = await UserRepository(db).delete_by_id(user_id)
    logger.info(f"User {user_id} deleted by {claims['email']}")
    return DeleteResult(deleted_count=deleted)


@router.patch(
    "/admin/{user_id}",
    response_model=UpdateResult,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Promote User To Admin",
)
@router.patch(
    "/{user_id}",
    response_model=UpdateResult,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Promote User To Admin",
)
async def promote_user(
    user_id: str,
    claims: Claims = Depends(verify_admin),
    db: AsyncSession = Depends(get_db),
) -> UpdateResult:
    modified = await UserRepository(db).promote_to_admin(user_id)
    logger.info(f"User {user_id} promoted to admin by {claims['email']}")
    return UpdateResult(matched_count=1, modified_count=modified)
