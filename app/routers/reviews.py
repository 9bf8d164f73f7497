"""Review Endpoints (read-only)."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.repositories import ReviewRepository
from app.schemas import ReviewResponse

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("", response_model=List[ReviewResponse], summary="List Reviews")
async def list_reviews(db: AsyncSession = Depends(get_db)):
    return await ReviewRepository(db).list()
