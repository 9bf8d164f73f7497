"""Admin Reporting Endpoints."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import Claims, verify_admin
from app.schemas import AdminStatsResponse, CategoryStatsResponse, ErrorResponse
from app.services import stats

router = APIRouter(
    tags=["Stats"],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)


@router.get("/admin-stats", response_model=AdminStatsResponse, summary="Dashboard Totals")
async def admin_stats(
    _: Claims = Depends(verify_admin),
    db: AsyncSession = Depends(get_db),
) -> AdminStatsResponse:
    return AdminStatsResponse(**await stats.admin_stats(db))


@router.get(
    "/order-stats",
    response_model=List[CategoryStatsResponse],
    summary="Sales Per Category",
)
async def order_stats(
    _: Claims = Depends(verify_admin),
    db: AsyncSession = Depends(get_db),
):
    return [CategoryStatsResponse(**row) for row in await stats.order_stats(db)]
