from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.routers.errors import to_http_error
from app.schemas.payroll import PayrollReport
from app.services.payroll_service import PayrollService

router = APIRouter()


@router.get("/monthly-payroll", status_code= status.HTTP_200_OK)
async def monthly_payroll(
    month: Optional[int] = Query(None),
    year: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db)
) -> PayrollReport:
    """Salary owed for every verification logged in the month (defaults to the current one)"""
    if month is not None and not 1 <= month <= 12:
        raise HTTPException(status_code=400, detail="Month must be between 1 and 12")
    try:
        service = PayrollService(db)
        return await service.monthly_report(month, year)
    except Exception as e:
        raise to_http_error("monthly payroll", e)
