import logging
from datetime import datetime, timezone
from typing import Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from app.repos.verification_repo import VerificationRepository
from app.schemas.fingerprint import VerificationRead
from app.schemas.payroll import PayrollReport

logger = logging.getLogger(__name__)


def month_bounds(month: int, year: int) -> Tuple[datetime, datetime]:
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return start, end


class PayrollService:
    def __init__(self, db: AsyncSession):
        self.verifications = VerificationRepository(db)

    async def monthly_report(self, month: Optional[int] = None, year: Optional[int] = None) -> PayrollReport:
        now = datetime.now(timezone.utc)
        month = month or now.month
        year = year or now.year
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month: {month}")

        start, end = month_bounds(month, year)
        rows = await self.verifications.get_between(start, end)

        total_salary = round(sum(row.net_salary or 0.0 for row in rows), 2)
        # Rows detached from a deleted soldier still count, keyed by name
        soldiers = {row.soldier_id or f"~{row.full_names}" for row in rows}

        logger.info(f"Payroll {year}-{month:02d}: {len(rows)} verifications, total {total_salary}")
        return PayrollReport(
            month=month,
            year=year,
            total_soldiers=len(soldiers),
            total_records=len(rows),
            total_salary=total_salary,
            records=[VerificationRead.model_validate(row) for row in rows]
        )
