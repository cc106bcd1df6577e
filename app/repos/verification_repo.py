from datetime import datetime
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import desc, select

from app.models.fingerprint_verification import FingerprintVerification


class VerificationRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, verification: FingerprintVerification) -> FingerprintVerification:
        self.db.add(verification)
        await self.db.commit()
        await self.db.refresh(verification)
        return verification

    async def get_recent(self, soldier_id: Optional[str] = None, limit: int = 50) -> List[FingerprintVerification]:
        statement = select(FingerprintVerification)
        if soldier_id:
            statement = statement.where(FingerprintVerification.soldier_id == soldier_id)
        statement = statement.order_by(
            desc(FingerprintVerification.verified_at), desc(FingerprintVerification.id)
        ).limit(limit)
        result = await self.db.execute(statement)
        return list(result.scalars().all())

    async def get_between(self, start: datetime, end: datetime) -> List[FingerprintVerification]:
        """Log rows with start <= verified_at < end, grouped by platoon then rank."""
        statement = (
            select(FingerprintVerification)
            .where(FingerprintVerification.verified_at >= start)
            .where(FingerprintVerification.verified_at < end)
            .order_by(
                FingerprintVerification.horin_platoon,
                FingerprintVerification.rank_position,
                FingerprintVerification.full_names,
                FingerprintVerification.verified_at
            )
        )
        result = await self.db.execute(statement)
        return list(result.scalars().all())
