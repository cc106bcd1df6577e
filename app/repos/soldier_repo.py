from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, or_, update
from sqlmodel import select

from app.models.fingerprint_verification import FingerprintVerification
from app.models.soldier import Soldier


class SoldierRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, soldier: Soldier) -> Soldier:
        self.db.add(soldier)
        await self.db.commit()
        await self.db.refresh(soldier)
        return soldier

    async def get(self, soldier_id: str) -> Optional[Soldier]:
        return await self.db.get(Soldier, soldier_id)

    async def get_all(self) -> List[Soldier]:
        statement = select(Soldier).order_by(Soldier.soldier_id)
        result = await self.db.execute(statement)
        return list(result.scalars().all())

    async def search(self, term: str) -> List[Soldier]:
        # Literal substring: LIKE wildcards in the term are escaped
        escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern = f"%{escaped}%"
        statement = (
            select(Soldier)
            .where(or_(
                Soldier.soldier_id.ilike(pattern, escape="\\"),
                Soldier.full_names.ilike(pattern, escape="\\")
            ))
            .order_by(Soldier.soldier_id)
        )
        result = await self.db.execute(statement)
        return list(result.scalars().all())

    async def get_by_template(self, template: str) -> Optional[Soldier]:
        statement = (
            select(Soldier)
            .where(Soldier.fingerprint_data == template)
            .order_by(Soldier.soldier_id)
            .limit(1)
        )
        result = await self.db.execute(statement)
        return result.scalars().first()

    async def last_id(self, prefix: str) -> Optional[str]:
        """Highest identifier carrying `prefix`, compared by length first so
        sequences that outgrow their zero padding still sort last."""
        statement = (
            select(Soldier.soldier_id)
            .where(Soldier.soldier_id.like(f"{prefix}%"))
            .order_by(func.length(Soldier.soldier_id).desc(), Soldier.soldier_id.desc())
            .limit(1)
        )
        result = await self.db.execute(statement)
        return result.scalars().first()

    async def save(self, soldier: Soldier) -> Soldier:
        self.db.add(soldier)
        await self.db.commit()
        await self.db.refresh(soldier)
        return soldier

    async def delete(self, soldier: Soldier) -> None:
        # Detach log rows explicitly; SQLite does not enforce ON DELETE by default
        await self.db.execute(
            update(FingerprintVerification)
            .where(FingerprintVerification.soldier_id == soldier.soldier_id)
            .values(soldier_id=None)
        )
        await self.db.delete(soldier)
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()
