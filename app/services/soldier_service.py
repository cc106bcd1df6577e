import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import SoldierNotFoundError
from app.models.soldier import Soldier, utc_now
from app.repos.soldier_repo import SoldierRepository
from app.schemas.soldier import SoldierCreate, SoldierTableRow, SoldierUpdate

logger = logging.getLogger(__name__)


def format_soldier_id(sequence: int, prefix: str = settings.ID_PREFIX, digits: int = settings.ID_DIGITS) -> str:
    return f"{prefix}{sequence:0{digits}d}"


def parse_sequence(soldier_id: Optional[str], prefix: str = settings.ID_PREFIX) -> int:
    """Numeric part of an identifier, 0 when absent or not ours."""
    if not soldier_id or not soldier_id.startswith(prefix):
        return 0
    suffix = soldier_id[len(prefix):]
    return int(suffix) if suffix.isdigit() else 0


class SoldierService:
    def __init__(self, db: AsyncSession):
        self.repo = SoldierRepository(db)

    async def next_soldier_id(self) -> str:
        last = await self.repo.last_id(settings.ID_PREFIX)
        return format_soldier_id(parse_sequence(last) + 1)

    # ----------------------
    # Registration
    # ----------------------
    async def register(self, data: SoldierCreate) -> Soldier:
        attempts = max(settings.ID_RETRY_ATTEMPTS, 1)
        for attempt in range(1, attempts + 1):
            soldier_id = await self.next_soldier_id()
            soldier = Soldier(soldier_id=soldier_id, **data.model_dump())
            try:
                soldier = await self.repo.create(soldier)
            except IntegrityError:
                await self.repo.rollback()
                # Only a lost race on the identifier is retried
                if attempt < attempts and await self.repo.get(soldier_id) is not None:
                    logger.warning(f"Identifier {soldier_id} taken concurrently, retrying ({attempt}/{attempts})")
                    continue
                raise
            logger.info(f"Registered soldier {soldier.soldier_id} ({soldier.full_names})")
            return soldier
        raise RuntimeError("Could not allocate a soldier identifier")

    # ----------------------
    # Queries
    # ----------------------
    async def get_soldier(self, soldier_id: str) -> Soldier:
        soldier = await self.repo.get(soldier_id)
        if soldier is None:
            raise SoldierNotFoundError(soldier_id)
        return soldier

    async def list_soldiers(self) -> List[Soldier]:
        return await self.repo.get_all()

    async def search_soldiers(self, term: str) -> List[Soldier]:
        return await self.repo.search(term.strip())

    async def table_view(self) -> List[SoldierTableRow]:
        soldiers = await self.repo.get_all()
        return [
            SoldierTableRow(
                soldier_id=s.soldier_id,
                full_names=s.full_names,
                rank_position=s.rank_position,
                horin_platoon=s.horin_platoon,
                phone_number=s.phone_number,
                net_salary=s.net_salary,
                status=s.status,
                has_fingerprint=bool(s.fingerprint_data)
            )
            for s in soldiers
        ]

    # ----------------------
    # Mutations
    # ----------------------
    async def update_soldier(self, soldier_id: str, data: SoldierUpdate) -> Soldier:
        soldier = await self.get_soldier(soldier_id)
        for field, value in data.model_dump().items():
            setattr(soldier, field, value)
        soldier.updated_at = utc_now()
        soldier = await self.repo.save(soldier)
        logger.info(f"Updated soldier {soldier_id}")
        return soldier

    async def set_fingerprint(self, soldier_id: str, template: str) -> Soldier:
        soldier = await self.get_soldier(soldier_id)
        soldier.fingerprint_data = template
        soldier.updated_at = utc_now()
        return await self.repo.save(soldier)

    async def delete_soldier(self, soldier_id: str) -> None:
        soldier = await self.get_soldier(soldier_id)
        await self.repo.delete(soldier)
        logger.info(f"Deleted soldier {soldier_id}")
