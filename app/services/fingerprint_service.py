import hashlib
import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import TemplateNotFoundError
from app.models.fingerprint_verification import FingerprintVerification
from app.repos.verification_repo import VerificationRepository
from app.schemas.fingerprint import (
    EnrollResponse,
    SimulatedScanResponse,
    StoreTemplateResponse,
    VerifiedSoldier,
    VerifyResponse,
)
from app.services.soldier_service import SoldierService

logger = logging.getLogger(__name__)

SIMULATED_INSTRUCTIONS = [
    "1. Call /fingerprints/simulate-scan with the soldier ID",
    "2. The simulated device returns and stores a template",
    "3. Use /fingerprints/verify with that template to record attendance",
]

DEVICE_INSTRUCTIONS = [
    "1. Place soldier's finger on the biometric device",
    "2. Device will capture fingerprint template",
    "3. Record the template data from the device",
    "4. Use the /fingerprints/store endpoint to save the template",
]


def simulated_template(soldier_id: str) -> str:
    """Deterministic stand-in for a device capture."""
    digest = hashlib.sha256(soldier_id.encode("utf-8")).hexdigest()
    return f"SIM-{digest}"


class FingerprintService:
    def __init__(self, db: AsyncSession):
        self.soldiers = SoldierService(db)
        self.verifications = VerificationRepository(db)

    # ----------------------
    # Enrollment
    # ----------------------
    async def prepare_enrollment(self, soldier_id: str) -> EnrollResponse:
        await self.soldiers.get_soldier(soldier_id)
        simulated = settings.DEVICE_MODE == "simulated"
        return EnrollResponse(
            success=True,
            message="Ready for fingerprint enrollment",
            soldier_id=soldier_id,
            device_mode=settings.DEVICE_MODE,
            instructions=SIMULATED_INSTRUCTIONS if simulated else DEVICE_INSTRUCTIONS
        )

    async def store_template(self, soldier_id: str, template: str) -> StoreTemplateResponse:
        await self.soldiers.set_fingerprint(soldier_id, template)
        logger.info(f"Stored fingerprint template for {soldier_id}")
        return StoreTemplateResponse(
            success=True,
            message="Fingerprint template stored successfully",
            soldier_id=soldier_id
        )

    async def simulate_scan(self, soldier_id: str) -> SimulatedScanResponse:
        template = simulated_template(soldier_id)
        await self.soldiers.set_fingerprint(soldier_id, template)
        logger.info(f"Simulated fingerprint capture for {soldier_id}")
        return SimulatedScanResponse(
            success=True,
            message="Simulated fingerprint captured and stored",
            soldier_id=soldier_id,
            fingerprint_template=template
        )

    # ----------------------
    # Verification
    # ----------------------
    async def verify(self, template: str) -> VerifyResponse:
        soldier = await self.soldiers.repo.get_by_template(template)
        if soldier is None:
            logger.info("Fingerprint verification failed: no matching template")
            raise TemplateNotFoundError()

        entry = await self.verifications.create(FingerprintVerification(
            soldier_id=soldier.soldier_id,
            full_names=soldier.full_names,
            rank_position=soldier.rank_position,
            net_salary=soldier.net_salary,
            horin_platoon=soldier.horin_platoon
        ))
        logger.info(f"Fingerprint verified for {soldier.soldier_id}")

        return VerifyResponse(
            success=True,
            message="Fingerprint verified successfully",
            soldier=VerifiedSoldier(
                soldier_id=soldier.soldier_id,
                full_names=entry.full_names,
                rank_position=entry.rank_position,
                net_salary=entry.net_salary,
                horin_platoon=entry.horin_platoon,
                verified_at=entry.verified_at
            )
        )

    async def list_verifications(self, soldier_id: Optional[str] = None, limit: int = 50) -> List[FingerprintVerification]:
        return await self.verifications.get_recent(soldier_id, limit)
