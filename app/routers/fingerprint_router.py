from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.routers.errors import to_http_error
from app.schemas.fingerprint import (
    EnrollRequest,
    EnrollResponse,
    SimulatedScanResponse,
    StoreTemplateRequest,
    StoreTemplateResponse,
    VerificationRead,
    VerifyRequest,
    VerifyResponse,
)
from app.services.fingerprint_service import FingerprintService

router = APIRouter(responses= {404 : {"description":"Not found"}})


@router.post("/enroll", status_code= status.HTTP_200_OK)
async def enroll_fingerprint(data: EnrollRequest, db: AsyncSession = Depends(get_db)) -> EnrollResponse:
    if not data.soldier_id:
        raise HTTPException(status_code=400, detail="Soldier ID is required")
    try:
        service = FingerprintService(db)
        return await service.prepare_enrollment(data.soldier_id)
    except Exception as e:
        raise to_http_error("fingerprint enrollment", e)


@router.post("/store", status_code= status.HTTP_200_OK)
async def store_fingerprint(data: StoreTemplateRequest, db: AsyncSession = Depends(get_db)) -> StoreTemplateResponse:
    if not data.soldier_id or not data.fingerprint_template:
        raise HTTPException(status_code=400, detail="Soldier ID and fingerprint template are required")
    try:
        service = FingerprintService(db)
        return await service.store_template(data.soldier_id, data.fingerprint_template)
    except Exception as e:
        raise to_http_error("fingerprint storage", e)


@router.post("/simulate-scan", status_code= status.HTTP_200_OK)
async def simulate_scan(data: EnrollRequest, db: AsyncSession = Depends(get_db)) -> SimulatedScanResponse:
    """Simulated device capture: stores a deterministic template for the soldier"""
    if not data.soldier_id:
        raise HTTPException(status_code=400, detail="Soldier ID is required")
    try:
        service = FingerprintService(db)
        return await service.simulate_scan(data.soldier_id)
    except Exception as e:
        raise to_http_error("simulated scan", e)


@router.post("/verify", status_code= status.HTTP_200_OK)
async def verify_fingerprint(data: VerifyRequest, db: AsyncSession = Depends(get_db)) -> VerifyResponse:
    if not data.fingerprint_template:
        raise HTTPException(status_code=400, detail="Fingerprint template is required")
    try:
        service = FingerprintService(db)
        return await service.verify(data.fingerprint_template)
    except Exception as e:
        raise to_http_error("fingerprint verification", e)


@router.get("/verifications", status_code= status.HTTP_200_OK)
async def list_verifications(
    soldier_id: Optional[str] = None,
    limit: int = Query(50, ge=1, le=1000),
    db: AsyncSession = Depends(get_db)
) -> List[VerificationRead]:
    try:
        service = FingerprintService(db)
        return await service.list_verifications(soldier_id, limit)
    except Exception as e:
        raise to_http_error("verification listing", e)
