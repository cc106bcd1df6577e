import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import settings
from app.database import get_db, init_db, reset_db
from app.schemas.system import DeviceStatus, HealthResponse, SetupResponse
from app.services.device_service import DeviceService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def root():
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.APP_ENV,
        "device_mode": settings.DEVICE_MODE,
        "docs": "/docs",
        "endpoints": {
            "health": "GET /health",
            "setup": "POST /setup-soldiers",
            "soldiers": "GET/POST /soldiers",
            "soldier": "GET/PUT/DELETE /soldiers/{soldier_id}",
            "search": "GET /soldiers/search?q=",
            "table": "GET /soldiers/table",
            "fingerprint": {
                "enroll": "POST /fingerprints/enroll",
                "store": "POST /fingerprints/store",
                "simulate_scan": "POST /fingerprints/simulate-scan",
                "verify": "POST /fingerprints/verify",
                "verifications": "GET /fingerprints/verifications"
            },
            "payroll": "GET /monthly-payroll?month=&year=",
            "device": "GET /device/status"
        }
    }


@router.get("/health", status_code= status.HTTP_200_OK)
async def health_check(db: AsyncSession = Depends(get_db)) -> HealthResponse:
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    device = await DeviceService().status()
    return HealthResponse(status="healthy", database="connected", device=device)


@router.post("/setup-soldiers", status_code= status.HTTP_200_OK)
async def setup_soldiers(reset: bool = False) -> SetupResponse:
    """Create the soldier and verification tables; `reset=true` recreates them empty"""
    try:
        if reset:
            await reset_db()
            logger.warning("Soldier tables dropped and recreated")
        else:
            await init_db()
    except Exception as e:
        logger.error(f"Error in table setup: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    return SetupResponse(
        success=True,
        message="Soldier tables reset" if reset else "Soldier tables ready",
        reset=reset
    )


@router.get("/device/status", status_code= status.HTTP_200_OK)
async def device_status() -> DeviceStatus:
    return await DeviceService().status()
