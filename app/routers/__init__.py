from fastapi import APIRouter

from .fingerprint_router import router as fingerprint_router
from .payroll_router import router as payroll_router
from .soldier_router import router as soldier_router
from .system_router import router as system_router

api_router = APIRouter()


api_router.include_router(system_router, tags=["System"])

api_router.include_router(
   soldier_router,
   prefix="/soldiers",
   tags=["Soldiers"]
)

api_router.include_router(
   fingerprint_router,
   prefix="/fingerprints",
   tags=["Fingerprints"]
)

api_router.include_router(payroll_router, tags=["Payroll"])
