from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class EnrollRequest(BaseModel):
    soldier_id: Optional[str] = None


class StoreTemplateRequest(BaseModel):
    soldier_id: Optional[str] = None
    fingerprint_template: Optional[str] = None


class VerifyRequest(BaseModel):
    fingerprint_template: Optional[str] = None


class EnrollResponse(BaseModel):
    success: bool
    message: str
    soldier_id: str
    device_mode: str
    instructions: List[str]


class StoreTemplateResponse(BaseModel):
    success: bool
    message: str
    soldier_id: str


class SimulatedScanResponse(BaseModel):
    success: bool
    message: str
    soldier_id: str
    fingerprint_template: str


class VerifiedSoldier(BaseModel):
    soldier_id: str
    full_names: str
    rank_position: Optional[str]
    net_salary: float
    horin_platoon: Optional[str]
    verified_at: datetime


class VerifyResponse(BaseModel):
    success: bool
    message: str
    soldier: VerifiedSoldier


class VerificationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    soldier_id: Optional[str]
    full_names: str
    rank_position: Optional[str]
    net_salary: float
    horin_platoon: Optional[str]
    verified_at: datetime
