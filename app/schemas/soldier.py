from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from app.models.soldier import SoldierStatus


class SoldierCreate(BaseModel):
    full_names: str
    phone_number: str
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    photo_url: Optional[str] = None
    fingerprint_data: Optional[str] = None
    rank_position: Optional[str] = None
    enlistment_date: Optional[date] = None
    horin_platoon: Optional[str] = None
    commander: Optional[str] = None
    net_salary: float = 0.0
    clan: Optional[str] = None
    guarantor_name: Optional[str] = None
    guarantor_phone: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    address: Optional[str] = None
    blood_group: Optional[str] = None
    gun_number: Optional[str] = None
    status: SoldierStatus = SoldierStatus.Active


class SoldierUpdate(SoldierCreate):
    """Full replacement body: every field not sent is reset to its default."""


class SoldierRead(SoldierCreate):
    model_config = ConfigDict(from_attributes=True)

    soldier_id: str
    created_at: datetime
    updated_at: datetime


class SoldierTableRow(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    soldier_id: str
    full_names: str
    rank_position: Optional[str]
    horin_platoon: Optional[str]
    phone_number: str
    net_salary: float
    status: SoldierStatus
    has_fingerprint: bool


class DeleteResponse(BaseModel):
    success: bool
    message: str
    soldier_id: str
