from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional
from sqlalchemy import DateTime, Index
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SoldierStatus(str, Enum):
    Active = "Active"
    Wounded = "Wounded"
    Discharged = "Discharged"
    Dead = "Dead"

    def __str__(self):
        return self.value


class Soldier(SQLModel, table=True):
    __tablename__ = "soldiers"
    # Templates can outgrow a btree index row; hash supports the equality lookup
    __table_args__ = (
        Index("ix_soldiers_fingerprint_data", "fingerprint_data", postgresql_using="hash"),
    )

    soldier_id: str = Field(primary_key=True, max_length=20)
    full_names: str = Field(index=True)
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    photo_url: Optional[str] = None
    fingerprint_data: Optional[str] = None
    rank_position: Optional[str] = None
    enlistment_date: Optional[date] = None
    horin_platoon: Optional[str] = None
    commander: Optional[str] = None
    net_salary: float = 0.0
    phone_number: str = Field(unique=True, index=True)
    clan: Optional[str] = None
    guarantor_name: Optional[str] = None
    guarantor_phone: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    address: Optional[str] = None
    blood_group: Optional[str] = None
    gun_number: Optional[str] = None
    status: SoldierStatus = Field(default=SoldierStatus.Active)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
