from datetime import datetime
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.models.soldier import utc_now


class FingerprintVerification(SQLModel, table=True):
    __tablename__ = "fingerprint_verifications"

    id: Optional[int] = Field(default=None, primary_key=True)
    # Nulled when the soldier is deleted; the snapshot below is kept for payroll
    soldier_id: Optional[str] = Field(
        default=None,
        foreign_key="soldiers.soldier_id",
        ondelete="SET NULL",
        index=True
    )
    full_names: str
    rank_position: Optional[str] = None
    net_salary: float = 0.0
    horin_platoon: Optional[str] = None
    verified_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
