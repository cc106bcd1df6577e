from typing import List
from pydantic import BaseModel

from app.schemas.fingerprint import VerificationRead


class PayrollReport(BaseModel):
    month: int
    year: int
    total_soldiers: int
    total_records: int
    total_salary: float
    records: List[VerificationRead]
