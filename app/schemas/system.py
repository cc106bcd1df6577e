from typing import Optional
from pydantic import BaseModel


class DeviceStatus(BaseModel):
    mode: str
    status: str
    device_ip: Optional[str] = None
    device_port: Optional[int] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    database: str
    device: DeviceStatus


class SetupResponse(BaseModel):
    success: bool
    message: str
    reset: bool
