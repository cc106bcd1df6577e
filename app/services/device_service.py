import asyncio
import logging
from typing import Optional

from app.config import settings
from app.schemas.system import DeviceStatus

logger = logging.getLogger(__name__)


class DeviceService:
    """Reachability of the biometric scanner.

    In `simulated` mode no device is contacted. In `tcp` mode a plain TCP
    connection is opened and closed; no device commands are exchanged.
    """

    def __init__(
        self,
        mode: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        timeout: Optional[float] = None
    ):
        self.mode = mode or settings.DEVICE_MODE
        self.host = host or settings.DEVICE_HOST
        self.port = port or settings.DEVICE_PORT
        self.timeout = timeout or settings.DEVICE_TIMEOUT

    async def status(self) -> DeviceStatus:
        if self.mode == "simulated":
            return DeviceStatus(mode=self.mode, status="simulated")

        try:
            reader, writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port),
                timeout=self.timeout
            )
            writer.close()
            await writer.wait_closed()
        except (OSError, asyncio.TimeoutError) as e:
            logger.warning(f"Biometric device {self.host}:{self.port} unreachable: {e!r}")
            return DeviceStatus(
                mode=self.mode,
                status="disconnected",
                device_ip=self.host,
                device_port=self.port,
                error=str(e) or type(e).__name__
            )

        return DeviceStatus(
            mode=self.mode,
            status="connected",
            device_ip=self.host,
            device_port=self.port
        )
