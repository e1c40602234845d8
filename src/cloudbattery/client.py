import logging
import time
from typing import Any, Dict, Optional

from .errors import TransportError
from .locator import locateDevice
from .models import BatteryReading
from .protocol import READ_TIMEOUT_MS, queryBattery

logger = logging.getLogger(__name__)


class CloudIIWirelessClient:
    """
    HID session for the HyperX / HP Cloud II Wireless headset.

    Construction locates and opens the headset; the handle is owned by this
    client until close(). Not thread safe: callers sharing one client across
    threads must serialize access themselves.
    """

    def __init__(self, readTimeoutMs: int = READ_TIMEOUT_MS) -> None:
        self.readTimeoutMs = int(readTimeoutMs)
        self.deviceHandle: Optional[Any] = locateDevice()

    def __enter__(self) -> "CloudIIWirelessClient":
        return self

    def __exit__(self, excType, exc, tb) -> bool:
        self.close()
        return False

    def close(self) -> None:
        deviceHandle, self.deviceHandle = self.deviceHandle, None
        if deviceHandle is not None:
            deviceHandle.close()
            logger.debug("Closed device handle")

    #*Main Public API
    def getBatteryLevel(self) -> BatteryReading:
        if self.deviceHandle is None:
            raise TransportError("Device handle is closed.")
        return queryBattery(self.deviceHandle, readTimeoutMs=self.readTimeoutMs)

    def getSnapshot(self, includeTimestamp: bool = True) -> Dict[str, Any]:
        snapshot: Dict[str, Any] = {}

        if includeTimestamp:
            snapshot["timestamp"] = time.time()

        batteryReading = self.getBatteryLevel()
        snapshot["battery"] = {"chargePercent": batteryReading.level, "isCharging": batteryReading.isCharging}

        return snapshot
