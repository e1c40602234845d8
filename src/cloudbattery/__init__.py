from .client import CloudIIWirelessClient
from .enums import ChargingState, ProductId, VendorId
from .errors import DeviceError, DeviceOpenError, HeadSetOff, NoDeviceFound, TransportError, UnknownResponse
from .locator import locateDevice
from .models import BatteryReading, DeviceIdentity
from .protocol import QUERY_PACKET, decodeBatteryResponse, queryBattery

__all__ = [
    "CloudIIWirelessClient",
    "ChargingState",
    "ProductId",
    "VendorId",
    "DeviceError",
    "DeviceOpenError",
    "HeadSetOff",
    "NoDeviceFound",
    "TransportError",
    "UnknownResponse",
    "locateDevice",
    "BatteryReading",
    "DeviceIdentity",
    "QUERY_PACKET",
    "decodeBatteryResponse",
    "queryBattery",
]
