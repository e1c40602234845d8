import logging
from typing import Any, Dict, FrozenSet, List

import hid

from .enums import ProductId, VendorId
from .errors import DeviceOpenError, NoDeviceFound, TransportError
from .models import DeviceIdentity

logger = logging.getLogger(__name__)

#?Two independent whitelists: any vendor/product cross pairing is accepted
VENDOR_IDS: FrozenSet[int] = frozenset(int(vendorId) for vendorId in VendorId)
PRODUCT_IDS: FrozenSet[int] = frozenset(int(productId) for productId in ProductId)


def isRecognized(identity: DeviceIdentity) -> bool:
    return identity.productId in PRODUCT_IDS and identity.vendorId in VENDOR_IDS


def identityOf(deviceInfo: Dict[str, Any]) -> DeviceIdentity:
    return DeviceIdentity(vendorId=int(deviceInfo.get("vendor_id") or 0), productId=int(deviceInfo.get("product_id") or 0))


def _enumerate() -> List[Dict[str, Any]]:
    try:
        return list(hid.enumerate())
    except OSError as error:
        raise TransportError(f"HID enumeration failed: {error}") from error


def findRecognizedDevices() -> List[Dict[str, Any]]:
    return [deviceInfo for deviceInfo in _enumerate() if isRecognized(identityOf(deviceInfo))]


def openDevice(deviceInfo: Dict[str, Any]) -> "hid.device":
    identity = identityOf(deviceInfo)
    deviceHandle = hid.device()
    try:
        deviceHandle.open_path(deviceInfo["path"])
    except OSError as error:
        raise DeviceOpenError(f"Could not open device {identity}: {error}") from error

    try:
        deviceHandle.set_nonblocking(0)
    except OSError as error:
        deviceHandle.close()
        raise DeviceOpenError(f"Could not configure device {identity}: {error}") from error

    logger.debug("Opened %s at %r", identity, deviceInfo.get("path"))
    return deviceHandle


def locateDevice() -> "hid.device":
    """
    Opens the first enumerated HID entry whose vendor and product ids are both
    whitelisted. Enumeration order is whatever hidapi returns; nothing after
    the first match is inspected.
    """
    for deviceInfo in _enumerate():
        identity = identityOf(deviceInfo)
        if isRecognized(identity):
            logger.debug("Matched %s", identity)
            return openDevice(deviceInfo)

    raise NoDeviceFound()
