"""Shared fixtures: hidapi is replaced by a MagicMock, no hardware needed."""
from typing import List, Optional
from unittest.mock import MagicMock, patch

import pytest

from cloudbattery.protocol import RESPONSE_PREAMBLE

HYPERX_VID = 0x0951
HP_VID = 0x03F0
CLOUD_PID = 0x1718
CLOUD_HP_PID = 0x018B


def makeDeviceInfo(vendorId: int, productId: int, path: bytes = b"/dev/hidraw0") -> dict:
    """Build an entry shaped like hid.enumerate() output."""
    return {
        "vendor_id": vendorId,
        "product_id": productId,
        "path": path,
        "manufacturer_string": "HP",
        "product_string": "HyperX Cloud II Wireless",
    }


def makeResponse(chargingByte: int = 0x10, level: int = 73, preamble: Optional[bytes] = None) -> List[int]:
    """Build an 8-byte battery response as hidapi returns it (list of ints)."""
    frame = list(RESPONSE_PREAMBLE if preamble is None else preamble)
    return frame + [chargingByte, 0x00, level]


@pytest.fixture
def fakeHid():
    """Patch the hid module used by the locator with one recognized headset attached."""
    with patch("cloudbattery.locator.hid") as hidModule:
        hidModule.enumerate.return_value = [makeDeviceInfo(HYPERX_VID, CLOUD_PID)]
        handle = hidModule.device.return_value
        handle.write.return_value = 20
        handle.read.return_value = makeResponse()
        yield hidModule


@pytest.fixture
def fakeHandle(fakeHid) -> MagicMock:
    return fakeHid.device.return_value
