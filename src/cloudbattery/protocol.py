import logging

from .enums import ChargingState
from .errors import HeadSetOff, TransportError, UnknownResponse
from .models import BatteryReading

logger = logging.getLogger(__name__)

QUERY_PACKET: bytes = bytes([0x06, 0xFF, 0xBB, 0x02]) + bytes(16)
RESPONSE_PREAMBLE: bytes = bytes([0x06, 0xFF, 0xBB, 0x02, 0x00])
RESPONSE_LENGTH = 8
CHARGING_INDEX = 5
BATTERY_LEVEL_INDEX = 7
READ_TIMEOUT_MS = 1000


def decodeBatteryResponse(responseFrame: bytes) -> BatteryReading:
    """
    Response layout (8 bytes):
      [0:5] preamble 06 FF BB 02 00
      [5]   charging state, 0x10 charging / 0x0F not charging
      [7]   battery level, raw byte
    Short frames are zero padded to 8 bytes before validation.
    """
    if not responseFrame:
        raise HeadSetOff()

    frame = bytes(responseFrame[:RESPONSE_LENGTH]).ljust(RESPONSE_LENGTH, b"\x00")

    if not frame.startswith(RESPONSE_PREAMBLE):
        raise UnknownResponse(responseFrame=bytes(responseFrame))

    try:
        chargingState = ChargingState(frame[CHARGING_INDEX])
    except ValueError:
        raise UnknownResponse(responseFrame=bytes(responseFrame)) from None

    return BatteryReading(level=frame[BATTERY_LEVEL_INDEX], isCharging=chargingState is ChargingState.charging)


def queryBattery(deviceHandle, readTimeoutMs: int = READ_TIMEOUT_MS) -> BatteryReading:
    """
    One write of QUERY_PACKET followed by one bounded read. No retries.
    """
    try:
        written = deviceHandle.write(QUERY_PACKET)
    except OSError as error:
        raise TransportError(f"HID write failed: {error}") from error

    if written is not None and written < 0:
        raise TransportError("HID write failed")

    try:
        response = deviceHandle.read(RESPONSE_LENGTH, timeout_ms=int(readTimeoutMs))
    except OSError as error:
        raise TransportError(f"HID read failed: {error}") from error

    responseFrame = bytes(response or b"")
    logger.debug("Battery response: %s", responseFrame.hex(" ") or "<empty>")
    return decodeBatteryResponse(responseFrame)
