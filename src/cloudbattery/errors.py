from typing import Optional


class DeviceError(RuntimeError):
    """
    Base class for every failure the headset client reports.
    """

    defaultMessage = "Device error."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(f"Error: {message or self.defaultMessage}")


class TransportError(DeviceError):
    """
    The HID layer failed (enumerate, open, write or read).
    The underlying OSError is chained as __cause__.
    """

    defaultMessage = "HID transport failure."


class DeviceOpenError(TransportError):
    defaultMessage = "Could not open device."


class NoDeviceFound(DeviceError):
    defaultMessage = "No device found."


class HeadSetOff(DeviceError):
    defaultMessage = "No response. Is the headset turned on?"


class UnknownResponse(DeviceError):
    defaultMessage = "Unknown response."

    def __init__(self, message: Optional[str] = None, *, responseFrame: bytes = b"") -> None:
        super().__init__(message)
        self.responseFrame = bytes(responseFrame)
