from enum import IntEnum


class VendorId(IntEnum):
    hyperx = 0x0951
    hp = 0x03F0


class ProductId(IntEnum):
    cloudIIWireless = 0x1718
    cloudIIWirelessHp = 0x018B


class ChargingState(IntEnum):
    charging = 0x10
    notCharging = 0x0F
