from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class DeviceIdentity:
    vendorId: int
    productId: int

    def __str__(self) -> str:
        return f"{self.vendorId:04X}:{self.productId:04X}"


@dataclass(frozen=True)
class BatteryReading:
    level: int
    isCharging: bool

    def __iter__(self) -> Iterator[Union[int, bool]]:
        #?Allows `level, isCharging = reading`
        yield self.level
        yield self.isCharging
