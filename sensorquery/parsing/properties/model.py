from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class ValueKind(Enum):
    FLOAT = "d"
    INTEGER = "x"


@dataclass(frozen=True)
class SensorValue:
    """
    A sensor reading tagged with the wire representation it arrived in.

    Attributes:
        kind: ``ValueKind.FLOAT`` for a double, ``ValueKind.INTEGER`` for an int64.
        number: The payload; a ``float`` or an ``int`` depending on ``kind``.
    """
    kind: ValueKind
    number: Union[float, int]

    @classmethod
    def of_float(cls, number: float) -> "SensorValue":
        return cls(kind=ValueKind.FLOAT, number=float(number))

    @classmethod
    def of_integer(cls, number: int) -> "SensorValue":
        if not INT64_MIN <= number <= INT64_MAX:
            raise ValueError(f"{number} does not fit in a signed 64-bit integer")
        return cls(kind=ValueKind.INTEGER, number=int(number))


@dataclass(frozen=True)
class SensorReading:
    value: SensorValue
    lower_critical: bool = False
    upper_critical: bool = False
    lower_warning: bool = False
    upper_warning: bool = False

    @property
    def thresholds(self) -> dict[str, bool]:
        return {
            "lower_critical": self.lower_critical,
            "upper_critical": self.upper_critical,
            "lower_warning": self.lower_warning,
            "upper_warning": self.upper_warning,
        }

    @property
    def in_alarm(self) -> bool:
        return any(self.thresholds.values())
