"""
Errors raised while decoding a sensor property bag.

Every error is terminal for the object being decoded; nothing here is retried.
"""
from __future__ import annotations

from sensorquery.parsing.signature import type_name


class SensorQueryError(ValueError):
    """Base class for all property bag decoding errors."""


class UnsupportedValueType(SensorQueryError):
    """The ``Value`` property uses a wire type that is neither ``x`` nor ``d``."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"invalid type '{tag}' ({type_name(tag)}), expected 'd/x'")


class MalformedThresholdFlag(SensorQueryError):
    """A threshold alarm property is present but not boolean typed."""

    def __init__(self, name: str, tag: str | None = None) -> None:
        self.name = name
        self.tag = tag
        super().__init__(
            f"threshold property '{name}' has type '{tag}' ({type_name(tag or '')}), expected 'b' (boolean)"
        )


class MissingValue(SensorQueryError):
    def __init__(self) -> None:
        super().__init__("no Value property")


class DecodeFailure(SensorQueryError):
    """The property bag itself is truncated or corrupt."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"decode failed: {reason}")


__all__ = [
    "DecodeFailure",
    "MalformedThresholdFlag",
    "MissingValue",
    "SensorQueryError",
    "UnsupportedValueType",
]
