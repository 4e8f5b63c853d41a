"""
Decoder for the ``a{sv}`` property bag returned by ``Properties.GetAll``.

Each entry is a property name paired with a variant. The variant's type tag is
inspected before its payload is unpacked: the ``Value`` property may be a double
or an int64, the four threshold alarms must be booleans, and every other
property is skipped once its tag has been checked to be a well-formed type.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Tuple

from sensorquery.parsing.errors import (
    DecodeFailure,
    MalformedThresholdFlag,
    MissingValue,
    UnsupportedValueType,
)
from sensorquery.parsing.properties.model import SensorReading, SensorValue, ValueKind
from sensorquery.parsing.signature import is_single_complete_type

PropertyEntry = Tuple[str, Any]


class PropertyRole(Enum):
    VALUE = "value"
    LOWER_CRITICAL = "lower_critical"
    UPPER_CRITICAL = "upper_critical"
    LOWER_WARNING = "lower_warning"
    UPPER_WARNING = "upper_warning"
    IGNORE = "ignore"


# Property name -> role. Names not listed here are skipped.
PROPERTY_ROLES: dict[str, PropertyRole] = {
    "Value": PropertyRole.VALUE,
    "CriticalAlarmLow": PropertyRole.LOWER_CRITICAL,
    "CriticalAlarmHigh": PropertyRole.UPPER_CRITICAL,
    "WarningAlarmLow": PropertyRole.LOWER_WARNING,
    "WarningAlarmHigh": PropertyRole.UPPER_WARNING,
}

THRESHOLD_ROLES: frozenset[PropertyRole] = frozenset(
    {
        PropertyRole.LOWER_CRITICAL,
        PropertyRole.UPPER_CRITICAL,
        PropertyRole.LOWER_WARNING,
        PropertyRole.UPPER_WARNING,
    }
)

BOOLEAN_TAG = "b"


class PropertyBagDecoder:
    """
    Turns a sequence of ``(name, variant)`` entries into a ``SensorReading``.

    Variants are expected to expose ``get_type_string()`` and ``unpack()``, as
    ``GLib.Variant`` does. The decoder keeps no state between calls, so a single
    instance may be reused for any number of property bags.
    """

    def __init__(self, roles: Optional[Mapping[str, PropertyRole]] = None) -> None:
        self.roles: Mapping[str, PropertyRole] = roles if roles is not None else PROPERTY_ROLES

    def classify(self, name: str) -> PropertyRole:
        return self.roles.get(name, PropertyRole.IGNORE)

    def decode(self, entries: Iterable[PropertyEntry]) -> SensorReading:
        """
        Decode a whole property bag.

        Args:
            entries: ``(name, variant)`` pairs in the order the bus delivered them.

        Returns:
            The decoded ``SensorReading``.

        Raises:
            UnsupportedValueType: ``Value`` is neither ``d`` nor ``x`` typed.
            MalformedThresholdFlag: A threshold property is not ``b`` typed.
            MissingValue: No ``Value`` property was present.
            DecodeFailure: An entry or payload is malformed.
        """
        value: Optional[SensorValue] = None
        flags: dict[str, bool] = {}

        for entry in entries:
            name, variant = _split_entry(entry)
            role = self.classify(name)
            tag = _peek_type(name, variant)

            if role is PropertyRole.VALUE:
                value = _read_sensor_value(variant, tag)
            elif role in THRESHOLD_ROLES:
                flags[role.value] = _read_threshold(name, variant, tag)
            else:
                _skip(name, tag)

        if value is None:
            raise MissingValue()

        return SensorReading(value=value, **flags)


def _split_entry(entry: Any) -> tuple[str, Any]:
    try:
        name, variant = entry
    except (TypeError, ValueError) as exc:
        raise DecodeFailure(f"malformed property entry {entry!r}") from exc
    if not isinstance(name, str):
        raise DecodeFailure(f"property name {name!r} is not a string")
    return name, variant


def _peek_type(name: str, variant: Any) -> str:
    get_type_string = getattr(variant, "get_type_string", None)
    if get_type_string is None:
        raise DecodeFailure(f"property '{name}' is not a variant")
    try:
        tag = get_type_string()
    except Exception as exc:
        raise DecodeFailure(f"cannot read type of property '{name}': {exc}") from exc
    if not isinstance(tag, str) or not tag:
        raise DecodeFailure(f"property '{name}' has no type signature")
    return tag


def _unpack(variant: Any, tag: str) -> Any:
    # Whatever the variant implementation raises, the bag is corrupt.
    try:
        return variant.unpack()
    except Exception as exc:
        raise DecodeFailure(f"cannot unpack '{tag}' payload: {exc}") from exc


def _read_sensor_value(variant: Any, tag: str) -> SensorValue:
    if tag == ValueKind.INTEGER.value:
        payload = _unpack(variant, tag)
        if isinstance(payload, bool) or not isinstance(payload, int):
            raise DecodeFailure(f"int64 payload decoded as {type(payload).__name__}")
        try:
            return SensorValue.of_integer(payload)
        except ValueError as exc:
            raise DecodeFailure(str(exc)) from exc

    if tag == ValueKind.FLOAT.value:
        payload = _unpack(variant, tag)
        if not isinstance(payload, float):
            raise DecodeFailure(f"double payload decoded as {type(payload).__name__}")
        return SensorValue.of_float(payload)

    raise UnsupportedValueType(tag)


def _read_threshold(name: str, variant: Any, tag: str) -> bool:
    if tag != BOOLEAN_TAG:
        raise MalformedThresholdFlag(name, tag)
    payload = _unpack(variant, tag)
    if not isinstance(payload, bool):
        raise DecodeFailure(f"boolean payload of '{name}' decoded as {type(payload).__name__}")
    return payload


def _skip(name: str, tag: str) -> None:
    # Unrecognised properties are consumed without unpacking; only the tag matters.
    if not is_single_complete_type(tag):
        raise DecodeFailure(f"property '{name}' has invalid signature {tag!r}")


_default_decoder = PropertyBagDecoder()


def decode_sensor_properties(entries: Iterable[PropertyEntry]) -> SensorReading:
    """Decode a property bag with the standard property name table."""
    return _default_decoder.decode(entries)
