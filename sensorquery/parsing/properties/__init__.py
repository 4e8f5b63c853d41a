"""
Sensor property bag decoding.

Decodes the name/variant pairs returned by a single ``GetAll`` call into a
``SensorReading``.
"""
from sensorquery.parsing.properties.decode import (
    decode_sensor_properties,
    PropertyBagDecoder,
    PropertyEntry,
    PropertyRole,
    PROPERTY_ROLES,
)
from sensorquery.parsing.properties.model import SensorReading, SensorValue, ValueKind

__all__ = [
    "decode_sensor_properties",
    "PropertyBagDecoder",
    "PropertyEntry",
    "PropertyRole",
    "PROPERTY_ROLES",
    "SensorReading",
    "SensorValue",
    "ValueKind",
]
