from sensorquery.domain import QueryReport, SensorQuery, query_sensor
from sensorquery.parsing.properties import (
    decode_sensor_properties,
    PropertyBagDecoder,
    SensorReading,
    SensorValue,
    ValueKind,
)
from sensorquery.render import format_reading
from sensorquery.sensors import SensorDescriptor, load_sensor_table
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "decode_sensor_properties",
    "format_reading",
    "load_sensor_table",
    "PropertyBagDecoder",
    "QueryReport",
    "query_sensor",
    "SensorDescriptor",
    "SensorQuery",
    "SensorReading",
    "SensorValue",
    "ValueKind",
]

try:
    __version__ = version("sensorquery")
except PackageNotFoundError:
    __version__ = "0.0.0"
