"""
Text rendering for decoded sensor readings.

A reading is shown as a value string and a threshold string, e.g.
``/xyz/openbmc_project/sensors/temperature/Temp: 72.250000 lw``.
"""
from __future__ import annotations

from sensorquery.parsing.properties.model import SensorReading, ValueKind

# Display bound for the value text; longer renderings are cut, not rejected.
VALUE_WIDTH = 11

NO_THRESHOLDS = "ok"

# Threshold attribute -> short code, in display priority order.
THRESHOLD_LABELS: tuple[tuple[str, str], ...] = (
    ("lower_critical", "lc"),
    ("upper_critical", "uc"),
    ("lower_warning", "lw"),
    ("upper_warning", "uw"),
)


def format_value(reading: SensorReading) -> str:
    if reading.value.kind is ValueKind.FLOAT:
        text = f"{reading.value.number:f}"
    else:
        text = f"{reading.value.number:d}"
    return text[:VALUE_WIDTH]


def format_thresholds(reading: SensorReading) -> str:
    labels = [label for attr, label in THRESHOLD_LABELS if getattr(reading, attr)]
    return ",".join(labels) if labels else NO_THRESHOLDS


def format_reading(reading: SensorReading) -> tuple[str, str]:
    return format_value(reading), format_thresholds(reading)


def format_line(object_path: str, reading: SensorReading) -> str:
    value_str, threshold_str = format_reading(reading)
    return f"{object_path}: {value_str} {threshold_str}"


def format_failure(object_path: str) -> str:
    return f"{object_path}: failed to read sensor object"
