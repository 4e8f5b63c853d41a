from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, List, Optional

DEFAULT_SENSOR_TABLE = "openbmc"

SENSOR_ROOT = "/xyz/openbmc_project/sensors/"


class SensorTableNotFoundError(FileNotFoundError):
    pass


@dataclass(frozen=True)
class SensorDescriptor:
    service: str
    object_path: str


def get_sensor_tables() -> List[str]:
    """Names of the tables bundled with the package, without their ``.json`` suffix."""
    bundled = resources.files("sensorquery.sensors")
    return sorted({Path(res.name).stem for res in bundled.iterdir() if res.name.endswith(".json")})


def _read_table(name: str) -> Any:
    table = (name or "").strip()
    if not table:
        raise ValueError("A sensor table name or path is required.")

    # A JSON file on disk wins over a bundled table of the same name.
    on_disk = Path(table)
    if on_disk.suffix == ".json" and on_disk.is_file():
        return json.loads(on_disk.read_text(encoding="utf-8"))

    stem = table[:-5] if table.endswith(".json") else table
    res = resources.files("sensorquery.sensors").joinpath(f"{stem}.json")
    if not res.is_file():
        raise SensorTableNotFoundError(
            f"Sensor table '{stem}' not found. Bundled tables: {get_sensor_tables()}"
        )
    return json.loads(res.read_text(encoding="utf-8"))


def load_sensor_table(name: str = DEFAULT_SENSOR_TABLE) -> list[SensorDescriptor]:
    """
    Load the list of sensor objects to query.

    Args:
        name: A bundled table name (e.g. ``"openbmc"``) or a path to a JSON file.

    Returns:
        The descriptors in table order.

    Raises:
        SensorTableNotFoundError: No such bundled table or file.
        ValueError: The table is not a list of ``{"service", "object"}`` objects.
    """
    data = _read_table(name)
    entries = data.get("sensors") if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise ValueError(f"Sensor table '{name}' must contain a list of sensors")

    descriptors: list[SensorDescriptor] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Sensor table '{name}' entry {index} is not an object")
        service = entry.get("service")
        object_path = entry.get("object")
        if not isinstance(service, str) or not service:
            raise ValueError(f"Sensor table '{name}' entry {index} has no service")
        if not isinstance(object_path, str) or not object_path.startswith("/"):
            raise ValueError(f"Sensor table '{name}' entry {index} has no valid object path")
        descriptors.append(SensorDescriptor(service=service, object_path=object_path))
    return descriptors


def sensor_matches_type(descriptor: SensorDescriptor, sensor_type: Optional[str]) -> bool:
    """
    Check whether a sensor lives under ``/xyz/openbmc_project/sensors/<type>/``.

    An empty or missing type matches every sensor.
    """
    if not sensor_type:
        return True

    path = descriptor.object_path
    if not path.startswith(SENSOR_ROOT):
        return False

    component, sep, _ = path[len(SENSOR_ROOT):].partition("/")
    if not sep:
        return False
    return component == sensor_type


__all__ = [
    "DEFAULT_SENSOR_TABLE",
    "SensorDescriptor",
    "SensorTableNotFoundError",
    "get_sensor_tables",
    "load_sensor_table",
    "sensor_matches_type",
]
