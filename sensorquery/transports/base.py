from __future__ import annotations

from abc import ABC, abstractmethod

from sensorquery.parsing.properties import PropertyEntry


class BusConnectionError(ConnectionError):
    pass


class BusCallError(ConnectionError):
    def __init__(self, service: str, object_path: str, reason: str) -> None:
        self.service = service
        self.object_path = object_path
        super().__init__(f"GetAll on {service} {object_path} failed: {reason}")


class PropertyTransport(ABC):
    def connect(self) -> None:
        return None

    @abstractmethod
    def get_all_properties(self, service: str, object_path: str) -> list[PropertyEntry]:
        """Fetch every property of one object as ``(name, variant)`` entries."""

    def close(self) -> None:
        return None

    def __enter__(self) -> "PropertyTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
