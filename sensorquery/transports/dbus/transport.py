from __future__ import annotations

from typing import Any, Optional

from dasbus.connection import MessageBus, SessionMessageBus, SystemMessageBus
from dasbus.error import DBusError

from sensorquery.parsing.properties import PropertyEntry
from sensorquery.transports.base import BusCallError, BusConnectionError, PropertyTransport

PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"

BUS_TYPES = {
    "system": SystemMessageBus,
    "session": SessionMessageBus,
}


class DBusTransport(PropertyTransport):
    """
    Reads sensor properties with one ``Properties.GetAll`` call per object.

    ``interface`` is passed to ``GetAll`` as-is; the empty string asks for the
    properties of every interface on the object, which is where the value and
    the threshold alarms of a sensor live.
    """

    def __init__(
        self,
        bus_type: str = "system",
        interface: str = "",
        bus: Optional[MessageBus] = None,
    ) -> None:
        if bus is None:
            try:
                bus = BUS_TYPES[bus_type]()
            except KeyError as exc:
                raise ValueError(f"Unknown bus type '{bus_type}', expected one of {sorted(BUS_TYPES)}") from exc
        self.bus = bus
        self.bus_type = bus_type
        self.interface = interface

    def connect(self) -> None:
        """Open the bus connection up front so failures surface before any query."""
        try:
            self.bus.connection
        except Exception as exc:
            raise BusConnectionError(str(exc)) from exc

    # ---- PropertyTransport ----
    def get_all_properties(self, service: str, object_path: str) -> list[PropertyEntry]:
        try:
            # dasbus raises AttributeError when the object does not export the Properties interface.
            proxy = self.bus.get_proxy(service, object_path, interface_name=PROPERTIES_INTERFACE)
            reply: Any = proxy.GetAll(self.interface)
        except (DBusError, AttributeError) as exc:
            raise BusCallError(service, object_path, str(exc)) from exc
        if not isinstance(reply, dict):
            raise BusCallError(service, object_path, f"unexpected reply {type(reply).__name__}")
        return list(reply.items())

    def close(self) -> None:
        self.bus.disconnect()
