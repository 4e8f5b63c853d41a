"""
Transports that fetch raw property bags from sensor objects.

Only the base interface is exported here; ``sensorquery.transports.dbus``
needs ``dasbus`` and its GLib bindings, so it is imported where it is used.
"""
from sensorquery.transports.base import BusCallError, BusConnectionError, PropertyTransport

__all__ = ["BusCallError", "BusConnectionError", "PropertyTransport"]
