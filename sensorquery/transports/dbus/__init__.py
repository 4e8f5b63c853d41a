from sensorquery.transports.dbus.transport import DBusTransport, PROPERTIES_INTERFACE

__all__ = ["DBusTransport", "PROPERTIES_INTERFACE"]
