import argparse
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from sensorquery.config import LOG_LEVELS, get_settings
from sensorquery.domain import SensorQuery
from sensorquery.logging import create_logger
from sensorquery.sensors import SensorTableNotFoundError, load_sensor_table
from sensorquery.transports.base import BusConnectionError, PropertyTransport


def create_transport(bus_type: str, interface: str) -> PropertyTransport:
    from sensorquery.transports.dbus import DBusTransport

    return DBusTransport(bus_type=bus_type, interface=interface)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sensor-query",
        description="Query sensor values and threshold states over D-Bus.",
    )
    parser.add_argument(
        "type",
        nargs="?",
        default=None,
        help="Only query sensors of this type, e.g. 'temperature' or 'voltage'.",
    )
    parser.add_argument("--table", type=str, default=None, help="Bundled sensor table name or path to a JSON table.")
    parser.add_argument("--bus", choices=["system", "session"], default=None, help="Message bus to connect to.")
    parser.add_argument("--interface", type=str, default=None, help="Interface passed to Properties.GetAll.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level for diagnostics on stderr.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"sensor-query: invalid settings: {exc}", file=sys.stderr)
        return 2

    logger = create_logger("sensorquery", args.log_level or settings.log_level)

    table = args.table or settings.sensor_table
    try:
        descriptors = load_sensor_table(table)
    except (SensorTableNotFoundError, ValueError) as exc:
        print(f"sensor-query: {exc}", file=sys.stderr)
        return 2

    bus_type = args.bus or settings.bus
    interface = args.interface if args.interface is not None else settings.interface
    transport = create_transport(bus_type, interface)
    try:
        transport.connect()
    except BusConnectionError as exc:
        print(f"sensor-query: can't connect to dbus: {exc}", file=sys.stderr)
        return 1

    with transport:
        report = SensorQuery(transport, logger=logger).run(descriptors, args.type)

    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
