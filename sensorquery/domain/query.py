from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Iterable, Optional, TextIO

from sensorquery.parsing.errors import SensorQueryError
from sensorquery.parsing.properties import PropertyBagDecoder, SensorReading
from sensorquery.render import format_failure, format_line
from sensorquery.sensors import SensorDescriptor, sensor_matches_type
from sensorquery.transports.base import BusCallError, PropertyTransport

_default_decoder = PropertyBagDecoder()


def query_sensor(
    transport: PropertyTransport,
    descriptor: SensorDescriptor,
    decoder: Optional[PropertyBagDecoder] = None,
) -> SensorReading:
    """Fetch one object's properties and decode them into a reading."""
    entries = transport.get_all_properties(descriptor.service, descriptor.object_path)
    return (decoder or _default_decoder).decode(entries)


@dataclass
class QueryReport:
    queried: int = 0
    failed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class SensorQuery:
    """
    Queries a list of sensor objects one after another and prints each result.

    A failure on one object is logged and reported on the output, then the
    remaining objects are still queried.
    """

    def __init__(
        self,
        transport: PropertyTransport,
        logger: Optional[logging.Logger] = None,
        out: Optional[TextIO] = None,
        decoder: Optional[PropertyBagDecoder] = None,
    ) -> None:
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.out = out
        self.decoder = decoder or _default_decoder

    def _print(self, line: str) -> None:
        print(line, file=self.out if self.out is not None else sys.stdout)

    def run(self, descriptors: Iterable[SensorDescriptor], sensor_type: Optional[str] = None) -> QueryReport:
        report = QueryReport()
        for descriptor in descriptors:
            if not sensor_matches_type(descriptor, sensor_type):
                self.logger.debug(
                    "sensor_skipped",
                    extra={"details": {"object": descriptor.object_path, "type": sensor_type}},
                )
                continue

            report.queried += 1
            try:
                reading = query_sensor(self.transport, descriptor, self.decoder)
            except (SensorQueryError, BusCallError) as exc:
                self.logger.warning(
                    "sensor_read_failed",
                    extra={"details": {"object": descriptor.object_path, "error": str(exc)}},
                )
                report.failed.append(descriptor.object_path)
                self._print(format_failure(descriptor.object_path))
                continue

            self.logger.info(
                "sensor_read_ok",
                extra={"details": {"object": descriptor.object_path, "kind": reading.value.kind.name}},
            )
            self._print(format_line(descriptor.object_path, reading))
        return report
