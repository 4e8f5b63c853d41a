"""Tests for the sensor-query command line driver."""
import json
import logging

import pytest

from sensorquery import cli
from sensorquery.config import get_settings
from sensorquery.transports.base import BusCallError, BusConnectionError, PropertyTransport

TEMP_PATH = "/xyz/openbmc_project/sensors/temperature/Temp"


class FakeVariant:
    def __init__(self, type_string, payload):
        self.type_string = type_string
        self.payload = payload

    def get_type_string(self):
        return self.type_string

    def unpack(self):
        return self.payload


class StubTransport(PropertyTransport):
    def __init__(self, replies=None, connect_error=None):
        self.replies = replies or {}
        self.connect_error = connect_error
        self.calls = []
        self.closed = False

    def connect(self):
        if self.connect_error is not None:
            raise self.connect_error

    def get_all_properties(self, service, object_path):
        self.calls.append((service, object_path))
        reply = self.replies.get(object_path)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    for name in ("SENSOR_QUERY_BUS", "SENSOR_QUERY_INTERFACE", "SENSOR_QUERY_TABLE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger = logging.getLogger("sensorquery")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def _install_stub(monkeypatch, stub):
    created = {}

    def factory(bus_type, interface):
        created["bus_type"] = bus_type
        created["interface"] = interface
        return stub

    monkeypatch.setattr("sensorquery.cli.create_transport", factory)
    return created


def test_success_prints_reading(monkeypatch, capsys):
    stub = StubTransport(
        {
            TEMP_PATH: [
                ("CriticalAlarmHigh", FakeVariant("b", False)),
                ("Value", FakeVariant("d", 72.25)),
                ("WarningAlarmLow", FakeVariant("b", True)),
                ("Unit", FakeVariant("s", "C")),
            ]
        }
    )
    created = _install_stub(monkeypatch, stub)

    assert cli.main([]) == 0

    assert capsys.readouterr().out == f"{TEMP_PATH}: 72.250000 lw\n"
    assert created == {"bus_type": "system", "interface": ""}
    assert stub.closed is True


def test_decode_failure_exits_nonzero(monkeypatch, capsys):
    stub = StubTransport({TEMP_PATH: [("Unit", FakeVariant("s", "C"))]})
    _install_stub(monkeypatch, stub)

    assert cli.main(["--log-level", "CRITICAL"]) == 1
    assert capsys.readouterr().out == f"{TEMP_PATH}: failed to read sensor object\n"


def test_bus_call_failure_is_reported(monkeypatch, capsys):
    stub = StubTransport({TEMP_PATH: BusCallError("svc", TEMP_PATH, "ServiceUnknown")})
    _install_stub(monkeypatch, stub)

    assert cli.main(["--log-level", "CRITICAL"]) == 1
    assert "failed to read sensor object" in capsys.readouterr().out


def test_type_filter_skips_other_sensors(monkeypatch, capsys):
    stub = StubTransport()
    _install_stub(monkeypatch, stub)

    assert cli.main(["voltage"]) == 0
    assert stub.calls == []
    assert capsys.readouterr().out == ""


def test_connection_failure(monkeypatch, capsys):
    stub = StubTransport(connect_error=BusConnectionError("no such file or directory"))
    _install_stub(monkeypatch, stub)

    assert cli.main([]) == 1
    assert "can't connect to dbus: no such file or directory" in capsys.readouterr().err
    assert stub.calls == []


def test_unknown_table(monkeypatch, capsys):
    _install_stub(monkeypatch, StubTransport())

    assert cli.main(["--table", "missing_table"]) == 2
    assert "missing_table" in capsys.readouterr().err


def test_custom_table_and_options(monkeypatch, capsys, tmp_path):
    table = tmp_path / "table.json"
    path = "/xyz/openbmc_project/sensors/voltage/P12V"
    table.write_text(json.dumps([{"service": "xyz.openbmc_project.ADCSensor", "object": path}]))
    stub = StubTransport({path: [("Value", FakeVariant("x", 12))]})
    created = _install_stub(monkeypatch, stub)

    code = cli.main(["--table", str(table), "--bus", "session", "--interface", "xyz.openbmc_project.Sensor.Value"])

    assert code == 0
    assert capsys.readouterr().out == f"{path}: 12 ok\n"
    assert created == {"bus_type": "session", "interface": "xyz.openbmc_project.Sensor.Value"}
    assert stub.calls == [("xyz.openbmc_project.ADCSensor", path)]


def test_settings_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("SENSOR_QUERY_BUS", "session")
    monkeypatch.setenv("SENSOR_QUERY_INTERFACE", "xyz.openbmc_project.Sensor.Value")
    stub = StubTransport({TEMP_PATH: [("Value", FakeVariant("x", 30))]})
    created = _install_stub(monkeypatch, stub)

    assert cli.main([]) == 0
    assert created == {"bus_type": "session", "interface": "xyz.openbmc_project.Sensor.Value"}


def test_invalid_bus_option():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--bus", "starship"])
    assert excinfo.value.code == 2


def test_unknown_log_level_is_usage_error(monkeypatch, capsys):
    stub = StubTransport()
    _install_stub(monkeypatch, stub)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--log-level", "LOUD"])
    assert excinfo.value.code == 2
    assert "--log-level" in capsys.readouterr().err
    assert stub.calls == []


def test_log_level_is_case_insensitive(monkeypatch, capsys):
    stub = StubTransport({TEMP_PATH: [("Value", FakeVariant("x", 30))]})
    _install_stub(monkeypatch, stub)

    assert cli.main(["--log-level", "debug"]) == 0
    assert logging.getLogger("sensorquery").level == logging.DEBUG


@pytest.mark.parametrize("name, value", [("SENSOR_QUERY_BUS", "starship"), ("LOG_LEVEL", "LOUD")])
def test_invalid_settings_exit_two(monkeypatch, capsys, name, value):
    monkeypatch.setenv(name, value)
    stub = StubTransport()
    created = _install_stub(monkeypatch, stub)

    assert cli.main([]) == 2
    err = capsys.readouterr().err
    assert err.startswith("sensor-query: invalid settings:")
    assert name.lower() in err.lower()
    assert created == {}
