"""Pytest configuration and fixtures for Telldus control tests."""

import pytest
from pathlib import Path

DEVICES_OUTPUT = (
    "type=device\tid=1\tname=Kitchen lamp\tlastsentcommand=ON\n"
    "type=device\tid=2\tname=Hallway\tlastsentcommand=OFF\n"
    "type=device\tid=3\tname=Living room\tlastsentcommand=DIMMED\tdimlevel=200\n"
    "type=group\tid=4\tname=Downstairs\tlastsentcommand=BELL\n"
)

SENSORS_OUTPUT = (
    "type=sensor\tprotocol=mandolyn\tmodel=temperaturehumidity\tid=11"
    "\ttemperature=21.5\thumidity=40\ttime=2016-01-01 12:00:00\tage=12\n"
    "type=sensor\tprotocol=fineoffset\tmodel=temperature\tid=135\ttemperature=-3.2\n"
)


class FakeRunner:
    """Stands in for core.executor.execute, recording every call."""

    def __init__(self, output='', error=None):
        self.output = output
        self.error = error
        self.calls = []

    def __call__(self, executable, *args, timeout=None):
        self.calls.append((executable, args, timeout))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def devices_output():
    return DEVICES_OUTPUT


@pytest.fixture
def sensors_output():
    return SENSORS_OUTPUT


@pytest.fixture
def fake_runner():
    """Return a factory for FakeRunner instances."""
    return FakeRunner
