"""Tests for enums and records in models/types.py"""

import dataclasses

import pytest
from models.types import (
    Device,
    DeviceType,
    LastSentCommand,
    Sensor,
    SensorProtocol,
    State,
    SwitchState,
)


class TestEnumParsing:
    """Enums are parsed case-insensitively with explicit unknown members."""

    def test_device_type_case_insensitive(self):
        assert DeviceType.from_name('device') is DeviceType.DEVICE
        assert DeviceType.from_name('GROUP') is DeviceType.GROUP
        assert DeviceType.from_name(' Dimmer ') is DeviceType.DIMMER

    def test_device_type_unrecognised(self):
        assert DeviceType.from_name('scene') is DeviceType.UNKNOWN
        assert DeviceType.from_name(None) is DeviceType.UNKNOWN

    def test_last_sent_command(self):
        assert LastSentCommand.from_name('dimmed') is LastSentCommand.DIMMED
        assert LastSentCommand.from_name('On') is LastSentCommand.ON

    def test_last_sent_command_unrecognised(self):
        assert LastSentCommand.from_name('TELEPORT') is LastSentCommand.NONE
        assert LastSentCommand.from_name('') is LastSentCommand.NONE
        assert LastSentCommand.from_name(None) is LastSentCommand.NONE

    def test_sensor_protocol(self):
        assert SensorProtocol.from_name('mandolyn') is SensorProtocol.MANDOLYN
        assert SensorProtocol.from_name('fineoffset') is SensorProtocol.UNKNOWN
        assert SensorProtocol.from_name(None) is None

    def test_switch_state_has_no_unknown(self):
        assert SwitchState.from_name('on') is SwitchState.ON
        with pytest.raises(ValueError, match="Unknown SwitchState"):
            SwitchState.from_name('dimmed')

    def test_lower_name(self):
        assert SwitchState.ON.lower_name() == 'on'
        assert SwitchState.OFF.lower_name() == 'off'


class TestDevice:
    """Tests for Device records."""

    def test_from_properties(self):
        device = Device.from_properties({
            'type': 'device', 'id': '3', 'name': 'Lamp',
            'lastsentcommand': 'DIMMED', 'dimlevel': '128',
        })
        assert device.id == 3
        assert device.name == 'Lamp'
        assert device.type is DeviceType.DEVICE
        assert device.last_sent_command is LastSentCommand.DIMMED
        assert device.properties['dimlevel'] == '128'

    def test_immutable(self):
        device = Device.from_properties({'id': '1'})
        with pytest.raises(dataclasses.FrozenInstanceError):
            device.name = 'Other'
        with pytest.raises(TypeError):
            device.properties['id'] = '2'

    def test_properties_copied(self):
        """Changing the source mapping does not affect the Device."""
        source = {'id': '1', 'name': 'Lamp'}
        device = Device.from_properties(source)
        source['name'] = 'Changed'
        assert device.properties['name'] == 'Lamp'
        assert device.name == 'Lamp'


class TestSensor:
    """Tests for Sensor records."""

    def test_from_properties(self):
        sensor = Sensor.from_properties({'protocol': 'Mandolyn', 'id': '11', 'model': 'temperature'})
        assert sensor.id == 11
        assert sensor.protocol is SensorProtocol.MANDOLYN
        assert sensor.name == 'temperature'


class TestState:
    """Tests for State factories and is_on."""

    def test_switch(self):
        assert State.switch(SwitchState.ON) == State(DeviceType.SWITCH, 'on')
        assert State.switch(SwitchState.ON).is_on is True
        assert State.switch(SwitchState.OFF).is_on is False

    def test_dimmer(self):
        assert State.dimmer(200) == State(DeviceType.DIMMER, '200')
        assert State.dimmer('200').is_on is True
        assert State.dimmer(0).is_on is False
        assert State.dimmer(None).value is None

    def test_unknown(self):
        state = State.unknown()
        assert state.type is DeviceType.UNKNOWN
        assert state.value == 'Unknown state'
        assert state.is_on is False


class TestHashing:
    """Records can be used in sets and as dict keys."""

    def test_device_hashable(self):
        first = Device.from_properties({'id': '1', 'name': 'Lamp', 'dimlevel': '10'})
        same = Device.from_properties({'id': '1', 'name': 'Lamp', 'dimlevel': '10'})
        assert hash(first) == hash(same)
        assert len({first, same}) == 1

    def test_devices_with_different_properties_not_equal(self):
        first = Device.from_properties({'id': '1', 'dimlevel': '10'})
        second = Device.from_properties({'id': '1', 'dimlevel': '20'})
        assert first != second
        assert len({first, second}) == 2

    def test_sensor_hashable(self):
        sensor = Sensor.from_properties({'protocol': 'mandolyn', 'id': '11', 'temperature': '21.5'})
        assert sensor in {sensor}
