"""Type definitions for Telldus control.

This module provides the enumerations and records built from tdtool output.
All records are point-in-time snapshots: they are created fresh from every
tdtool call and never mutated.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class _NamedEnum(Enum):
    """Enum parsed case-insensitively from tdtool's vocabulary."""

    @classmethod
    def _fallback(cls):
        return None

    @classmethod
    def from_name(cls, name: str | None):
        """Look up a member by name, ignoring case and surrounding whitespace.

        Unrecognised names map to the enum's explicit unknown member, or
        raise ValueError for enums that have none.
        """
        if name is not None:
            member = cls.__members__.get(name.strip().upper())
            if member is not None:
                return member
        fallback = cls._fallback()
        if fallback is None:
            raise ValueError(f"Unknown {cls.__name__}: {name!r}")
        return fallback

    def lower_name(self) -> str:
        return self.name.lower()


class DeviceType(_NamedEnum):
    """Kind of device, as listed by tdtool or inferred for a State."""
    DEVICE = 'device'
    GROUP = 'group'
    SWITCH = 'switch'
    DIMMER = 'dimmer'
    UNKNOWN = 'unknown'

    @classmethod
    def _fallback(cls):
        return cls.UNKNOWN


class SwitchState(_NamedEnum):
    ON = 'on'
    OFF = 'off'


class LastSentCommand(_NamedEnum):
    """Most recent command tdtool recorded as sent to a device."""
    ON = 'on'
    OFF = 'off'
    DIMMED = 'dimmed'
    BELL = 'bell'
    TOGGLE = 'toggle'
    LEARN = 'learn'
    UP = 'up'
    DOWN = 'down'
    STOP = 'stop'
    EXECUTE = 'execute'
    NONE = 'none'

    @classmethod
    def _fallback(cls):
        return cls.NONE


class SensorProtocol(_NamedEnum):
    MANDOLYN = 'mandolyn'
    UNKNOWN = 'unknown'

    @classmethod
    def from_name(cls, name: str | None):
        if name is None:
            return None
        return super().from_name(name)

    @classmethod
    def _fallback(cls):
        return cls.UNKNOWN


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _freeze(properties: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(properties))


@dataclass(frozen=True)
class Device:
    """A switch, dimmer or group registered with tdtool."""
    id: int | None
    name: str | None
    type: DeviceType
    properties: Mapping[str, str] = field(default_factory=dict, hash=False)
    last_sent_command: LastSentCommand = LastSentCommand.NONE

    def __post_init__(self):
        object.__setattr__(self, 'properties', _freeze(self.properties))

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> 'Device':
        """Build a Device from one parsed --list-devices line."""
        return cls(
            id=_parse_int(properties.get('id')),
            name=properties.get('name'),
            type=DeviceType.from_name(properties.get('type')),
            properties=properties,
            last_sent_command=LastSentCommand.from_name(properties.get('lastsentcommand')),
        )


@dataclass(frozen=True)
class Sensor:
    """A read-only reporting unit, e.g. a thermometer."""
    id: int | None
    protocol: SensorProtocol | None
    name: str | None
    properties: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'properties', _freeze(self.properties))

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> 'Sensor':
        """Build a Sensor from one parsed --list-sensors line.

        tdtool lists sensors by model rather than name, so 'model' stands in
        when there is no 'name' field.
        """
        return cls(
            id=_parse_int(properties.get('id')),
            protocol=SensorProtocol.from_name(properties.get('protocol')),
            name=properties.get('name', properties.get('model')),
            properties=properties,
        )


@dataclass(frozen=True)
class State:
    """Inferred operational state of a device.

    value is 'on'/'off' for switches, the dim level for dimmers and a
    diagnostic message otherwise.
    """
    type: DeviceType
    value: str | None

    @classmethod
    def switch(cls, state: SwitchState) -> 'State':
        return cls(DeviceType.SWITCH, state.lower_name())

    @classmethod
    def dimmer(cls, level: int | str | None) -> 'State':
        return cls(DeviceType.DIMMER, None if level is None else str(level))

    @classmethod
    def unknown(cls, message: str = 'Unknown state') -> 'State':
        return cls(DeviceType.UNKNOWN, message)

    @property
    def is_on(self) -> bool:
        if self.type is DeviceType.SWITCH:
            return self.value == SwitchState.ON.lower_name()
        if self.type is DeviceType.DIMMER:
            return _parse_int(self.value) not in (None, 0)
        return False
