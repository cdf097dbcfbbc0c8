"""CliRepository class for device and sensor operations.

Each operation makes a single tdtool call and interprets its output through
models.parser. The repository keeps no state beyond the tdtool path, so every
result is a fresh snapshot.
"""

from typing import Callable

from core.config import DEFAULT_TIMEOUT
from core.exceptions import TelldusError
from core.executor import execute
from models.parser import parse_devices, parse_dim_result, parse_sensors, parse_switch_result
from models.types import Device, LastSentCommand, Sensor, State, SwitchState

MIN_DIM_LEVEL = 0
MAX_DIM_LEVEL = 255


class CliRepository:
    """Controls Telldus devices through the tdtool command-line program."""

    def __init__(self, tdtool: str, runner: Callable[..., str] = execute,
                 timeout: float = DEFAULT_TIMEOUT):
        """Initialise CliRepository.

        Args:
            tdtool: Path or name of the tdtool executable
            runner: Callable taking (executable, *args, timeout=...) and returning stdout
            timeout: Seconds to wait for each tdtool call
        """
        self.tdtool = tdtool
        self._runner = runner
        self.timeout = timeout

    def _run(self, *args) -> str:
        return self._runner(self.tdtool, *(str(arg) for arg in args), timeout=self.timeout)

    def get_devices(self) -> list[Device]:
        """List all devices registered with tdtool."""
        return parse_devices(self._run('--list-devices'))

    def get_sensors(self) -> list[Sensor]:
        """List all sensors tdtool has seen."""
        return parse_sensors(self._run('--list-sensors'))

    def get_device(self, device_id: int) -> Device:
        """Find a device by id.

        Raises:
            TelldusError: If no listed device has this id
        """
        for device in self.get_devices():
            if device.id == device_id:
                return device
        raise TelldusError("State unknown")

    def get_device_state(self, device_id: int) -> State:
        """Infer a device's state from the last command tdtool sent to it.

        Fetches the whole device list on every call.

        Raises:
            TelldusError: If no listed device has this id
        """
        device = self.get_device(device_id)
        command = device.last_sent_command
        if command is LastSentCommand.ON:
            return State.switch(SwitchState.ON)
        if command is LastSentCommand.OFF:
            return State.switch(SwitchState.OFF)
        if command is LastSentCommand.DIMMED:
            return State.dimmer(device.properties.get('dimlevel'))
        return State.unknown()

    def turn_device_on(self, device_id: int) -> State:
        """Switch a device on.

        Returns:
            Switch state 'on' if tdtool reported success, 'off' otherwise
        """
        success = parse_switch_result(self._run('--on', device_id))
        return State.switch(SwitchState.ON if success else SwitchState.OFF)

    def turn_device_off(self, device_id: int) -> State:
        """Switch a device off.

        Returns:
            Switch state 'off' if tdtool reported success, 'on' otherwise
        """
        success = parse_switch_result(self._run('--off', device_id))
        return State.switch(SwitchState.OFF if success else SwitchState.ON)

    def dim_device(self, device_id: int, level: int) -> State:
        """Dim a device to the given level (0-255).

        Returns:
            Dimmer state holding the level tdtool confirmed

        Raises:
            ValueError: If level is outside 0-255
            TelldusError: If tdtool fails or its confirmation cannot be parsed
        """
        if not MIN_DIM_LEVEL <= level <= MAX_DIM_LEVEL:
            raise ValueError(f"Dim level must be between {MIN_DIM_LEVEL} and {MAX_DIM_LEVEL}, got {level}")
        output = self._run('--dimlevel', level, '--dim', device_id)
        return State.dimmer(parse_dim_result(output))
