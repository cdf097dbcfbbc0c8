"""
Control commands for switching and dimming devices.

Includes on, off and dim.
"""

import click
from core.exceptions import TelldusError
from core.repository import MAX_DIM_LEVEL, MIN_DIM_LEVEL
from models.types import SwitchState
from models.utils import abort, echo_state, get_repository


def _switch(ctx, device_id: int, target: SwitchState):
    repository = get_repository((ctx.obj or {}).get('tdtool'))
    try:
        if target is SwitchState.ON:
            state = repository.turn_device_on(device_id)
        else:
            state = repository.turn_device_off(device_id)
    except TelldusError as e:
        abort(f"Failed to turn device {device_id} {target.lower_name()}: {e}")

    echo_state(f"Device {device_id}", state)
    if state.value != target.lower_name():
        abort(f"tdtool did not confirm device {device_id} turned {target.lower_name()}")


@click.command(name='on')
@click.argument('device_id', type=int)
@click.pass_context
def on_command(ctx, device_id: int):
    """Turn a device ON.

    \b
    Examples:
      telldus-control on 3
    """
    _switch(ctx, device_id, SwitchState.ON)


@click.command(name='off')
@click.argument('device_id', type=int)
@click.pass_context
def off_command(ctx, device_id: int):
    """Turn a device OFF.

    \b
    Examples:
      telldus-control off 3
    """
    _switch(ctx, device_id, SwitchState.OFF)


@click.command(name='dim')
@click.argument('device_id', type=int)
@click.argument('level', type=click.IntRange(MIN_DIM_LEVEL, MAX_DIM_LEVEL))
@click.pass_context
def dim_command(ctx, device_id: int, level: int):
    """Dim a device to LEVEL (0-255).

    \b
    Examples:
      telldus-control dim 3 128
      telldus-control dim 3 0
    """
    repository = get_repository((ctx.obj or {}).get('tdtool'))
    try:
        state = repository.dim_device(device_id, level)
    except TelldusError as e:
        abort(f"Failed to dim device {device_id}: {e}")

    echo_state(f"Device {device_id}", state)
