"""
Inspection commands for devices and sensors.

Includes devices, sensors and state.
"""

import click
from core.exceptions import TelldusError
from models.utils import abort, echo_state, get_repository


@click.command(name='devices')
@click.pass_context
def devices_command(ctx):
    """List devices registered with tdtool.

    \b
    Examples:
      telldus-control devices
    """
    repository = get_repository((ctx.obj or {}).get('tdtool'))
    try:
        devices = repository.get_devices()
    except TelldusError as e:
        abort(str(e))

    if not devices:
        click.echo("No devices found.")
        return

    name_width = max(len(d.name or '') for d in devices)
    name_width = max(name_width, len('Name'))

    click.echo()
    click.secho(f"{'ID':>4}  {'Name':<{name_width}}  {'Type':<8}  Last command", fg='cyan', bold=True)
    for device in devices:
        device_id = '?' if device.id is None else str(device.id)
        command = device.last_sent_command.name
        if device.properties.get('dimlevel') is not None and command == 'DIMMED':
            command = f"{command} ({device.properties['dimlevel']})"
        click.echo(f"{device_id:>4}  {device.name or '':<{name_width}}  "
                   f"{device.type.lower_name():<8}  {command}")
    click.echo()


@click.command(name='sensors')
@click.pass_context
def sensors_command(ctx):
    """List sensors and their latest readings."""
    repository = get_repository((ctx.obj or {}).get('tdtool'))
    try:
        sensors = repository.get_sensors()
    except TelldusError as e:
        abort(str(e))

    if not sensors:
        click.echo("No sensors found.")
        return

    click.echo()
    for sensor in sensors:
        protocol = sensor.protocol.lower_name() if sensor.protocol else 'unknown'
        click.secho(f"Sensor {sensor.id}: {sensor.name or 'Unnamed'} ({protocol})", fg='cyan', bold=True)
        for key, value in sensor.properties.items():
            if key in ('type', 'id', 'protocol', 'model', 'name'):
                continue
            click.echo(f"  {key:<12} {value}")
        click.echo()


@click.command(name='state')
@click.argument('device_id', type=int)
@click.pass_context
def state_command(ctx, device_id: int):
    """Show the state of a device, inferred from its last command.

    \b
    Examples:
      telldus-control state 3
    """
    repository = get_repository((ctx.obj or {}).get('tdtool'))
    try:
        state = repository.get_device_state(device_id)
    except TelldusError as e:
        abort(f"Device {device_id}: {e}")

    echo_state(f"Device {device_id}", state)
