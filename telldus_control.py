#!/usr/bin/env python3
"""
Telldus Control CLI
Switch, dim and inspect Telldus devices and sensors through tdtool.
"""

import click

from core.executor import set_debug

# Import commands from command modules
from commands.setup import ColouredGroup, help_command, setup_command, configure_command
from commands.devices import devices_command, sensors_command, state_command
from commands.control import on_command, off_command, dim_command


@click.group(
    cls=ColouredGroup,
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 999
    }
)
@click.option('--tdtool', 'tdtool', help='Path to tdtool (overrides TDTOOL and config file)')
@click.option('--debug', is_flag=True, help='Echo each tdtool command line to stderr')
@click.version_option(version='0.1.0', prog_name='Telldus Control')
@click.pass_context
def cli(ctx, tdtool: str | None, debug: bool):
    """Telldus Control CLI - Manage your Telldus switches, dimmers and sensors.

Every command runs tdtool, so telldus-core must be installed.
tdtool is located via: --tdtool → TDTOOL env → ~/.telldus_control/config.json → PATH.

Use 'help' for a quick reference of all commands.
Use 'COMMAND -h' or 'COMMAND --help' for detailed help on a specific command."""
    ctx.ensure_object(dict)
    ctx.obj['tdtool'] = tdtool
    set_debug(debug)


# Register setup and help commands
cli.add_command(help_command)
cli.add_command(setup_command, name='setup')
cli.add_command(configure_command, name='configure')

# Register inspection commands
cli.add_command(devices_command)
cli.add_command(sensors_command)
cli.add_command(state_command)

# Register control commands
cli.add_command(on_command)
cli.add_command(off_command)
cli.add_command(dim_command)


if __name__ == '__main__':
    cli()
