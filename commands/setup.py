"""
Setup and help commands for Telldus control CLI.

Contains custom Click group class for coloured help output and typo suggestions.
"""

import os
from dataclasses import dataclass

import click
from core.config import (
    TDTOOL_ENV,
    TIMEOUT_ENV,
    USER_CONFIG_FILE,
    load_config,
    resolve_tdtool_path,
    resolve_timeout,
    save_config,
)
from core.executor import is_tdtool_available
from models.utils import similarity_score


@dataclass(frozen=True)
class CommandSection:
    """Represents a section in the help command."""
    name: str
    commands: list[tuple[str, str]]


class ColouredGroup(click.Group):
    """Custom Group class that adds colour to help output and suggests similar commands."""

    def resolve_command(self, ctx, args):
        """Resolve command with suggestions for typos."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if 'No such command' in str(e):
                cmd_name = args[0] if args else ''
                suggestions = self._get_suggestions(ctx, cmd_name)

                if suggestions:
                    error_msg = f"No such command '{cmd_name}'.\n\n"
                    error_msg += click.style("Did you mean one of these?\n", fg='yellow')
                    for suggestion in suggestions:
                        error_msg += click.style(f"  • {suggestion}\n", fg='green')
                    raise click.UsageError(error_msg, ctx) from e
            raise

    def _get_suggestions(self, ctx, cmd_name, max_suggestions=3):
        """Get command suggestions based on similarity."""
        if not cmd_name:
            return []

        suggestions = []
        for command in self.list_commands(ctx):
            cmd_obj = self.get_command(ctx, command)
            if cmd_obj and not cmd_obj.hidden:
                score = similarity_score(cmd_name, command)
                if score > 0:
                    suggestions.append((score, command))

        suggestions.sort(reverse=True, key=lambda x: x[0])
        return [cmd for score, cmd in suggestions[:max_suggestions]]

    def format_usage(self, ctx, formatter):
        """Format the usage line with colour."""
        formatter.write_paragraph()
        formatter.write_text(
            click.style('Usage: ', fg='cyan', bold=True) +
            click.style(f'{ctx.command_path} [OPTIONS] COMMAND [ARGS]...', fg='white')
        )

    def format_options(self, ctx, formatter):
        """Format options with colour."""
        opts = []
        for param in self.get_params(ctx):
            rv = param.get_help_record(ctx)
            if rv is not None:
                opts.append(rv)

        if opts:
            formatter.write_paragraph()
            formatter.write_text(click.style('Options:', fg='yellow', bold=True))
            with formatter.indentation():
                for opt_name, opt_help in opts:
                    formatter.write_text(
                        click.style(opt_name, fg='green') + '  ' +
                        click.style(opt_help, fg='white')
                    )

    def format_commands(self, ctx, formatter):
        """Format commands with colour."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd.get_short_help_str(limit=500)))

        if commands:
            formatter.write_paragraph()
            formatter.write_text(click.style('Commands:', fg='yellow', bold=True))

            max_len = max(max(len(cmd[0]) for cmd in commands), 12)

            with formatter.indentation():
                for subcommand, help_text in commands:
                    formatter.write_text(
                        click.style(subcommand.ljust(max_len), fg='green') + '  ' +
                        click.style(help_text, fg='white', dim=True)
                    )


COMMAND_SECTIONS = [
    CommandSection(
        name="DEVICES & SENSORS",
        commands=[
            ("devices", "List devices with type and last command"),
            ("sensors", "List sensors and their readings"),
            ("state <id>", "Show the inferred state of a device"),
        ]
    ),
    CommandSection(
        name="CONTROL",
        commands=[
            ("on <id>", "Turn a device on"),
            ("off <id>", "Turn a device off"),
            ("dim <id> <0-255>", "Dim a device"),
        ]
    ),
    CommandSection(
        name="CONFIGURATION",
        commands=[
            ("setup", "Show tdtool configuration and check it runs"),
            ("configure --tdtool <path>", "Save the tdtool path to the config file"),
            ("configure --timeout <secs>", "Save the command timeout"),
        ]
    ),
]


@click.command(name='help')
def help_command():
    """Display help and common commands."""
    click.echo()
    click.secho("Telldus Control - Quick Reference", fg='cyan', bold=True)
    click.echo()

    for section in COMMAND_SECTIONS:
        click.secho(section.name, fg='yellow', bold=True)
        for cmd, desc in section.commands:
            click.echo("  ", nl=False)
            click.secho(cmd, fg='green', nl=False)
            click.echo(" " * (30 - len(cmd)) + "  " + desc)
        click.echo()

    click.secho("For detailed help on any command:", fg='cyan')
    click.echo(f"  telldus-control {click.style('<command> -h', fg='white', bold=True)}")
    click.echo()


@click.command()
@click.pass_context
def setup_command(ctx):
    """Show current tdtool configuration and check that it runs.

    \b
    tdtool path sources (priority order):
    1. --tdtool option
    2. TDTOOL environment variable
    3. Config file (~/.telldus_control/config.json)
    4. tdtool on PATH
    """
    config = load_config()
    override = (ctx.obj or {}).get('tdtool')
    tdtool = override or resolve_tdtool_path(config)

    click.echo()
    click.secho("=== tdtool Configuration ===", fg='cyan', bold=True)
    click.echo()

    if override:
        source = '--tdtool option'
    elif os.environ.get(TDTOOL_ENV):
        source = f'{TDTOOL_ENV} environment variable'
    elif config.get('tdtool'):
        source = 'config file'
    else:
        source = 'PATH lookup'

    click.echo(f"   tdtool:      {tdtool} ({source})")
    click.echo(f"   Timeout:     {resolve_timeout(config):g}s (set {TIMEOUT_ENV} to override)")
    if USER_CONFIG_FILE.exists():
        click.echo(f"   Config:      {USER_CONFIG_FILE}")
    else:
        click.echo(f"   Config:      {USER_CONFIG_FILE} (does not exist)")

    if is_tdtool_available(tdtool):
        click.echo(f"   Status:      {click.style('✓ tdtool runs', fg='green')}")
    else:
        click.echo(f"   Status:      {click.style('✗ tdtool could not be run', fg='red')}")
        click.echo(f"   Note:        Install telldus-core or run 'configure --tdtool <path>'")
    click.echo()


@click.command()
@click.option('--tdtool', 'tdtool_path', help='Path to the tdtool executable')
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True), help='Seconds to wait for tdtool')
def configure_command(tdtool_path: str | None, timeout: float | None):
    """Save tdtool settings to the local config file.

    \b
    Examples:
      telldus-control configure --tdtool /usr/bin/tdtool
      telldus-control configure --timeout 20
    """
    if tdtool_path is None and timeout is None:
        raise click.UsageError("Please specify --tdtool and/or --timeout")

    config = load_config()
    if tdtool_path is not None:
        config['tdtool'] = tdtool_path
    if timeout is not None:
        config['timeout'] = timeout
    save_config(config)

    click.secho(f"✓ Configuration saved to {USER_CONFIG_FILE}", fg='green')
    if tdtool_path is not None and not is_tdtool_available(tdtool_path):
        click.secho(f"⚠ {tdtool_path} could not be run", fg='yellow')
