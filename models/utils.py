"""Utility functions for Telldus control.

This module contains helper functions used by the CLI commands:
- get_repository: Build a CliRepository from config and CLI overrides
- format_state: Render a State for the terminal
- state_colour: Pick a display colour for a State
- similarity_score: Fuzzy string matching for command typo suggestions
- abort: Report a failure and exit non-zero
"""

import click

from core.config import load_config, resolve_tdtool_path, resolve_timeout
from core.repository import CliRepository
from models.types import DeviceType, State


def get_repository(tdtool: str | None = None) -> CliRepository:
    """Create a CliRepository using the configured tdtool.

    Args:
        tdtool: Explicit tdtool path, overriding env and config file

    Returns:
        CliRepository ready to run commands
    """
    config = load_config()
    path = tdtool or resolve_tdtool_path(config)
    return CliRepository(path, timeout=resolve_timeout(config))


def format_state(state: State) -> str:
    """Render a State as short human-readable text."""
    if state.type is DeviceType.SWITCH:
        return (state.value or 'unknown').upper()
    if state.type is DeviceType.DIMMER:
        if state.value is None:
            return "DIMMED (level unknown)"
        return f"DIMMED {state.value}/255"
    return state.value or "Unknown state"


def state_colour(state: State) -> str:
    if state.type is DeviceType.UNKNOWN:
        return 'yellow'
    return 'green' if state.is_on else 'red'


def echo_state(label: str, state: State):
    """Print a labelled, coloured State."""
    click.echo(f"{label}: " + click.style(format_state(state), fg=state_colour(state)))


def similarity_score(s1: str, s2: str) -> int:
    """Calculate similarity score between two strings.

    Returns:
        Similarity score:
        - 100: Exact match (case-insensitive)
        - 80: Prefix match
        - 60: Substring match
        - 0-50: Character sequence match (proportional to matching characters)
        - 0: No match
    """
    s1_lower = s1.lower()
    s2_lower = s2.lower()

    if s1_lower == s2_lower:
        return 100

    if s2_lower.startswith(s1_lower) or s1_lower.startswith(s2_lower):
        return 80

    if s1_lower in s2_lower or s2_lower in s1_lower:
        return 60

    # Character sequence matching
    matches = 0
    j = 0
    for char in s1_lower:
        while j < len(s2_lower):
            if s2_lower[j] == char:
                matches += 1
                j += 1
                break
            j += 1

    if matches > 0:
        score = int((matches / max(len(s1_lower), len(s2_lower))) * 50)
        return score if score > 20 else 0

    return 0


def abort(message: str):
    """Report a failed command on stderr and exit with status 1."""
    click.secho(f"✗ {message}", fg='red', err=True)
    raise click.exceptions.Exit(1)
