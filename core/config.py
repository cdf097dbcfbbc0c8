"""Configuration management and tdtool discovery.

This module handles:
- Loading/saving the user configuration file
- Resolving which tdtool executable to run
- Resolving the command timeout
"""

import json
import os
import shutil
from pathlib import Path

import click

# Configuration file path
USER_CONFIG_FILE = Path.home() / '.telldus_control' / 'config.json'

# Environment overrides
TDTOOL_ENV = 'TDTOOL'
TIMEOUT_ENV = 'TDTOOL_TIMEOUT'

DEFAULT_TDTOOL = 'tdtool'
DEFAULT_TIMEOUT = 10

DEFAULT_CONFIG = {
    'tdtool': None,
    'timeout': DEFAULT_TIMEOUT,
}


def load_config() -> dict:
    """Load configuration from the user config file.

    A corrupt or unreadable file is reported on stderr and ignored.

    Returns:
        Dict with 'tdtool' and 'timeout' keys, defaults filled in
    """
    config = dict(DEFAULT_CONFIG)
    if USER_CONFIG_FILE.exists():
        try:
            with open(USER_CONFIG_FILE, 'r') as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            click.echo(f"Warning: Ignoring unreadable config {USER_CONFIG_FILE}: {e}", err=True)
            return config
        if not isinstance(stored, dict):
            click.echo(f"Warning: Ignoring config {USER_CONFIG_FILE}: expected a JSON object", err=True)
            return config
        config.update(stored)
    return config


def save_config(config: dict):
    """Save configuration to file.

    Args:
        config: Configuration dict to save
    """
    USER_CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

    with open(USER_CONFIG_FILE, 'w') as f:
        json.dump(config, f, indent=2)


def resolve_tdtool_path(config: dict | None = None) -> str:
    """Work out which tdtool executable to run.

    Priority order:
    1. TDTOOL environment variable
    2. 'tdtool' key in the config file
    3. tdtool found on PATH
    4. Bare 'tdtool' (left to the OS to resolve)

    Args:
        config: Already loaded config dict (loaded from file if None)
    """
    env_path = os.environ.get(TDTOOL_ENV)
    if env_path:
        return env_path

    if config is None:
        config = load_config()
    if config.get('tdtool'):
        return config['tdtool']

    return shutil.which(DEFAULT_TDTOOL) or DEFAULT_TDTOOL


def resolve_timeout(config: dict | None = None) -> float:
    """Work out the tdtool command timeout in seconds.

    TDTOOL_TIMEOUT wins over the config file. Values that are not positive
    numbers fall back to DEFAULT_TIMEOUT.
    """
    if config is None:
        config = load_config()

    for candidate in (os.environ.get(TIMEOUT_ENV), config.get('timeout')):
        if candidate is None or candidate == '':
            continue
        try:
            timeout = float(candidate)
        except (TypeError, ValueError):
            continue
        if timeout > 0:
            return timeout

    return DEFAULT_TIMEOUT
