"""Running tdtool as a subprocess.

Every tdtool invocation goes through execute(), which blocks until the
process exits and hands back its captured stdout.
"""

import subprocess

import click

from core.config import DEFAULT_TIMEOUT
from core.exceptions import TelldusError

_debug = False


def set_debug(enabled: bool):
    """Echo every tdtool command line to stderr when enabled."""
    global _debug
    _debug = enabled


def execute(executable: str, *args: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Run tdtool with the given arguments and return its stdout.

    Args:
        executable: Path or name of the tdtool executable
        *args: Command-line arguments, passed through unchanged
        timeout: Seconds to wait before giving up

    Returns:
        Captured standard output

    Raises:
        TelldusError: If tdtool cannot be started, times out, or exits non-zero
    """
    cmd = [executable, *args]
    if _debug:
        click.echo(f"$ {' '.join(cmd)}", err=True)

    try:
        result = subprocess.run(cmd,
                                capture_output=True,
                                text=True,
                                timeout=timeout)
    except FileNotFoundError as e:
        raise TelldusError(f"tdtool not found: {executable}") from e
    except subprocess.TimeoutExpired as e:
        raise TelldusError(f"{' '.join(cmd)} timed out after {timeout:g}s") from e
    except OSError as e:
        raise TelldusError(f"Failed to run {executable}: {e}") from e

    if result.returncode != 0:
        detail = (result.stderr or '').strip() or (result.stdout or '').strip()
        message = f"{' '.join(cmd)} failed with exit code {result.returncode}"
        if detail:
            message += f": {detail}"
        raise TelldusError(message)

    return result.stdout


def is_tdtool_available(executable: str) -> bool:
    """Check if tdtool can be run."""
    try:
        result = subprocess.run([executable, '--version'],
                                capture_output=True,
                                timeout=2)
        return result.returncode == 0
    except (subprocess.TimeoutExpired, OSError):
        return False
