"""Parsing of tdtool output.

Pure functions that turn captured tdtool stdout into records:
- parse_devices / parse_sensors: one record per line of tab-separated key=value pairs
- parse_switch_result: did an --on/--off command report success
- parse_dim_result: dim level confirmed by a --dim command
"""

import re

from core.exceptions import ParseError
from models.types import Device, Sensor

# The device id group only takes a single digit, as tdtool's output was
# originally matched. Multi-digit ids do not match.
DIM_RESULT_PATTERN = re.compile(r"Dimming device: (\d) (.*) to (\d{1,3}) - (.*)")

SWITCH_SUCCESS = 'success'


def parse_properties(line: str) -> dict[str, str]:
    """Split one line into its key=value pairs.

    Segments are tab-separated and split on the first '='. Segments without
    '=' are ignored. A repeated key keeps its last value.
    """
    properties = {}
    for segment in line.split('\t'):
        key, sep, value = segment.partition('=')
        if sep:
            properties[key] = value
    return properties


def _lines(text: str) -> list[str]:
    # Blank and whitespace-only lines carry no record
    return [line for line in text.splitlines() if line.strip()]


def parse_devices(text: str) -> list[Device]:
    """Parse --list-devices output into Device records, in line order."""
    return [Device.from_properties(parse_properties(line)) for line in _lines(text)]


def parse_sensors(text: str) -> list[Sensor]:
    """Parse --list-sensors output into Sensor records, in line order."""
    return [Sensor.from_properties(parse_properties(line)) for line in _lines(text)]


def parse_switch_result(text: str) -> bool:
    """Check whether an --on/--off confirmation ends in '- success'.

    Example: "Turning on device 3, Lamp - Success"
    """
    result = text.strip()
    index = result.rfind('- ')
    if index != -1:
        result = result[index + 2:]
    return result.strip().lower() == SWITCH_SUCCESS


def parse_dim_result(text: str) -> int:
    """Extract the confirmed dim level from a --dim confirmation.

    Example: "Dimming device: 3 Lamp to 128 - Success" gives 128.

    Raises:
        ParseError: If the text is not a dim confirmation
    """
    match = DIM_RESULT_PATTERN.search(text.strip())
    if not match:
        raise ParseError(f"Could not extract dim result from {text.strip()!r}")
    return int(match.group(3))
