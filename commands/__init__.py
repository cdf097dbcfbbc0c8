"""CLI command modules.

This package contains:
- devices: Inspection commands (devices, sensors, state)
- control: Direct control commands (on, off, dim)
- setup: Setup, configure and help commands
"""
