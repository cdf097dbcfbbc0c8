"""Core functionality for Telldus control.

This package contains:
- exceptions: TelldusError and ParseError
- config: Configuration file and tdtool path resolution
- executor: Running tdtool as a subprocess
- repository: CliRepository class for device and sensor operations
"""
