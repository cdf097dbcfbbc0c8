"""Data models, parsing and utility functions.

This package contains:
- types: Enums and the Device, Sensor and State records
- parser: Parsing of tdtool output into records
- utils: Utility functions (get_repository, format_state, etc.)
"""
