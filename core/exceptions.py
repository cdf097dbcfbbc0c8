"""Exceptions raised when talking to tdtool."""


class TelldusError(Exception):
    """A tdtool command or the parsing of its output failed."""


class ParseError(TelldusError):
    """tdtool output did not have the expected shape."""
