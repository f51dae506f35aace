"""Exceptions that end the editor session."""


class FatalError(RuntimeError):
    """Unrecoverable condition; the terminal is restored and the process exits."""


class GeometryError(FatalError):
    """The terminal size could not be determined."""


class RawModeError(FatalError):
    """The terminal could not be switched into (or out of) raw mode."""
