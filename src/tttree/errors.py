"""
Exception types.

All of them signal a broken caller contract, not a transient condition.
"""


class TicTacToeError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(TicTacToeError, ValueError):
    """Unrecognized symbol, difficulty or configuration value."""


class BoundsError(TicTacToeError, IndexError):
    """Board access outside the grid."""


class LogicError(TicTacToeError, RuntimeError):
    """Operation invoked in a state where it is undefined."""
