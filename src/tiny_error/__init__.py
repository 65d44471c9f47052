"""Convert any error into a plain message that can be raised out of a program's entry point."""

from tiny_error.utils import ErrorMessage, converting_errors, propagate, run

__version__ = "0.1.0"

__all__ = [
    "ErrorMessage",
    "converting_errors",
    "propagate",
    "run",
]
