from tiny_error.utils.error_handlers import converting_errors, propagate, run
from tiny_error.utils.exceptions import ErrorMessage
from tiny_error.utils.logging import setup_logging

__all__ = [
    "setup_logging",
    "ErrorMessage",
    "converting_errors",
    "propagate",
    "run",
]
