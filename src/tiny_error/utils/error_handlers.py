"""Helpers that turn arbitrary exceptions into ``ErrorMessage`` and report them. """

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Iterator, Optional, TextIO, Type, TypeVar

from tiny_error.utils.exceptions import ErrorMessage

# =============================================================================
#   Logger
# =============================================================================
logger = logging.getLogger(Path(__file__).stem)

F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_PREFIX = "Error: "
DEFAULT_EXIT_CODE = 1


# =============================================================================
#   Conversion at the propagation site
# =============================================================================
@contextmanager
def converting_errors(*error_types: Type[BaseException]) -> Iterator[None]:
    """
    Re-raise exceptions escaping the block as ``ErrorMessage``.

    Can be used as a ``with`` block or as a decorator. An ``ErrorMessage``
    raised inside the block is passed through as-is.

    Args:
        *error_types: Exception classes to convert. Defaults to ``Exception``,
            so ``KeyboardInterrupt`` and ``SystemExit`` are never converted.

    Raises:
        ErrorMessage: Carrying the description of the converted exception.
        TypeError: If one of ``error_types`` is not an exception class.
    """
    for error_type in error_types:
        if not (isinstance(error_type, type) and issubclass(error_type, BaseException)):
            raise TypeError(f"{error_type!r} is not an exception class")
    catch = error_types or (Exception,)

    try:
        yield
    except ErrorMessage:
        raise
    except catch as exc:
        raise ErrorMessage.from_error(exc) from None


def propagate(func: F) -> F:
    """Decorator converting every ``Exception`` raised by ``func`` into ``ErrorMessage``."""
    return converting_errors()(func)


# =============================================================================
#   Top-level reporter
# =============================================================================
def run(
    main_function: Callable[..., Optional[int]],
    *args: Any,
    prefix: str = DEFAULT_PREFIX,
    exit_code: int = DEFAULT_EXIT_CODE,
    stream: Optional[TextIO] = None,
    **kwargs: Any,
) -> int:
    """
    Runs a program's entry point and reports an ``ErrorMessage`` if it escapes.

    Args:
        main_function (Callable): The entry point to call with ``args`` and ``kwargs``.
        prefix (str): Text written before the message.
        exit_code (int): Status returned when an ``ErrorMessage`` is reported.
        stream (TextIO, optional): Where the message goes. Defaults to ``sys.stderr``.

    Returns:
        int: The entry point's own status (0 when it returns None), or
            ``exit_code`` when it raised ``ErrorMessage``. Any other exception
            propagates.
    """
    try:
        status = main_function(*args, **kwargs)
    except ErrorMessage as error:
        logger.debug("%s failed: %s", getattr(main_function, "__name__", main_function), error)
        return report(error, prefix=prefix, exit_code=exit_code, stream=stream)

    return 0 if status is None else status


def report(
    error: ErrorMessage,
    prefix: str = DEFAULT_PREFIX,
    exit_code: int = DEFAULT_EXIT_CODE,
    stream: Optional[TextIO] = None,
) -> int:
    """Write ``prefix`` and the message to ``stream`` (stderr by default) and return ``exit_code``."""
    out = stream if stream is not None else sys.stderr
    out.write(f"{prefix}{error!r}\n")
    out.flush()
    return exit_code
