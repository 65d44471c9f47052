"""
Example program built on ``ErrorMessage``: prints the file named by its only argument.

Usage:
    tiny-error-cat example/file/path.txt

On failure it prints a single line of prose and exits with a non-zero status:
    Error: Invalid input
    Correct Usage: `tiny-error-cat example/file/path.txt`

    Error: [Errno 2] No such file or directory: 'example/file/path.txt'
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from tiny_error.config import Config
from tiny_error.utils import ErrorMessage, converting_errors, propagate, run, setup_logging
from tiny_error.utils.error_handlers import report

# =============================================================================
#   Global Variables
# =============================================================================
logger = logging.getLogger(Path(__file__).stem)

PROGRAM_NAME = "tiny-error-cat"
USAGE = f"Correct Usage: `{PROGRAM_NAME} example/file/path.txt`"


# =============================================================================
#   Steps
# =============================================================================
def get_path(args: Sequence[str]) -> Path:
    """Return the single path argument.

    Raises:
        ErrorMessage: If no argument or more than one was passed.
    """
    if len(args) != 1:
        raise ErrorMessage(f"Invalid input\n{USAGE}")
    return Path(args[0])


@propagate
def read_file(path: Path) -> str:
    """Read ``path`` as UTF-8 text; I/O and decoding failures become ``ErrorMessage``."""
    logger.info("Reading %s", path)
    return path.read_text(encoding="utf-8")


def cat(args: Sequence[str]) -> None:
    """Write the file named by the single argument to stdout."""
    path = get_path(args)
    content = read_file(path)
    sys.stdout.write(content)
    sys.stdout.flush()


# =============================================================================
#   Entry point
# =============================================================================
def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    load_dotenv()

    try:
        with converting_errors():
            configuration = Config.load()
    except ErrorMessage as error:
        return report(error)

    setup_logging(
        log_dir=configuration.logging.resolved_log_dir,
        log_level=configuration.logging.log_level,
        main_function_name=PROGRAM_NAME,
        file_log_level=configuration.logging.file_log_level,
        file_log_file_size_mb=configuration.logging.file_log_file_size_mb,
        file_log_max_files=configuration.logging.file_log_max_files,
    )

    return run(
        cat,
        args,
        prefix=configuration.report.prefix,
        exit_code=configuration.report.exit_code,
    )


if __name__ == "__main__":
    sys.exit(main())
