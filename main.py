import sys

from tiny_error.cli import main

# =============================================================================
#   Entry point
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
