"""User-facing message helpers for the embedlog CLI.

Consistent message formatting across commands. Errors go through the
default Logger at ERROR severity when it has a sink and lets ERROR
through, and to stderr otherwise.

Also re-exports the log_lib logger accessors for convenience imports.
"""

import sys

# Re-export log_lib public API — one-stop import for commands
from embedlog.lib.log_lib import (                     # noqa: F401
    Logger, init_log, get_log, trace,
)
from embedlog.lib.log_lib.levels import ERROR


def print_ok(msg):
    """Print a success message."""
    print(f"  [OK] {msg}")


def print_error(msg):
    """Print an error message.

    Routes through the default Logger when it would show an ERROR line,
    falls back to stderr otherwise.
    """
    log = get_log()
    if log.sink is not None and log.is_enabled(ERROR):
        log.error("%s\n", msg)
    else:
        print(f"ERROR: {msg}", file=sys.stderr)
