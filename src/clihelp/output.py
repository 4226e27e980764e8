"""Output formatting utilities for clihelp.

Bridges the print_*() helpers with the THAC0 verbosity system and
re-exports the log_lib public API for convenience imports.
"""

import sys

# Re-export log_lib public API — one-stop import for commands
from clihelp.lib.log_lib import (                     # noqa: F401
    OutputManager, init_output, get_output,
    Hint, register_hint, register_hints, get_hint,
    trace,
)


def print_text(text):
    """Write primary command output to stdout as-is.

    Not gated by verbosity: this is the result the user asked for.
    """
    sys.stdout.write(text)
    if not text.endswith("\n"):
        sys.stdout.write("\n")


def print_warn(msg):
    """Print a warning to stderr via OutputManager.warning().

    Shown down to -QQ, hidden at -QQQ (errors only) and -QQQQ.
    """
    get_output().warning(f"  [WARN] {msg}")


def print_error(msg):
    """Print an error message to stderr via OutputManager.error()."""
    get_output().error(f"  ERROR: {msg}")
