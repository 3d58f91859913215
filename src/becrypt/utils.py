"""
Utility Functions

Helpers for keeping log output trustworthy when it includes
command-line input.
"""

from typing import Any

_MAX_LOGGED_LENGTH = 80


def sanitize_for_log(input_str: Any) -> str:
    """
    Sanitize a value for safe logging.

    Newlines and carriage returns are escaped so that a crafted argument
    cannot forge extra log entries (CWE-117), and long values are cut
    down so a pasted blob does not flood the log.

    Args:
        input_str: The input string (or object convertible to string).

    Returns:
        A single-line string safe for logging.
    """
    if input_str is None:
        return "None"

    s = str(input_str)
    s = s.replace("\n", "\\n").replace("\r", "\\r")

    if len(s) > _MAX_LOGGED_LENGTH:
        s = s[:_MAX_LOGGED_LENGTH] + "..."

    return s
