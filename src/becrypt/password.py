"""
Password acquisition for hashing and checking.

The password is read from stdin when it is piped in, otherwise it is
prompted for on the terminal without echo. Either way it is cut off at
bcrypt's 72-byte input limit.
"""

import getpass
import logging
import sys
from typing import BinaryIO, Optional, TextIO

from .config import PromptConfig
from .errors import PasswordInputError, UsageError

logger = logging.getLogger(__name__)

PASSWORD_MAX_LEN = 72


def truncate_password(password: bytes) -> bytes:
    """Cut a password down to at most PASSWORD_MAX_LEN bytes."""
    return password[: min(len(password), PASSWORD_MAX_LEN)]


def read_piped_password(stream: BinaryIO) -> bytes:
    """
    Read a password from a non-interactive byte stream.

    Exactly one trailing newline byte is stripped, if present.
    """
    try:
        password = stream.read()
    except OSError as e:
        raise PasswordInputError(f"Failed to read password from stdin: {e}") from e

    if password.endswith(b"\n"):
        password = password[:-1]
    return password


def prompt_password(prompt: PromptConfig, stream: Optional[TextIO] = None) -> bytes:
    """
    Prompt for a password on the terminal.

    Empty entries are re-prompted, and so are confirmation mismatches when
    confirmation is enabled, up to `prompt.attempts` tries in total.

    Args:
        prompt: Prompt settings
        stream: Where prompts and notices are written (default: stderr)

    Returns:
        bytes: UTF-8 encoded password

    Raises:
        UsageError: If no usable password was entered
        PasswordInputError: If the terminal could not be read
    """
    if stream is None:
        stream = sys.stderr

    for attempt in range(1, prompt.attempts + 1):
        try:
            password = getpass.getpass("Enter password: ", stream=stream)
            if not password:
                print("Password can't be empty", file=stream)
                continue

            if prompt.confirm:
                confirmation = getpass.getpass("Confirm password: ", stream=stream)
                if confirmation != password:
                    print("Passwords not the same", file=stream)
                    continue
        except (OSError, EOFError) as e:
            raise PasswordInputError(f"Failed to read password: {e}") from e

        logger.debug(f"Password entered on attempt {attempt}")
        return password.encode("utf-8")

    raise UsageError("Password missing")


def get_password(
    prompt: PromptConfig,
    stdin: Optional[TextIO] = None,
    stream: Optional[TextIO] = None,
) -> bytes:
    """
    Obtain the password to hash or check.

    Args:
        prompt: Prompt settings for interactive use
        stdin: Input stream (default: sys.stdin)
        stream: Where interactive prompts go (default: sys.stderr)

    Returns:
        bytes: Password truncated to PASSWORD_MAX_LEN bytes
    """
    if stdin is None:
        stdin = sys.stdin
        if stdin is None:
            raise PasswordInputError("Failed to read password: stdin is closed")

    if stdin.isatty():
        password = prompt_password(prompt, stream)
    else:
        logger.debug("Reading password from piped stdin")
        password = read_piped_password(stdin.buffer)

    return truncate_password(password)
