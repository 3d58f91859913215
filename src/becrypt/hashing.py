"""
Thin adapter over the `bcrypt` library.

Exposes the three primitives the command line needs and converts the
library's exceptions into becrypt error types. Passwords are expected
to be at most 72 bytes already (see `becrypt.password`).
"""

import logging

import bcrypt

from .config import MAX_COST, MIN_COST
from .errors import CompareError, CostLookupError, GenerateError

logger = logging.getLogger(__name__)

# "$2" + optional minor version + "$" + two cost digits + "$"
_MIN_HASH_PREFIX = 6


def cost(hashed: str) -> int:
    """
    Extract the cost factor from a bcrypt hash.

    The bcrypt library has no accessor for this, so the header is decoded
    here with the same checks bcrypt applies when parsing a hash.

    Args:
        hashed: Bcrypt hash string

    Returns:
        int: The embedded cost, 4..31

    Raises:
        CostLookupError: If the header cannot be decoded
    """
    if len(hashed) < _MIN_HASH_PREFIX or not hashed.startswith("$2"):
        raise CostLookupError("bcrypt: hash is not a bcrypt hash")

    # Skip the optional minor version letter
    offset = 3 if hashed[2] == "$" else 4
    if hashed[offset - 1] != "$":
        raise CostLookupError("bcrypt: unsupported hash version")

    cost_field = hashed[offset : offset + 2]
    if len(cost_field) != 2 or not cost_field.isascii() or not cost_field.isdigit():
        raise CostLookupError(f"bcrypt: invalid cost field '{cost_field}'")

    rounds = int(cost_field)
    if not MIN_COST <= rounds <= MAX_COST:
        raise CostLookupError(
            f"bcrypt: cost {rounds} is outside allowed range ({MIN_COST},{MAX_COST})"
        )
    return rounds


def compare(hashed: str, password: bytes) -> bool:
    """
    Check a password against a bcrypt hash in constant time.

    Args:
        hashed: Bcrypt hash string
        password: Password bytes

    Returns:
        bool: True if the password matches the hash

    Raises:
        CompareError: If the library cannot process the hash
    """
    try:
        return bcrypt.checkpw(password, hashed.encode("utf-8"))
    except ValueError as e:
        raise CompareError(f"bcrypt: {e}") from e


def generate(password: bytes, rounds: int) -> str:
    """
    Hash a password with a fresh salt at the given cost.

    Args:
        password: Password bytes
        rounds: Cost factor, 4..31

    Returns:
        str: Bcrypt hashed password

    Raises:
        GenerateError: If the library refuses the input
    """
    logger.debug(f"Generating bcrypt hash with cost {rounds}")
    try:
        salt = bcrypt.gensalt(rounds=rounds)
        return bcrypt.hashpw(password, salt).decode("utf-8")
    except ValueError as e:
        raise GenerateError(f"bcrypt: {e}") from e
