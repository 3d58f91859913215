"""
Structural validation of bcrypt hash strings.

A well-formed hash looks like `$2b$12$<53 characters of salt+digest>`.
The checks here are purely syntactic and run before the hash is handed
to the bcrypt library, so that each kind of malformation gets its own
diagnostic and exit code.
"""

import logging

from .config import MAX_COST, MIN_COST
from .errors import ExitCode, MalformedHashError

logger = logging.getLogger(__name__)

DIGEST_LENGTH = 53
_DIGITS = "0123456789"


def validate_hash(hashed: str) -> None:
    """
    Check the structure of a bcrypt hash string.

    Args:
        hashed: Candidate hash string

    Raises:
        MalformedHashError: On the first rule the string violates
    """
    fields = hashed.split("$")
    if len(fields) != 4:
        raise MalformedHashError(
            f"Malformed hash: expected 4 '$'-separated fields, got {len(fields)}",
            ExitCode.HASH_FIELD_COUNT,
        )

    prefix, crypt_type, cost, digest = fields

    if prefix:
        raise MalformedHashError(
            "Malformed hash: must start with '$'", ExitCode.HASH_PREFIX
        )
    if not crypt_type:
        raise MalformedHashError(
            "Malformed hash: missing crypt type", ExitCode.HASH_TYPE_MISSING
        )
    if crypt_type[0] != "2":
        raise MalformedHashError(
            f"Malformed hash: crypt type '{crypt_type}' is not bcrypt",
            ExitCode.HASH_TYPE_NOT_BCRYPT,
        )
    if len(crypt_type) > 2:
        raise MalformedHashError(
            "Malformed hash: crypt type too long",
            ExitCode.HASH_TYPE_TOO_LONG,
        )
    if len(cost) != 2:
        raise MalformedHashError(
            "Malformed hash: cost must be 2 characters", ExitCode.HASH_COST_LENGTH
        )
    if cost[0] not in _DIGITS or cost[1] not in _DIGITS:
        raise MalformedHashError(
            "Malformed hash: cost must be 2 decimal digits",
            ExitCode.HASH_COST_NOT_DIGITS,
        )
    if not MIN_COST <= int(cost) <= MAX_COST:
        raise MalformedHashError(
            f"Malformed hash: cost {cost} outside {MIN_COST}..{MAX_COST}",
            ExitCode.HASH_COST_RANGE,
        )
    if len(digest) != DIGEST_LENGTH:
        raise MalformedHashError(
            f"Malformed hash: salt+digest must be {DIGEST_LENGTH} characters, "
            f"got {len(digest)}",
            ExitCode.HASH_DIGEST_LENGTH,
        )

    logger.debug(f"Hash passed validation (type {crypt_type}, cost {cost})")
