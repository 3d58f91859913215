"""
Error types for becrypt.

Every failure is raised as a `BecryptError` subclass carrying the process
exit status it maps to. Only the entry point (`becrypt.cli.main`) turns
these into stderr output and an exit code.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit statuses."""

    OK = 0
    MISMATCH = 1
    USAGE = 2
    COST_LOOKUP = 3
    GENERATE = 4
    PASSWORD_INPUT = 5
    COMPARE = 6
    COST_RANGE = 7
    CONFIG = 9
    HASH_FIELD_COUNT = 10
    HASH_PREFIX = 11
    HASH_TYPE_MISSING = 12
    HASH_TYPE_NOT_BCRYPT = 13
    HASH_TYPE_TOO_LONG = 14
    HASH_COST_LENGTH = 15
    HASH_COST_NOT_DIGITS = 16
    HASH_COST_RANGE = 17
    HASH_DIGEST_LENGTH = 18
    INTERRUPTED = 130


class BecryptError(Exception):
    """Base class for all becrypt failures."""

    exit_code: ExitCode = ExitCode.USAGE
    show_usage: bool = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(BecryptError):
    """Malformed, ambiguous or excess command-line arguments."""

    exit_code = ExitCode.USAGE
    show_usage = True


class CostRangeError(UsageError):
    """Requested cost is outside the range bcrypt accepts."""

    exit_code = ExitCode.COST_RANGE


class ConfigError(BecryptError):
    """Configuration file could not be loaded."""

    exit_code = ExitCode.CONFIG


class PasswordInputError(BecryptError):
    """Reading the password from stdin or the terminal failed."""

    exit_code = ExitCode.PASSWORD_INPUT


class MalformedHashError(BecryptError):
    """A hash string failed structural validation.

    Unlike the other errors the exit code is per instance, one for each
    validation rule.
    """

    def __init__(self, message: str, exit_code: ExitCode):
        super().__init__(message)
        self.exit_code = exit_code


class HashingError(BecryptError):
    """The bcrypt library rejected an operation."""


class CostLookupError(HashingError):
    exit_code = ExitCode.COST_LOOKUP


class CompareError(HashingError):
    exit_code = ExitCode.COMPARE


class GenerateError(HashingError):
    exit_code = ExitCode.GENERATE
