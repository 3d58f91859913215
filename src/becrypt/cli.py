"""
becrypt Command-Line Entry Point

Generates bcrypt hashes, checks passwords against them and reports the
cost stored in a hash.

## Usage
    becrypt [<cost>]          Generate a hash from the password
    becrypt <hash> [-q]       Check the password against <hash>
    becrypt cost <hash>       Display the cost of <hash>
    becrypt help              Display the help text

## Error Handling
Components raise `BecryptError` subclasses. `main()` is the only place
that prints diagnostics and picks the exit status, so a run either
writes one complete result line to stdout or writes nothing there.
"""

import logging
import os
import sys
from typing import Optional, Sequence, TextIO

from . import __version__, hashing
from .config import DEFAULT_COST, MAX_COST, MIN_COST, Config
from .errors import BecryptError, CostRangeError, ExitCode, UsageError
from .invocation import Command, Invocation, parse_args
from .password import PASSWORD_MAX_LEN, get_password
from .validator import validate_hash

logger = logging.getLogger(__name__)


def usage(prog: str, default_cost: int = DEFAULT_COST) -> str:
    """Build the help text shown for `help` and usage errors."""
    return (
        f"{prog} v{__version__} - CLI tool for generating and checking bcrypt hashes\n"
        f"Usage:  {prog} [<cost>] | <hash> [-q] | cost <hash>\n"
        f"    {prog} [<cost>]:     Generate a hash from the password\n"
        f"        (optional <cost>: {MIN_COST}..{MAX_COST}, default: {default_cost})\n"
        f"    {prog} <hash> [-q]:  Check the password against <hash>\n"
        f"        (-q/--quiet: no output, only the exit status)\n"
        f"    {prog} cost <hash>:  Display the cost of <hash>\n"
        f"        (also -c/--cost)\n"
        f"    {prog} help:         Display this help text\n"
        f"        (also -h/--help)\n"
        f"  The password can be piped-in or prompted for, "
        f"and is cut off after {PASSWORD_MAX_LEN} bytes."
    )


def run(invocation: Invocation, config: Config, out: TextIO) -> ExitCode:
    """
    Execute a resolved invocation.

    Args:
        invocation: The resolved command
        config: Active configuration
        out: Stream receiving the result line

    Returns:
        ExitCode: OK, or MISMATCH for a password that does not match

    Raises:
        BecryptError: For any failure
    """
    if invocation.command is Command.COST:
        if invocation.target is None:
            raise UsageError("Missing hash for cost")
        validate_hash(invocation.target)
        print(hashing.cost(invocation.target), file=out)
        return ExitCode.OK

    if invocation.command is Command.CHECK:
        if invocation.target is None:
            raise UsageError("Missing hash to check against")
        validate_hash(invocation.target)
        password = get_password(config.prompt)
        matched = hashing.compare(invocation.target, password)
        logger.debug(f"Password match: {matched}")
        if not invocation.quiet:
            print("yes" if matched else "no", file=out)
        return ExitCode.OK if matched else ExitCode.MISMATCH

    if invocation.command is Command.GENERATE:
        rounds = invocation.cost
        if rounds is None or not MIN_COST <= rounds <= MAX_COST:
            raise CostRangeError(
                f"Argument for cost out of range ({MIN_COST}..{MAX_COST})"
            )
        password = get_password(config.prompt)
        print(hashing.generate(password, rounds), file=out)
        return ExitCode.OK

    raise ValueError(f"Unhandled command: {invocation.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the becrypt command.

    Orchestrates a single run:
    1.  Loads configuration and sets up logging.
    2.  Interprets the arguments.
    3.  Executes the command.
    4.  Maps any error to a stderr diagnostic and an exit status.

    Args:
        argv: Full argument vector including the program name
              (default: sys.argv)

    Returns:
        int: Process exit status
    """
    if argv is None:
        argv = sys.argv

    prog = os.path.basename(argv[0]) if argv else "becrypt"
    default_cost = DEFAULT_COST

    try:
        config = Config.from_env()
        config.setup_logging()
        default_cost = config.hashing.default_cost

        invocation = parse_args(argv[1:], default_cost=default_cost)
        if invocation.command is Command.HELP:
            print(usage(prog, default_cost), file=sys.stderr)
            return ExitCode.OK

        return run(invocation, config, sys.stdout)
    except BecryptError as e:
        if e.show_usage:
            print(usage(prog, default_cost), file=sys.stderr)
        print(f"Error: {e.message}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return ExitCode.INTERRUPTED


def entry_point() -> None:
    """Console script wrapper around `main()`."""
    sys.exit(int(main()))

