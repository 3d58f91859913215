"""
Command-line interpretation.

Tokens are consumed left to right by a small state machine:

    none --cost/-c/--cost--> cost --<hash>--> cost (target set)
    none --<digits>--------> generate
    none ---q/--quiet------> check (quiet)
    none --<other>---------> check (target set)
    check ---q/--quiet-----> check
    check --<hash>---------> check (target set, once)

Any token without a transition is a usage error. A help token anywhere
wins over everything else.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .config import DEFAULT_COST
from .errors import CostRangeError, UsageError
from .utils import sanitize_for_log

logger = logging.getLogger(__name__)

HELP_TOKENS = frozenset({"help", "-h", "--help"})
COST_TOKENS = frozenset({"cost", "-c", "--cost"})
QUIET_TOKENS = frozenset({"-q", "--quiet"})

_NUMBER = re.compile(r"[0-9]+")
# Longer digit strings cannot be a valid cost
_MAX_COST_DIGITS = 9


class Command(Enum):
    HELP = "help"
    COST = "cost"
    CHECK = "check"
    GENERATE = "generate"


@dataclass(frozen=True)
class Invocation:
    """What a single run of the tool should do."""

    command: Command
    cost: Optional[int] = None
    target: Optional[str] = None
    quiet: bool = False


def parse_args(args: Sequence[str], default_cost: int = DEFAULT_COST) -> Invocation:
    """
    Resolve command-line tokens into an Invocation.

    Args:
        args: Tokens after the program name
        default_cost: Cost used when no command is given at all

    Returns:
        Invocation: The resolved command

    Raises:
        UsageError: For excess, missing or ambiguous arguments
    """
    if any(arg in HELP_TOKENS for arg in args):
        return Invocation(Command.HELP)

    command: Optional[Command] = None
    cost: Optional[int] = None
    target: Optional[str] = None
    quiet = False

    for arg in args:
        if command is None:
            if arg in COST_TOKENS:
                command = Command.COST
            elif _NUMBER.fullmatch(arg):
                if len(arg) > _MAX_COST_DIGITS:
                    raise CostRangeError("Argument for cost out of range")
                command, cost = Command.GENERATE, int(arg)
            elif arg in QUIET_TOKENS:
                command, quiet = Command.CHECK, True
            else:
                command, target = Command.CHECK, arg
        elif command is Command.COST:
            if target is not None:
                raise UsageError("Too many arguments for cost")
            target = arg
        elif command is Command.CHECK:
            if arg in QUIET_TOKENS:
                quiet = True
            elif target is None:
                target = arg
            else:
                raise UsageError(
                    f"Too many arguments for check: {sanitize_for_log(arg)}"
                )
        else:
            raise UsageError(f"Too many arguments for {command.value}")

    if command is None:
        return Invocation(Command.GENERATE, cost=default_cost)

    if command is Command.COST and target is None:
        raise UsageError("Missing hash for cost")
    if command is Command.CHECK and target is None:
        raise UsageError("Missing hash to check against")

    invocation = Invocation(command, cost=cost, target=target, quiet=quiet)
    logger.debug(
        f"Resolved command {invocation.command.value} "
        f"(cost={invocation.cost}, "
        f"target={sanitize_for_log(invocation.target)}, "
        f"quiet={invocation.quiet})"
    )
    return invocation
