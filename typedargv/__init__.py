import os
import sys
import logging

from typing import Callable, Optional, Sequence

from . import const, convert, vt100
from .convert import lexicalCast, toString
from .errors import (
    ArgvError,
    ConversionError,
    DuplicateOptionError,
    EmptyInputError,
    InvalidOptionError,
    MissingRequiredOptionError,
    MissingValueError,
    UnknownOptionError,
)
from .options import FlagOption, Option, ValuedOption, arg, flag
from .parser import Parser, ParseResult, makeParser, parseArg
from .registry import Registry

__version__ = const.VERSION_STR

__all__ = [
    "ArgvError",
    "ConversionError",
    "DuplicateOptionError",
    "EmptyInputError",
    "FlagOption",
    "InvalidOptionError",
    "MissingRequiredOptionError",
    "MissingValueError",
    "Option",
    "ParseResult",
    "Parser",
    "Registry",
    "UnknownOptionError",
    "ValuedOption",
    "arg",
    "flag",
    "lexicalCast",
    "logger",
    "makeParser",
    "parseArg",
    "run",
    "sysArgv",
    "toString",
]

_logger = logging.getLogger(__name__)


class logger:
    @staticmethod
    def setup(verbose: bool = False):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )


def sysArgv() -> list[str]:
    """
    Returns the argument vector of the running process.

    Arguments from the `TYPEDARGV_EXTRA_ARGS` environment variable are
    inserted right after the program name.
    """
    extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
    return sys.argv[:1] + (extra.split(" ") if extra else []) + sys.argv[1:]


def run(
    parser: Parser,
    fn: Callable[[ParseResult], None],
    argv: Optional[Sequence[str]] = None,
) -> int:
    """
    Parses the command line and hands the result to `fn`.

    Parse errors are reported on stderr instead of being raised.

    Returns:
        The process exit code.
    """
    try:
        result = parser.parse(sysArgv() if argv is None else argv)
        fn(result)
        return 0

    except ArgvError as e:
        _logger.debug(f"Failed to parse arguments: {e}", exc_info=True)
        vt100.error(str(e))
        return 1

    except KeyboardInterrupt:
        print()
        return 1
