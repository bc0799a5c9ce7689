import dataclasses as dt
import logging

from typing import Any, Optional, Sequence
from dataclasses_json import DataClassJsonMixin, config

from . import convert
from .errors import EmptyInputError, MissingValueError
from .options import Option
from .registry import Registry

_logger = logging.getLogger(__name__)

# --- Scan -------------------------------------------------------------- #


class Scan:
    """
    A simple scanner over a single command-line token.
    """

    _src: str
    _off: int

    def __init__(self, src: str, off: int = 0):
        self._src = src
        self._off = off

    def curr(self) -> str:
        """Returns the current character, or '\0' at the end of the string."""
        if self.eof():
            return "\0"
        return self._src[self._off]

    def next(self) -> str:
        if self.eof():
            return "\0"

        self._off += 1
        return self.curr()

    def eof(self) -> bool:
        return self._off >= len(self._src)

    def skipStr(self, s: str) -> bool:
        """Skips over `s` if the string continues with it."""
        if self._src[self._off :].startswith(s):
            self._off += len(s)
            return True

        return False

    def rest(self) -> str:
        """Consumes and returns everything up to the end of the string."""
        res = self._src[self._off :]
        self._off = len(self._src)
        return res


# --- Tokens ------------------------------------------------------------ #


@dt.dataclass
class Token:
    """
    Base class for command-line argument tokens.

    Attributes:
        raw: The token exactly as it appeared in the argument vector.
    """

    raw: str


@dt.dataclass
class LongOptionToken(Token):
    """
    Represents a long option (e.g., "--count" or "--count=3").

    Attributes:
        key: The option name (e.g., "count").
        value: The inline value after '=', or None if there was none.
    """

    key: str
    value: Optional[str]


@dt.dataclass
class ShortOptionToken(Token):
    """
    Represents a short option (e.g., "-n").

    Attributes:
        alias: The character following the dash.
    """

    alias: str


@dt.dataclass
class OperandToken(Token):
    """
    Represents a positional argument, kept verbatim.
    """

    @property
    def value(self) -> str:
        return self.raw


def _parseUntil(s: Scan, stop: str) -> str:
    """Parses a string until `stop` is encountered."""
    res = ""
    while not s.eof() and s.curr() != stop:
        res += s.curr()
        s.next()
    return res


def parseArg(arg: str) -> Token:
    """Classifies a single command-line argument."""
    s = Scan(arg)
    if s.skipStr("--"):
        key = _parseUntil(s, "=")
        if s.skipStr("="):
            return LongOptionToken(arg, key, s.rest())
        return LongOptionToken(arg, key, None)
    elif len(arg) >= 2 and s.skipStr("-"):
        # Anything after the alias character is ignored, there is no "-abc" grouping.
        return ShortOptionToken(arg, s.curr())
    else:
        return OperandToken(arg)


# --- Result ------------------------------------------------------------ #


def _encodeValues(values: tuple[Any, ...]) -> list[Any]:
    """Keeps JSON-native values, everything else is rendered as text."""
    return [
        v if v is None or isinstance(v, (str, int, float)) else convert.toString(v)
        for v in values
    ]


@dt.dataclass
class ParseResult(DataClassJsonMixin):
    """
    The outcome of a successful parse.
    """

    programName: str
    """The first element of the argument vector."""
    values: tuple[Any, ...] = dt.field(metadata=config(encoder=_encodeValues))
    """The typed value of every option, in declaration order."""
    remainingArguments: list[str] = dt.field(default_factory=list)
    """The positional arguments, in input order."""
    names: list[str] = dt.field(default_factory=list)
    """The option names matching `values`."""

    def get(self, name: str) -> Any:
        """
        Returns the value of an option by name.

        Raises:
            KeyError: If no option with this name was declared.
        """
        if name not in self.names:
            raise KeyError(name)
        return self.values[self.names.index(name)]

    def __getitem__(self, name: str) -> Any:
        return self.get(name)


# --- Parser ------------------------------------------------------------ #


class Parser:
    """
    Parses argument vectors against a fixed set of option declarations.
    """

    _registry: Registry
    _progname: str
    _values: tuple[Any, ...]
    _remains: list[str]

    def __init__(self, *options: Option):
        self._registry = Registry(options)
        self._progname = ""
        self._values = ()
        self._remains = []

    @property
    def registry(self) -> Registry:
        return self._registry

    def _dispatch(self, opt: Option, tok: Token, stack: list[str]):
        if isinstance(tok, LongOptionToken) and tok.value is not None:
            if opt.requiresValue():
                opt.acceptsValue(tok.value)
            else:
                _logger.warning(
                    f"Ignoring value '{tok.value}' given to flag '--{opt.name}'"
                )
                opt.trigger()
        elif opt.requiresValue():
            if len(stack) == 0:
                raise MissingValueError(opt.name)
            opt.acceptsValue(stack.pop(0))
        else:
            opt.trigger()

    def parse(self, args: Sequence[str]) -> ParseResult:
        """
        Parses an argument vector.

        Args:
            args: The argument vector, starting with the program name.

        Returns:
            The program name, the typed option values in declaration order
            and the positional arguments.

        Raises:
            EmptyInputError: If `args` is empty.
            UnknownOptionError: If an option was not declared.
            MissingValueError: If a valued option is the last token.
            ConversionError: If a value does not match its option's type.
            MissingRequiredOptionError: If a valued option was never given.
        """
        if len(args) == 0:
            raise EmptyInputError()

        options = self._registry.options()
        for opt in options:
            opt.reset()

        progname = args[0]
        remains: list[str] = []
        stack = list(args[1:])
        while len(stack) > 0:
            tok = parseArg(stack.pop(0))
            if isinstance(tok, OperandToken):
                remains.append(tok.value)
                continue

            if isinstance(tok, LongOptionToken):
                opt = self._registry.resolveLong(tok.key, tok.raw)
            elif isinstance(tok, ShortOptionToken):
                opt = self._registry.resolveShort(tok.alias, tok.raw)
            else:
                raise ValueError(f"Unexpected token: {type(tok)}")

            _logger.debug(f"Dispatching '{tok.raw}' to option '{opt.name}'")
            self._dispatch(opt, tok, stack)

        values = tuple(opt.value() for opt in options)

        self._progname = progname
        self._values = values
        self._remains = remains

        return ParseResult(
            programName=progname,
            values=values,
            remainingArguments=list(remains),
            names=[opt.name for opt in options],
        )

    def progname(self) -> str:
        """Returns the program name seen by the last parse."""
        return self._progname

    def options(self) -> tuple[Any, ...]:
        """Returns the typed option values of the last parse."""
        return self._values

    def remains(self) -> list[str]:
        """Returns the positional arguments of the last parse."""
        return self._remains


def makeParser(*options: Option) -> Parser:
    return Parser(*options)
