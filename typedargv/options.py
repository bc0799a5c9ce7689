import dataclasses as dt
import logging
import typing as tp

from typing import Any, Optional

from . import convert
from .errors import ConversionError, InvalidOptionError, MissingRequiredOptionError

_logger = logging.getLogger(__name__)

T = tp.TypeVar("T")

# --- Declarations ----------------------------------------------------------- #


@dt.dataclass
class Option:
    """
    Base class for command-line option declarations.

    The parser only talks to options through `requiresValue`, `acceptsValue`
    and `trigger`; the typed value is read back with `value` once parsing is
    done.

    Attributes:
        name: The long name of the option (e.g., "count" for "--count").
        shortAlias: An optional single character alias (e.g., "n" for "-n").
        helpText: A description of the option, for usage output.
    """

    name: str
    shortAlias: Optional[str] = None
    helpText: str = ""

    def __post_init__(self):
        if not self.name or self.name.startswith("-") or "=" in self.name:
            raise InvalidOptionError(f"Invalid option name '{self.name}'")

        if self.shortAlias is not None and (
            len(self.shortAlias) != 1 or self.shortAlias == "-"
        ):
            raise InvalidOptionError(
                f"Invalid short alias '{self.shortAlias}' for option '{self.name}'"
            )

    def requiresValue(self) -> bool:
        """Checks if the option consumes a value."""
        raise NotImplementedError()

    def acceptsValue(self, raw: str):
        """Assigns a raw command-line value to the option."""
        raise NotImplementedError()

    def trigger(self):
        """Marks the option as present on the command line."""
        raise NotImplementedError()

    def value(self) -> Any:
        """Returns the typed value of the option."""
        raise NotImplementedError()

    def isSet(self) -> bool:
        """Checks if the option received a value during the last parse."""
        raise NotImplementedError()

    def reset(self):
        """Forgets any value assigned by a previous parse."""
        raise NotImplementedError()

    def spelling(self) -> str:
        """Returns the option as it is written on the command line (e.g., "-n, --count")."""
        res = ""
        if self.shortAlias:
            res += f"-{self.shortAlias}, "
        return res + f"--{self.name}"


@dt.dataclass
class ValuedOption(Option, tp.Generic[T]):
    """
    An option that takes a value of type `T`.

    Every valued option is required: reading it before it was assigned
    raises `MissingRequiredOptionError`.
    """

    typ: type[T] = str  # type: ignore[assignment]

    _value: Optional[T] = dt.field(init=False, default=None, repr=False)
    _isSet: bool = dt.field(init=False, default=False, repr=False)

    def requiresValue(self) -> bool:
        return True

    def acceptsValue(self, raw: str):
        try:
            value = convert.convert(raw, self.typ)
        except ConversionError as e:
            raise ConversionError(raw, self.typ, self.name) from e

        if self._isSet:
            _logger.debug(
                f"Option '{self.name}' overwritten: {convert.toString(self._value)} -> {convert.toString(value)}"
            )
        self._value = value
        self._isSet = True

    def trigger(self):
        raise InvalidOptionError(f"Option '{self.name}' expects a value")

    def value(self) -> T:
        if not self._isSet:
            raise MissingRequiredOptionError(self.name)
        return tp.cast(T, self._value)

    def isSet(self) -> bool:
        return self._isSet

    def reset(self):
        self._value = None
        self._isSet = False


@dt.dataclass
class FlagOption(Option):
    """
    A boolean option, false unless it appears on the command line.
    """

    triggered: bool = dt.field(init=False, default=False)

    def requiresValue(self) -> bool:
        return False

    def acceptsValue(self, raw: str):
        raise InvalidOptionError(f"Flag '{self.name}' does not take a value")

    def trigger(self):
        self.triggered = True

    def value(self) -> bool:
        return self.triggered

    def isSet(self) -> bool:
        return self.triggered

    def reset(self):
        self.triggered = False


# --- Factories -------------------------------------------------------------- #


def arg(
    typ: type[T],
    name: str,
    shortAlias: Optional[str] = None,
    helpText: str = "",
) -> ValuedOption[T]:
    """
    Declares an option that takes a value.

    Args:
        typ: The type the value is converted to (e.g., `int`).
        name: The long name of the option (e.g., "count" for "--count").
        shortAlias: The short alias of the option (e.g., "n" for "-n").
        helpText: A description of the option.
    """
    return ValuedOption(name, shortAlias, helpText, typ)


def flag(
    name: str,
    shortAlias: Optional[str] = None,
    helpText: str = "",
) -> FlagOption:
    """
    Declares a boolean flag.

    Args:
        name: The long name of the flag (e.g., "verbose" for "--verbose").
        shortAlias: The short alias of the flag (e.g., "v" for "-v").
        helpText: A description of the flag.
    """
    return FlagOption(name, shortAlias, helpText)
