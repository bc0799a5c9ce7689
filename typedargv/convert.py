import enum
import re

from typing import Any, Callable, TypeVar, cast

from .errors import ConversionError

T = TypeVar("T")

TRUE_VALUES = ("true", "True", "y", "yes", "Y", "Yes", "1")
FALSE_VALUES = ("false", "False", "n", "no", "N", "No", "0")

# Source types that can be cast to a wider numeric type without going through text.
_WIDENING: dict[type, tuple[type, ...]] = {
    bool: (int, float, complex),
    int: (float, complex),
    float: (complex,),
}


def _parseBool(raw: str) -> bool:
    s = raw.strip()
    if s in TRUE_VALUES:
        return True
    elif s in FALSE_VALUES:
        return False
    raise ValueError(f"Expected a boolean, got {raw!r}")


_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def _parseInt(raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"Expected a decimal integer, got {raw!r}")
    return int(raw, 10)


def _parseEnum(typ: type[enum.Enum], raw: str) -> enum.Enum:
    """Looks up an enum member by name, then by the text of its value."""
    s = raw.strip()
    if s in typ.__members__:
        return typ.__members__[s]
    for member in typ:
        if str(member.value) == s:
            return member
    raise ValueError(f"Expected one of {', '.join(typ.__members__)}, got {raw!r}")


_PARSERS: dict[type, Callable[[str], Any]] = {
    str: str,
    int: _parseInt,
    float: float,
    complex: complex,
    bool: _parseBool,
}


def toString(value: Any) -> str:
    """
    Renders a value as its canonical text form.

    Only used for diagnostics and for casts that have to go through text,
    never for parsing.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return value.name
    return str(value)


def convert(raw: str, typ: type[T]) -> T:
    """
    Converts a raw command-line string to `typ`.

    Args:
        raw: The string as it appeared on the command line.
        typ: The declared type of the option.

    Returns:
        The converted value.

    Raises:
        ConversionError: If `raw` is not valid text for `typ`.
    """
    parse = _PARSERS.get(typ)
    try:
        if parse is not None:
            return cast(T, parse(raw))
        if isinstance(typ, type) and issubclass(typ, enum.Enum):
            return cast(T, _parseEnum(typ, raw))
        return typ(raw)  # type: ignore[call-arg]
    except (ValueError, TypeError) as e:
        raise ConversionError(raw, typ) from e


def lexicalCast(value: Any, typ: type[T]) -> T:
    """
    Converts any value to `typ`.

    Values that are already a `typ`, or that only need a numeric widening,
    are cast directly. Everything else is rendered to text and parsed back
    with the grammar of `typ`.
    """
    if type(value) is typ:
        return value
    if typ in _WIDENING.get(type(value), ()):
        return typ(value)  # type: ignore[call-arg]
    if isinstance(value, typ):
        return value
    if typ is str:
        return cast(T, toString(value))
    return convert(toString(value), typ)
