from typing import Any, Optional


class ArgvError(RuntimeError):
    """Base class for every error raised while declaring or parsing options."""

    pass


class EmptyInputError(ArgvError):
    def __init__(self):
        super().__init__("Expected at least one argument (the program name)")


class UnknownOptionError(ArgvError, LookupError):
    """
    Raised when a token references an option that was never declared.

    Attributes:
        token: The raw token as it appeared on the command line (e.g. "--bogus").
        name: The long name or short alias that was looked up (e.g. "bogus").
    """

    token: str
    name: str

    def __init__(self, token: str, name: str):
        super().__init__(f"Unknown option '{token}'")
        self.token = token
        self.name = name


class DuplicateOptionError(ArgvError, ValueError):
    def __init__(self, name: str, what: str = "option", owner: Optional[str] = None):
        msg = f"Duplicated {what} '{name}'"
        if owner:
            msg += f" already used by '{owner}'"
        super().__init__(msg)
        self.name = name


class MissingValueError(ArgvError):
    def __init__(self, name: str):
        super().__init__(f"Expected value for option '{name}'")
        self.name = name


class ConversionError(ArgvError, ValueError):
    """
    Raised when a raw string cannot be converted to the declared type.

    Attributes:
        raw: The offending value.
        typ: The type the value was converted to.
        name: The option being assigned, when known.
    """

    raw: Any
    typ: type
    name: Optional[str]

    def __init__(self, raw: Any, typ: type, name: Optional[str] = None):
        what = f" for option '{name}'" if name else ""
        typName = getattr(typ, "__name__", str(typ))
        super().__init__(f"Invalid {typName} value{what}: {raw!r}")
        self.raw = raw
        self.typ = typ
        self.name = name


class MissingRequiredOptionError(ArgvError):
    def __init__(self, name: str):
        super().__init__(f"Missing required option '--{name}'")
        self.name = name


class InvalidOptionError(ArgvError, ValueError):
    pass
