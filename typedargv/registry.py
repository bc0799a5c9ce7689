import logging

from typing import Iterable, Optional

from .errors import DuplicateOptionError, UnknownOptionError
from .options import Option

_logger = logging.getLogger(__name__)


class Registry:
    """
    Lookup tables from long names and short aliases to option declarations.

    Both tables point at the same `Option` instances that were registered,
    so assignments made through a lookup are visible to the caller.
    """

    byLongName: dict[str, Option]
    byShortAlias: dict[str, Option]
    _options: list[Option]

    def __init__(self, options: Iterable[Option]):
        """
        Builds the lookup tables, in declaration order.

        Raises:
            DuplicateOptionError: If two options share a name or a short alias.
        """
        self.byLongName = {}
        self.byShortAlias = {}
        self._options = []

        for opt in options:
            self._append(opt)

    def _append(self, opt: Option) -> Option:
        if opt.name in self.byLongName:
            raise DuplicateOptionError(opt.name)

        if opt.shortAlias is not None and opt.shortAlias in self.byShortAlias:
            raise DuplicateOptionError(
                f"-{opt.shortAlias}",
                "short alias",
                self.byShortAlias[opt.shortAlias].name,
            )

        _logger.debug(f"Registering option '{opt.spelling()}'")
        self.byLongName[opt.name] = opt
        if opt.shortAlias is not None:
            self.byShortAlias[opt.shortAlias] = opt
        self._options.append(opt)
        return opt

    def resolveLong(self, name: str, token: Optional[str] = None) -> Option:
        if name not in self.byLongName:
            raise UnknownOptionError(token or f"--{name}", name)
        return self.byLongName[name]

    def resolveShort(self, alias: str, token: Optional[str] = None) -> Option:
        if alias not in self.byShortAlias:
            raise UnknownOptionError(token or f"-{alias}", alias)
        return self.byShortAlias[alias]

    def options(self) -> list[Option]:
        """Returns the registered options, in declaration order."""
        return list(self._options)

    def __contains__(self, name: str) -> bool:
        return name in self.byLongName

    def __len__(self) -> int:
        return len(self._options)
