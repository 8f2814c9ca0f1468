"""
Argument parsing: turns the raw argument vector into a single Invocation.

The grammar is a fixed flag table rather than argparse. Only the first two
arguments are consulted, and every flag-like token is validated first.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Optional, Sequence

from unipac.errors import MissingArgumentError, MissingPackageNameError, UnknownFlagError

FLAG_PREFIX = '-'


class Operation(Enum):
    SEARCH = 'search'
    CHECK_UPDATES = 'check-updates'
    UPGRADE_ALL = 'upgrade-all'
    UPGRADE_ONE = 'upgrade-one'
    INSTALL_ONE = 'install-one'
    INSTALL_INTERACTIVE = 'install'
    REMOVE_ONE = 'remove-one'
    REMOVE_INTERACTIVE = 'remove'
    HELP = 'help'


class Backend(Enum):
    YAY = 'yay'
    FLATPAK = 'flatpak'
    SNAP = 'snap'


# Fan-out order for aggregate operations
BACKEND_ORDER = (Backend.YAY, Backend.FLATPAK, Backend.SNAP)


class FlagSpec(NamedTuple):
    short: str
    long: str
    operation: Operation
    backend: Optional[Backend]
    needs_name: bool
    description: str


@dataclass(frozen=True)
class Invocation:
    """The single operation requested for this run."""

    operation: Operation
    backend: Optional[Backend] = None
    package: Optional[str] = None


_SPECS = (
    FlagSpec('-h', '--help', Operation.HELP, None, False,
             'Show this help message'),
    FlagSpec('-c', '--check-update', Operation.CHECK_UPDATES, None, False,
             'List available updates from yay, flatpak and snap'),
    FlagSpec('-u', '--upgrade-all', Operation.UPGRADE_ALL, None, False,
             'Upgrade everything: yay, then flatpak, then snap'),
    FlagSpec('-uy', '--upgrade-yay', Operation.UPGRADE_ONE, Backend.YAY, False,
             'Upgrade yay packages'),
    FlagSpec('-uf', '--upgrade-flatpak', Operation.UPGRADE_ONE, Backend.FLATPAK, False,
             'Upgrade flatpak packages'),
    FlagSpec('-us', '--upgrade-snap', Operation.UPGRADE_ONE, Backend.SNAP, False,
             'Upgrade snap packages'),
    FlagSpec('-i', '--install', Operation.INSTALL_INTERACTIVE, None, True,
             'Search every source, then choose where to install from'),
    FlagSpec('-iy', '--install-yay', Operation.INSTALL_ONE, Backend.YAY, True,
             'Install a package with yay'),
    FlagSpec('-if', '--install-flatpak', Operation.INSTALL_ONE, Backend.FLATPAK, True,
             'Install a package with flatpak'),
    FlagSpec('-is', '--install-snap', Operation.INSTALL_ONE, Backend.SNAP, True,
             'Install a package with snap'),
    FlagSpec('-r', '--remove', Operation.REMOVE_INTERACTIVE, None, True,
             'Look for the package everywhere, then choose where to remove it from'),
    FlagSpec('-ry', '--remove-yay', Operation.REMOVE_ONE, Backend.YAY, True,
             'Remove a package with yay'),
    FlagSpec('-rf', '--remove-flatpak', Operation.REMOVE_ONE, Backend.FLATPAK, True,
             'Remove a package with flatpak'),
    FlagSpec('-rs', '--remove-snap', Operation.REMOVE_ONE, Backend.SNAP, True,
             'Remove a package with snap'),
)


def _build_flag_table() -> Mapping[str, FlagSpec]:
    table = {}
    for spec in _SPECS:
        table[spec.short] = spec
        table[spec.long] = spec
    return MappingProxyType(table)


FLAG_TABLE: Mapping[str, FlagSpec] = _build_flag_table()

# One entry per flag, in the order they are documented
FLAG_SPECS: Sequence[FlagSpec] = _SPECS


def is_flag(token: str) -> bool:
    return token.startswith(FLAG_PREFIX)


def validate(argv: Sequence[str]) -> None:
    """Reject the whole argument vector if any flag-like token is unknown."""
    for token in argv:
        if is_flag(token) and token not in FLAG_TABLE:
            raise UnknownFlagError(token)


def parse_args(argv: Sequence[str]) -> Invocation:
    """
    Build the Invocation for an argument vector.

    Args:
        argv: Arguments without the program name

    Raises:
        UnknownFlagError: a flag-like token is not in the flag table
        MissingArgumentError: nothing to do was given
        MissingPackageNameError: the flag needs a package name and none was given
    """
    args: List[str] = list(argv)
    validate(args)

    first = args[0] if args else ''
    if not first:
        raise MissingArgumentError()

    if not is_flag(first):
        return Invocation(Operation.SEARCH, package=first)

    spec = FLAG_TABLE[first]
    package = args[1] if len(args) > 1 else None
    if not package or is_flag(package):
        package = None
    if spec.needs_name and package is None:
        raise MissingPackageNameError(first)

    return Invocation(spec.operation, backend=spec.backend,
                      package=package if spec.needs_name else None)
