"""
Main CLI interface for unipac.
"""
import logging
import sys
from typing import Callable, Dict, List, Optional

from colorama import init, Fore, Style

from unipac.errors import MissingPackageNameError, UnipacError
from unipac.router import BACKEND_ORDER, Backend, Invocation, Operation, parse_args
from unipac.selector import InteractiveSelector
from unipac.utils.help_text import MOO, flag_usage, print_header, print_help, print_usage
from unipac.utils.log import configure_logging

# Manager base and implementations
from unipac.managers.base_manager import BasePackageManager
from unipac.managers.flatpak_manager import FlatpakManager
from unipac.managers.snap_manager import SnapManager
from unipac.managers.yay_manager import YayManager

# Initialize colorama for cross-platform colored output
init(autoreset=True)

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


def default_managers() -> Dict[Backend, BasePackageManager]:
    return {
        Backend.YAY: YayManager(),
        Backend.FLATPAK: FlatpakManager(),
        Backend.SNAP: SnapManager(),
    }


class UnifiedCLI:
    """Routes one invocation to the backend adapters.

    Backend exit statuses are relayed to the terminal and logged, but never
    become the process's exit code.
    """

    def __init__(self, managers: Optional[Dict[Backend, BasePackageManager]] = None,
                 input_func: Callable[[str], str] = input):
        self.managers = managers if managers is not None else default_managers()
        self.selector = InteractiveSelector(self.managers, input_func=input_func)

    def run(self, invocation: Invocation) -> int:
        op = invocation.operation
        if op is Operation.HELP:
            print_help()
        elif op is Operation.SEARCH:
            self.search(invocation.package)
        elif op is Operation.CHECK_UPDATES:
            self.check_updates()
        elif op is Operation.UPGRADE_ALL:
            self.upgrade_all()
        elif op is Operation.UPGRADE_ONE:
            self.managers[invocation.backend].upgrade()
        elif op is Operation.INSTALL_ONE:
            self.managers[invocation.backend].install(invocation.package)
        elif op is Operation.REMOVE_ONE:
            self.managers[invocation.backend].remove(invocation.package)
        elif op is Operation.INSTALL_INTERACTIVE:
            self.selector.install(invocation.package)
        elif op is Operation.REMOVE_INTERACTIVE:
            self.selector.remove(invocation.package)
        else:
            raise ValueError(f"Unhandled operation: {op}")
        return 0

    def search(self, query: str):
        """
        Search every backend, in order.

        Args:
            query: Search term passed unchanged to each package manager
        """
        for backend in BACKEND_ORDER:
            print_header(f"Searching {backend.value} for '{query}'")
            self.managers[backend].search(query)
        if query == 'moo':
            print(MOO)

    def check_updates(self):
        """List pending updates from every backend, in order."""
        for backend in BACKEND_ORDER:
            print_header(f"Checking {backend.value} for updates")
            self.managers[backend].list_updates()

    def upgrade_all(self):
        """Upgrade every backend in order. A failure does not stop the next one."""
        for backend in BACKEND_ORDER:
            print_header(f"Upgrading {backend.value} packages")
            status = self.managers[backend].upgrade()
            if status != 0:
                logger.warning("%s upgrade exited with status %d", backend.value, status)


def main(argv: Optional[List[str]] = None,
         managers: Optional[Dict[Backend, BasePackageManager]] = None,
         input_func: Callable[[str], str] = input) -> int:
    """Main entry point for the CLI. Returns the process exit code."""
    configure_logging()
    if argv is None:
        argv = sys.argv[1:]

    try:
        invocation = parse_args(argv)
        logger.debug("Parsed invocation: %s", invocation)
        return UnifiedCLI(managers, input_func=input_func).run(invocation)
    except MissingPackageNameError as e:
        print(flag_usage(e.flag))
        return e.exit_code
    except UnipacError as e:
        if e.message:
            print(f"{Fore.RED}{e.message}{Style.RESET_ALL}")
        if e.show_usage:
            print_usage()
        return e.exit_code
    except KeyboardInterrupt:
        print(f"\n{Fore.YELLOW}Interrupted{Style.RESET_ALL}")
        return EXIT_INTERRUPTED


if __name__ == '__main__':
    sys.exit(main())
