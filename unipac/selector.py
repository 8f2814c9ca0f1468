"""
Probe every backend, then let the user pick the one to act on.
"""
import logging
from typing import Callable, Dict, Mapping, Optional

from colorama import Fore, Style

from unipac.errors import UnknownSourceError
from unipac.managers.base_manager import BasePackageManager
from unipac.router import BACKEND_ORDER, Backend
from unipac.utils.help_text import print_header

logger = logging.getLogger(__name__)

CHOICES: Mapping[str, Optional[Backend]] = {
    'y': Backend.YAY,
    'yay': Backend.YAY,
    'f': Backend.FLATPAK,
    'flatpak': Backend.FLATPAK,
    's': Backend.SNAP,
    'snap': Backend.SNAP,
    'n': None,
    'none': None,
}

PROMPT = "[y]ay / [f]latpak / [s]nap / [n]one: "


class InteractiveSelector:
    """Shared probe-then-prompt flow behind the generic install and remove."""

    def __init__(self, managers: Dict[Backend, BasePackageManager],
                 input_func: Callable[[str], str] = input):
        self.managers = managers
        self.input_func = input_func

    def install(self, package_name: str) -> int:
        for backend in BACKEND_ORDER:
            print_header(f"Searching {backend.value} for '{package_name}'")
            self.managers[backend].search(package_name)

        backend = self._choose(f"Install '{package_name}' from which source? ")
        if backend is None:
            print(f"{Fore.YELLOW}Aborted, nothing was installed.{Style.RESET_ALL}")
            return 0
        return self.managers[backend].install(package_name)

    def remove(self, package_name: str) -> int:
        for backend in BACKEND_ORDER:
            print_header(f"Installed {backend.value} packages matching '{package_name}'")
            self.managers[backend].find_installed(package_name)

        backend = self._choose(f"Remove '{package_name}' from which source? ")
        if backend is None:
            print(f"{Fore.YELLOW}Aborted, nothing was removed.{Style.RESET_ALL}")
            return 0
        return self.managers[backend].remove(package_name)

    def _choose(self, question: str) -> Optional[Backend]:
        """Ask once. Anything outside the accepted answers is fatal."""
        try:
            answer = self.input_func(f"\n{Fore.YELLOW}{question}{PROMPT}{Style.RESET_ALL}")
        except EOFError:
            answer = ''
        choice = answer.strip().lower()
        if choice not in CHOICES:
            raise UnknownSourceError(choice)
        logger.debug("Selected source: %s", choice)
        return CHOICES[choice]
