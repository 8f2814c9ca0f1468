"""
Base manager class providing the common interface for all backends.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import logging
import shutil
import subprocess

from colorama import Fore, Style

logger = logging.getLogger(__name__)

SUDO = 'sudo'
COMMAND_NOT_FOUND = 127


class BasePackageManager(ABC):
    """Abstract base class for package manager adapters.

    Every verb runs a fixed command line and returns the child's exit
    status without interpreting it. Output goes straight to the terminal.
    """

    #: Verbs that are prefixed with ``sudo``.
    elevated_verbs: frozenset = frozenset()

    def __init__(self, name: str, command: str):
        """
        Initialize the package manager.

        Args:
            name: Display name of the package manager
            command: Executable to run (e.g., 'yay', 'flatpak')
        """
        self.name = name
        self.command = command

    @abstractmethod
    def search_args(self, query: str) -> List[str]:
        """Arguments for searching the remote repositories."""

    @abstractmethod
    def list_updates_args(self) -> List[str]:
        """Arguments for listing pending updates."""

    @abstractmethod
    def upgrade_args(self) -> List[str]:
        """Arguments for upgrading everything the backend manages."""

    @abstractmethod
    def install_args(self, package_name: str) -> List[str]:
        """Arguments for installing a package."""

    @abstractmethod
    def remove_args(self, package_name: str) -> List[str]:
        """Arguments for removing a package."""

    @abstractmethod
    def find_installed(self, package_name: str) -> int:
        """
        Show installed packages matching the name.
        Returns:
            0 if anything matched, non-zero otherwise
        """

    def search(self, query: str) -> int:
        return self._run_command(self.search_args(query), verb='search')

    def list_updates(self) -> int:
        return self._run_command(self.list_updates_args(), verb='list_updates')

    def upgrade(self) -> int:
        return self._run_command(self.upgrade_args(), verb='upgrade')

    def install(self, package_name: str) -> int:
        return self._run_command(self.install_args(package_name), verb='install')

    def remove(self, package_name: str) -> int:
        return self._run_command(self.remove_args(package_name), verb='remove')

    def is_available(self) -> bool:
        """
        Check if the package manager is available.
        Returns:
            True if the executable is on PATH, False otherwise
        """
        return shutil.which(self.command) is not None

    def _build_command(self, args: List[str], verb: Optional[str] = None) -> List[str]:
        cmd = [self.command] + args
        if verb in self.elevated_verbs:
            cmd = [SUDO] + cmd
        return cmd

    def _run_command(self, args: List[str], verb: Optional[str] = None) -> int:
        """
        Execute a command with the package manager, streaming its output.
        Args:
            args: List of command arguments
            verb: Name of the verb, used to decide on privilege elevation
        Returns:
            Exit status of the child process
        """
        if not self.is_available():
            return self._not_available()

        cmd = self._build_command(args, verb)
        logger.debug("Running: %s", ' '.join(cmd))
        try:
            result = subprocess.run(cmd)
        except FileNotFoundError:
            # sudo itself can be missing
            return self._not_available(cmd[0])

        if result.returncode != 0:
            logger.info("%s exited with status %d", ' '.join(cmd), result.returncode)
        return result.returncode

    def _grep_installed(self, args: List[str], package_name: str) -> int:
        """
        Run a listing command and print only the lines mentioning the package.
        Returns:
            0 if at least one line matched, 1 if none did, or the listing's
            own status if it failed
        """
        if not self.is_available():
            return self._not_available()

        cmd = self._build_command(args)
        logger.debug("Running: %s", ' '.join(cmd))
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            text=True,
            encoding='utf-8',
            errors='replace',
        )
        if result.returncode != 0:
            logger.info("%s exited with status %d", ' '.join(cmd), result.returncode)
            return result.returncode

        needle = package_name.lower()
        matches = [line for line in result.stdout.splitlines() if needle in line.lower()]
        for line in matches:
            print(line)
        return 0 if matches else 1

    def _not_available(self, command: Optional[str] = None) -> int:
        command = command or self.command
        logger.warning("%s not found in PATH", command)
        print(f"{Fore.YELLOW}⚠ {command} is not installed or not in PATH{Style.RESET_ALL}")
        return COMMAND_NOT_FOUND
