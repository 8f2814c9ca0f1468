"""
Flatpak implementation.
"""
from typing import List

from .base_manager import BasePackageManager


class FlatpakManager(BasePackageManager):
    """Flatpak implementation."""

    elevated_verbs = frozenset({'upgrade', 'install', 'remove'})

    def __init__(self) -> None:
        super().__init__(name="flatpak", command="flatpak")

    def search_args(self, query: str) -> List[str]:
        return ['search', query]

    def list_updates_args(self) -> List[str]:
        return ['remote-ls', '--updates']

    def upgrade_args(self) -> List[str]:
        return ['update']

    def install_args(self, package_name: str) -> List[str]:
        return ['install', package_name]

    def remove_args(self, package_name: str) -> List[str]:
        return ['uninstall', package_name]

    def find_installed(self, package_name: str) -> int:
        return self._grep_installed(['list'], package_name)
