"""
yay (Arch Linux + AUR) implementation.
"""
from typing import List

from .base_manager import BasePackageManager


class YayManager(BasePackageManager):
    """yay implementation. yay asks for sudo by itself, so nothing is elevated here."""

    def __init__(self) -> None:
        super().__init__(name="yay", command="yay")

    def search_args(self, query: str) -> List[str]:
        return ['-Ss', query]

    def list_updates_args(self) -> List[str]:
        return ['-Qu']

    def upgrade_args(self) -> List[str]:
        return ['-Syu']

    def install_args(self, package_name: str) -> List[str]:
        return ['-S', package_name]

    def remove_args(self, package_name: str) -> List[str]:
        return ['-Rns', package_name]

    def find_installed(self, package_name: str) -> int:
        # pacman does the pattern matching for us
        return self._run_command(['-Qs', package_name], verb='find_installed')
