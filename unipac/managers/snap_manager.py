"""
Snap implementation.
"""
from typing import List

from .base_manager import BasePackageManager


class SnapManager(BasePackageManager):
    """Snap implementation."""

    elevated_verbs = frozenset({'upgrade', 'install', 'remove'})

    def __init__(self) -> None:
        super().__init__(name="snap", command="snap")

    def search_args(self, query: str) -> List[str]:
        return ['find', query]

    def list_updates_args(self) -> List[str]:
        return ['refresh', '--list']

    def upgrade_args(self) -> List[str]:
        return ['refresh']

    def install_args(self, package_name: str) -> List[str]:
        return ['install', package_name]

    def remove_args(self, package_name: str) -> List[str]:
        return ['remove', package_name]

    def find_installed(self, package_name: str) -> int:
        return self._grep_installed(['list'], package_name)
