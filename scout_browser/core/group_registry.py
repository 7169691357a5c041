from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from .group import Group
from .team_data import TeamData

logger = logging.getLogger(__name__)

ALL_GROUP = "all"


class GroupRegistry(Mapping[str, Group]):
    """
    Registry of named Groups so commands can look views up by name

    Purpose:
    - Owns every Group for the session; lives on the AppContext rather than as a module-level table
    - Seeds exactly one entry, 'all', holding the full loaded dataset

    Design Notes:
    - Names are case-sensitive and unique across the registry
    - 'all' is immutable and can never be removed; its filter/sorter can still be reset
    """

    def __init__(self, teams: Iterable[TeamData] = ()):
        self._groups: Dict[str, Group] = {}
        self._groups[ALL_GROUP] = Group(ALL_GROUP, teams, immutable=True)

    @property
    def all_group(self) -> Group:
        return self._groups[ALL_GROUP]

    def create(self, name: str, teams: Iterable[TeamData] = ()) -> Group:
        """
        Create and register a new mutable Group
        :param name: unique, non-empty group name
        :param teams: initial pool
        :return: the new Group

        Raises:
            ValueError: if the name is empty or already registered
        """
        return self.register(Group(name, teams))

    def register(self, group: Group) -> Group:
        """
        Register an already built Group under its own name
        :param group: a mutable Group, e.g. from {@link Group.copy}
        :return: the registered Group

        Raises:
            ValueError: if the name is empty or already registered, or the group is immutable
        """
        if not group.name:
            raise ValueError("Group name must not be empty")
        if group.name in self._groups:
            raise ValueError(f"Group '{group.name}' already exists")
        if group.immutable:
            raise ValueError(f"Group '{group.name}' is immutable; only '{ALL_GROUP}' may be")

        self._groups[group.name] = group
        logger.info("Registered group", extra={"group": group.name, "n_teams": len(group)})
        return group

    def remove(self, name: str) -> bool:
        """
        Remove a Group from the registry
        :return: False if the group does not exist or is the protected 'all' group
        """
        if name == ALL_GROUP or name not in self._groups:
            return False
        del self._groups[name]
        logger.info("Removed group", extra={"group": name})
        return True

    def names(self) -> List[str]:
        return list(self._groups)

    def get(self, name: str, default: Optional[Group] = None) -> Optional[Group]:
        return self._groups.get(name, default)

    def __getitem__(self, name: str) -> Group:
        try:
            return self._groups[name]
        except KeyError:
            raise KeyError(f"Group '{name}' not found")

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)
