from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, List, Optional, Tuple

from .filter import Filter
from .sorter import Sorter
from .team_data import TeamData

logger = logging.getLogger(__name__)


class Group:
    """
    Named view over a pool of TeamData.

    Terms:
    - pool: the TeamData objects managed by this group, in insertion order
    - active list: the pool after the Filter has been applied and the Sorter has ordered it

    The active list is cached. The cache is keyed on the pool, filter and sorter
    versions at the time it was built, so changing any of the three (including
    reconfiguring `group.filter` / `group.sorter` directly) makes the next read
    rebuild it.

    Immutable groups reject add/remove/set/clear (they return False and the pool
    is untouched). `reset()` only touches the view and is always allowed.
    """

    def __init__(
        self,
        name: str,
        teams: Iterable[TeamData] = (),
        *,
        immutable: bool = False,
    ) -> None:
        self.name = name
        self._filter = Filter()
        self._sorter = Sorter()

        self._pool: Dict[str, TeamData] = {}
        for td in teams:
            self._pool.setdefault(td.team_number, td)

        self._immutable = immutable
        self._pool_version = 0
        self._active: List[TeamData] = []
        self._cache_key: Optional[Tuple[int, int, int]] = None
        self._lock = threading.RLock()

    @property
    def immutable(self) -> bool:
        return self._immutable

    @property
    def filter(self) -> Filter:
        return self._filter

    @filter.setter
    def filter(self, value: Filter) -> None:
        with self._lock:
            self._filter = value
            self._cache_key = None

    @property
    def sorter(self) -> Sorter:
        return self._sorter

    @sorter.setter
    def sorter(self, value: Sorter) -> None:
        with self._lock:
            self._sorter = value
            self._cache_key = None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_team_list(self) -> List[TeamData]:
        """Return a copy of the active list (filtered + sorted pool)."""
        with self._lock:
            self._update()
            return list(self._active)

    def get_team_pool(self) -> List[TeamData]:
        """Return a copy of the pool, unfiltered and in insertion order."""
        with self._lock:
            return list(self._pool.values())

    def team_list_contains(self, td: TeamData) -> bool:
        with self._lock:
            self._update()
            return td in self._active

    def team_pool_contains(self, td: TeamData) -> bool:
        with self._lock:
            return td.team_number in self._pool

    # ------------------------------------------------------------------
    # Pool mutations
    # ------------------------------------------------------------------
    def add(self, td: TeamData) -> bool:
        """Add a TeamData to the pool. False if immutable or the team is already pooled."""
        with self._lock:
            if self._reject("add"):
                return False
            if td.team_number in self._pool:
                return False
            self._pool[td.team_number] = td
            self._touch()
            return True

    def add_all(self, teams: Iterable[TeamData]) -> bool:
        """Add every TeamData; True if at least one was added."""
        success = False
        for td in teams:
            success |= self.add(td)
        return success

    def remove(self, td: TeamData) -> bool:
        with self._lock:
            if self._reject("remove"):
                return False
            if self._pool.pop(td.team_number, None) is None:
                return False
            self._touch()
            return True

    def set(self, teams: Iterable[TeamData]) -> bool:
        """Replace the pool with a copy of `teams`. Later duplicates of a team are dropped."""
        with self._lock:
            if self._reject("set"):
                return False
            pool: Dict[str, TeamData] = {}
            for td in teams:
                pool.setdefault(td.team_number, td)
            self._pool = pool
            self._touch()
            return True

    def clear(self) -> bool:
        with self._lock:
            if self._reject("clear"):
                return False
            self._pool = {}
            self._touch()
            return True

    # ------------------------------------------------------------------
    # View configuration
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Clear filter conditions and sort keys, reverting the active list to the pool order."""
        with self._lock:
            self.filter.reset()
            self.sorter.reset()

    def copy(self, name: str, *, active: bool = False) -> Group:
        """
        New mutable group seeded from this one (filter/sort configuration is not copied).
        :param active: seed with the current active list instead of the whole pool
        """
        teams = self.get_team_list() if active else self.get_team_pool()
        return Group(name, teams)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _reject(self, operation: str) -> bool:
        if not self._immutable:
            return False
        logger.info(
            "Rejected mutation on immutable group",
            extra={"group": self.name, "operation": operation},
        )
        return True

    def _touch(self) -> None:
        self._pool_version += 1

    def _update(self) -> None:
        key = (self._pool_version, self.filter.version, self.sorter.version)
        if key == self._cache_key:
            return

        passed = [td for td in self._pool.values() if self.filter.check(td)]
        self._active = self.sorter.sort(passed)
        self._cache_key = key

    def __len__(self) -> int:
        return len(self._pool)

    def __repr__(self) -> str:
        return f"Group({self.name!r}, pool={len(self._pool)}, immutable={self._immutable})"
