"""
Core domain layer: team records, filters, sorters, groups and the group
registry
"""

from .team_data import TeamData
from .filter import Condition, Filter
from .sorter import SortKey, Sorter
from .group import Group
from .group_registry import GroupRegistry

__all__ = ["TeamData", "Condition", "Filter", "SortKey", "Sorter", "Group", "GroupRegistry"]
