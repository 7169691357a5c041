import pytest

from scout_browser.core.group import Group
from scout_browser.core.group_registry import ALL_GROUP, GroupRegistry
from scout_browser.core.team_data import TeamData


def _make_registry():
    return GroupRegistry([TeamData("1"), TeamData("2"), TeamData("3")])


def test_registry_is_seeded_with_immutable_all_group():
    registry = _make_registry()

    assert registry.names() == [ALL_GROUP]
    assert registry.all_group is registry["all"]
    assert registry.all_group.immutable
    assert len(registry.all_group) == 3


def test_create_and_lookup_is_case_sensitive():
    registry = _make_registry()
    group = registry.create("Picks", registry.all_group.get_team_list()[:2])

    assert registry["Picks"] is group
    assert "picks" not in registry
    assert registry.get("picks") is None
    assert len(group) == 2
    assert not group.immutable


def test_create_rejects_duplicate_and_empty_names():
    registry = _make_registry()
    registry.create("Picks")

    with pytest.raises(ValueError):
        registry.create("Picks")

    with pytest.raises(ValueError):
        registry.create("all")

    with pytest.raises(ValueError):
        registry.create("")


def test_missing_group_raises_key_error():
    with pytest.raises(KeyError):
        _make_registry()["nope"]


def test_remove():
    registry = _make_registry()
    registry.create("Picks")

    assert registry.remove("Picks") is True
    assert registry.remove("Picks") is False
    assert registry.remove(ALL_GROUP) is False
    assert list(registry) == [ALL_GROUP]
    assert len(registry) == 1


def test_register_existing_group():
    registry = _make_registry()
    picks = registry.all_group.copy("Picks")

    assert registry.register(picks) is picks
    assert registry["Picks"] is picks

    with pytest.raises(ValueError):
        registry.register(registry.all_group.copy("Picks"))


def test_register_rejects_immutable_group():
    registry = _make_registry()

    with pytest.raises(ValueError):
        registry.register(Group("frozen", immutable=True))
    assert "frozen" not in registry
