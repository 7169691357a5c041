import threading

from scout_browser.core.filter import Condition, Filter
from scout_browser.core.group import Group
from scout_browser.core.sorter import Sorter
from scout_browser.core.team_data import TeamData


def _make_teams():
    return [
        TeamData("A", {"score": 10}),
        TeamData("B", {"score": 20}),
        TeamData("C", {"score": 10}),
    ]


def _numbers(teams):
    return [td.team_number for td in teams]


def _make_group(immutable=False):
    return Group("test", _make_teams(), immutable=immutable)


def test_active_list_defaults_to_pool_order():
    group = _make_group()

    assert _numbers(group.get_team_list()) == ["A", "B", "C"]
    assert _numbers(group.get_team_pool()) == ["A", "B", "C"]


def test_sorted_active_list_preserves_pool_order_on_ties():
    group = _make_group()
    group.sorter.add_key("score", descending=True)

    assert _numbers(group.get_team_list()) == ["B", "A", "C"]


def test_filtered_active_list():
    group = _make_group()
    group.filter.add_condition(Condition("score", ">", 10))

    assert _numbers(group.get_team_list()) == ["B"]
    assert group.team_list_contains(TeamData("B"))
    assert not group.team_list_contains(TeamData("A"))
    assert group.team_pool_contains(TeamData("A"))


def test_get_team_list_is_idempotent_and_a_defensive_copy():
    group = _make_group()
    group.sorter.add_key("score")

    first = group.get_team_list()
    first.clear()
    second = group.get_team_list()
    third = group.get_team_list()

    assert _numbers(second) == ["A", "C", "B"]
    assert second == third
    assert second is not third


def test_cache_refreshes_after_pool_filter_and_sorter_changes():
    group = _make_group()
    assert _numbers(group.get_team_list()) == ["A", "B", "C"]

    group.add(TeamData("D", {"score": 30}))
    assert _numbers(group.get_team_list()) == ["A", "B", "C", "D"]

    group.filter.add_condition(Condition("score", ">=", 20))
    assert _numbers(group.get_team_list()) == ["B", "D"]

    group.sorter.add_key("score", descending=True)
    assert _numbers(group.get_team_list()) == ["D", "B"]

    group.remove(TeamData("D"))
    assert _numbers(group.get_team_list()) == ["B"]


def test_replacing_filter_or_sorter_invalidates_cache():
    group = _make_group()
    assert _numbers(group.get_team_list()) == ["A", "B", "C"]

    group.filter = Filter([Condition("score", "==", 10)])
    assert _numbers(group.get_team_list()) == ["A", "C"]

    sorter = Sorter()
    sorter.add_key("score", descending=True)
    group.filter = Filter()
    group.sorter = sorter
    assert _numbers(group.get_team_list()) == ["B", "A", "C"]


def test_add_then_remove_restores_pool():
    group = _make_group()
    before = set(_numbers(group.get_team_pool()))

    assert group.add(TeamData("D", {"score": 5})) is True
    assert group.remove(TeamData("D")) is True

    assert set(_numbers(group.get_team_pool())) == before


def test_duplicate_key_add_is_rejected():
    group = _make_group()

    assert group.add(TeamData("A", {"score": 999})) is False
    assert len(group) == 3
    assert group.get_team_pool()[0].get("score") == 10


def test_remove_absent_team_returns_false():
    assert _make_group().remove(TeamData("Z")) is False


def test_add_all_attempts_every_team():
    group = _make_group()

    assert group.add_all([TeamData("A"), TeamData("D"), TeamData("E")]) is True
    assert _numbers(group.get_team_pool()) == ["A", "B", "C", "D", "E"]
    assert group.add_all([TeamData("A"), TeamData("B")]) is False


def test_set_and_clear():
    group = _make_group()

    assert group.set([TeamData("X"), TeamData("Y"), TeamData("X", {"score": 1})]) is True
    assert _numbers(group.get_team_list()) == ["X", "Y"]
    assert group.get_team_pool()[0].fields == {}

    assert group.clear() is True
    assert group.get_team_list() == []
    assert len(group) == 0


def test_immutable_group_rejects_pool_mutations():
    group = _make_group(immutable=True)
    before = group.get_team_pool()

    assert group.add(TeamData("D")) is False
    assert group.add_all([TeamData("D")]) is False
    assert group.remove(TeamData("A")) is False
    assert group.set([TeamData("D")]) is False
    assert group.clear() is False

    assert group.get_team_pool() == before


def test_reset_is_allowed_on_immutable_group():
    group = _make_group(immutable=True)
    group.filter.add_condition(Condition("score", ">", 10))
    group.sorter.add_key("score", descending=True)
    assert _numbers(group.get_team_list()) == ["B"]

    group.reset()

    assert group.filter.conditions == ()
    assert group.sorter.keys == ()
    assert _numbers(group.get_team_list()) == ["A", "B", "C"]


def test_copy_is_mutable_and_independent():
    group = _make_group(immutable=True)
    clone = group.copy("clone")

    assert clone.name == "clone"
    assert not clone.immutable
    assert clone.remove(TeamData("A")) is True
    assert len(group) == 3


def test_concurrent_adds_keep_pool_consistent():
    group = Group("threads")

    def worker(offset):
        for i in range(100):
            group.add(TeamData(str(offset * 100 + i)))
            group.get_team_list()

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(group) == 400
    assert len(group.get_team_list()) == 400


def test_copy_of_active_list_uses_current_view():
    group = _make_group()
    group.filter.add_condition(Condition("score", "==", 10))
    group.sorter.add_key("score", descending=True)

    clone = group.copy("tens", active=True)

    assert _numbers(clone.get_team_pool()) == ["A", "C"]
    assert clone.filter.conditions == ()
    assert clone.sorter.keys == ()
