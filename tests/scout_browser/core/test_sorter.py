from scout_browser.core.sorter import Sorter, SortKey, compare_values
from scout_browser.core.team_data import TeamData


def _numbers(teams):
    return [td.team_number for td in teams]


def _make_teams():
    return [
        TeamData("A", {"score": 10, "name": "bravo"}),
        TeamData("B", {"score": 20, "name": "Alpha"}),
        TeamData("C", {"score": 10, "name": "alpha"}),
    ]


def test_descending_sort_is_stable_on_ties():
    sorter = Sorter()
    sorter.add_key("score", descending=True)

    assert _numbers(sorter.sort(_make_teams())) == ["B", "A", "C"]


def test_empty_sorter_keeps_input_order():
    assert _numbers(Sorter().sort(_make_teams())) == ["A", "B", "C"]


def test_later_keys_break_ties():
    sorter = Sorter([SortKey("score"), SortKey("name")])

    # A/C tie on score, "alpha" < "bravo"
    assert _numbers(sorter.sort(_make_teams())) == ["C", "A", "B"]


def test_strings_compare_case_insensitively():
    sorter = Sorter([SortKey("name")])

    # B ("Alpha") and C ("alpha") are equal, so input order is kept
    assert _numbers(sorter.sort(_make_teams())) == ["B", "C", "A"]


def test_missing_field_sorts_last_in_both_directions():
    teams = [
        TeamData("X", {}),
        TeamData("Y", {"score": 1}),
        TeamData("Z", {"score": 5}),
    ]

    assert _numbers(Sorter([SortKey("score")]).sort(teams)) == ["Y", "Z", "X"]
    assert _numbers(Sorter([SortKey("score", descending=True)]).sort(teams)) == ["Z", "Y", "X"]


def test_compare_values():
    assert compare_values(1, 2) == -1
    assert compare_values(2, 1) == 1
    assert compare_values(1, 2, descending=True) == 1
    assert compare_values("B", "a") == 1
    assert compare_values(3, "a") == -1
    assert compare_values(None, 1) == 1
    assert compare_values(None, None) == 0


def test_compare_walks_keys_in_order():
    a, b, c = _make_teams()
    sorter = Sorter([SortKey("score"), SortKey("name")])

    assert sorter.compare(a, b) == -1
    assert sorter.compare(a, c) == 1
    assert sorter.compare(c, c) == 0


def test_add_key_replaces_existing_field_in_place():
    sorter = Sorter([SortKey("score"), SortKey("name")])
    sorter.add_key("score", descending=True)

    assert sorter.keys == (SortKey("score", True), SortKey("name"))


def test_remove_key_and_reset():
    sorter = Sorter([SortKey("score"), SortKey("name")])

    assert sorter.remove_key("missing") is False
    assert sorter.remove_key("score") is True
    assert sorter.keys == (SortKey("name"),)

    sorter.reset()
    assert len(sorter) == 0
