import io

from scout_browser.config.model import Configuration
from scout_browser.context import build_context
from scout_browser.shell import run_shell


def _make_context(tmp_path):
    data_file = tmp_path / "data.csv"
    data_file.write_text("team,auto\n254,10\n1678,20\n")
    return build_context(Configuration(team="254", motd="Hello scouts", data_file=data_file))


def test_shell_runs_until_exit(tmp_path):
    context = _make_context(tmp_path)
    stdin = io.StringIO("bogus\nteam 1678\nexit\nteam 254\n")
    stdout = io.StringIO()

    run_shell(context, stdin=stdin, stdout=stdout)
    output = stdout.getvalue()

    assert output.startswith("Hello scouts\nSCI@254: ")
    assert 'Unrecognized command: "bogus"' in output
    assert "Team 1678" in output
    assert "Team 254" not in output
    assert "Program terminated." in output


def test_shell_stops_on_eof(tmp_path):
    stdout = io.StringIO()

    run_shell(_make_context(tmp_path), stdin=io.StringIO("groups\n"), stdout=stdout)

    assert "Terminating Scouting Computer Interface..." in stdout.getvalue()


def test_context_builds_team_map_and_registry(tmp_path):
    context = _make_context(tmp_path)

    assert context.find_team(" 1678 ").team_number == "1678"
    assert context.find_team("9") is None
    assert context.groups.all_group.get_team_list() == context.teams
