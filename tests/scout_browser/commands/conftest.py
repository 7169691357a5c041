import pytest

from scout_browser.context import build_context
from scout_browser.config.model import Configuration


@pytest.fixture
def context(tmp_path):
    data_file = tmp_path / "data.csv"
    data_file.write_text(
        "team,auto,drive\n"
        "254,10,swerve\n"
        "1678,20,tank\n"
        "971,10,swerve\n"
        "frc118,5,\n"
    )
    return build_context(Configuration(team="254", data_file=data_file, decimal_places=1))
