"""
Smoke tests for the command line interface.
"""

import pytest
from rich.console import Console
from typer.testing import CliRunner

from zoneclock import __version__
from zoneclock.cli.app import app

runner = CliRunner()

CONFIG_YAML = """
timezone: Europe/Berlin
teams: [Engineering, Product]
people:
  - name: Jordan
    timezone: America/New_York
    team: Product
  - name: Alex
    timezone: Europe/London
    team: Engineering
  - name: Kenji
    timezone: Asia/Tokyo
    team: Product
"""


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep tables from wrapping cells in the captured output."""
    monkeypatch.setattr("zoneclock.cli.app.console", Console(width=200))


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


def test_now_at_fixed_instant(config_path):
    result = runner.invoke(app, ["now", "-c", str(config_path), "--at", "2024-11-25T15:00:00Z"])

    assert result.exit_code == 0, result.output
    assert "Jordan" in result.output
    assert "10:00" in result.output
    assert "UTC-5" in result.output
    assert "No full overlap found" in result.output


def test_now_for_team(config_path):
    result = runner.invoke(
        app,
        ["now", "-c", str(config_path), "--team", "product", "--at", "2024-11-25T15:00:00Z"],
    )

    assert result.exit_code == 0, result.output
    assert "Kenji" in result.output
    assert "Alex" not in result.output


def test_meetings_for_date(config_path):
    result = runner.invoke(
        app, ["meetings", "-c", str(config_path), "--team", "Engineering", "--date", "2024-11-25"]
    )

    assert result.exit_code == 0, result.output
    # London 09-17 shown in Berlin time
    assert "10:00 – 18:00" in result.output
    assert "8h" in result.output


def test_unknown_team(config_path):
    result = runner.invoke(app, ["meetings", "-c", str(config_path), "--team", "Sales"])

    assert result.exit_code == 1
    assert "Unknown team" in result.output


def test_invalid_date(config_path):
    result = runner.invoke(app, ["meetings", "-c", str(config_path), "--date", "25.11.2024"])

    assert result.exit_code == 1
    assert "Error parsing date" in result.output


def test_at_and_watch_are_exclusive(config_path):
    result = runner.invoke(app, ["now", "-c", str(config_path), "--at", "2024-11-25T15:00:00Z", "--watch"])

    assert result.exit_code == 1


def test_missing_config(tmp_path):
    result = runner.invoke(app, ["list-people", "-c", str(tmp_path / "nope.yaml")])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_list_people(config_path):
    result = runner.invoke(app, ["list-people", "-c", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "Kenji" in result.output
    assert "09:00 - 17:00" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_at_rejects_non_datetime(config_path):
    """A duration is parseable but is not an instant."""
    result = runner.invoke(app, ["now", "-c", str(config_path), "--at", "P1D"])

    assert result.exit_code == 1
    assert "Error parsing --at" in result.output
    assert not isinstance(result.exception, AttributeError)


def test_meetings_for_selected_people(config_path):
    result = runner.invoke(
        app,
        ["meetings", "-c", str(config_path), "-p", "jordan", "-p", "Alex", "--date", "2024-11-25"],
    )

    assert result.exit_code == 0, result.output
    assert "Participants: Jordan, Alex" in result.output
    # New York and London share 14:00-17:00 UTC, shown in Berlin time
    assert "15:00 – 18:00" in result.output
    assert "Kenji" not in result.output


def test_unknown_person(config_path):
    result = runner.invoke(app, ["now", "-c", str(config_path), "--person", "Nobody"])

    assert result.exit_code == 1
    assert "Unknown person(s): Nobody" in result.output


def test_list_people_verbose(config_path):
    result = runner.invoke(app, ["list-people", "-c", str(config_path), "--verbose"])

    assert result.exit_code == 0, result.output
    assert "Jordan" in result.output
