"""
tests/unit/test_cli.py - Tests for the command line interface.
"""

import json

import pytest

from fleetwatch.cli import build_parser, run_view
from tests.conftest import FakeRepository


def run(argv, repository, capsys):
    args = build_parser().parse_args(argv)
    code = run_view(args, repository)
    return code, capsys.readouterr()


@pytest.fixture
def repository(fleet_records):
    repo = FakeRepository({"V1": fleet_records, "EMPTY": []})
    repo.fail_with["DOWN"] = "timeout"
    return repo


class TestParser:
    """Tests for argument parsing."""

    def test_tree_defaults(self):
        args = build_parser().parse_args(["tree", "V1"])

        assert args.command == "tree"
        assert args.search == ""
        assert args.critical == "all"
        assert args.expand_all is False

    def test_rejects_unknown_criticality(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["tree", "V1", "--critical", "sometimes"])


class TestRunView:
    """Tests for run_view()."""

    def test_tree_collapsed(self, repository, capsys):
        code, out = run(["tree", "V1"], repository, capsys)

        assert code == 0
        lines = out.out.splitlines()
        assert len(lines) == 2
        assert "Main Engine" in lines[0]
        assert "Steering Gear" in lines[1]

    def test_tree_expand_all(self, repository, capsys):
        code, out = run(["tree", "V1", "--expand-all"], repository, capsys)

        assert code == 0
        assert len(out.out.splitlines()) == 6

    def test_tree_json_filtered(self, repository, capsys):
        code, out = run(["tree", "V1", "--search", "rudder", "--json"], repository, capsys)

        roots = json.loads(out.out)
        assert [r["name"] for r in roots] == ["Steering Gear"]
        assert [c["name"] for c in roots[0]["children"]] == ["Rudder Actuator"]

    def test_inventory_critical(self, repository, capsys):
        code, out = run(["inventory", "V1", "--critical", "critical"], repository, capsys)

        assert code == 0
        assert "Spare Turbocharger" in out.out
        assert "Spare Fuel Pump" not in out.out

    def test_stats_json(self, repository, capsys):
        code, out = run(["stats", "V1", "--json"], repository, capsys)

        assert json.loads(out.out) == {
            "total": 8, "mounted": 6, "inventory": 2, "critical": 3, "normal": 3,
        }

    def test_empty_tree_message(self, repository, capsys):
        code, out = run(["tree", "EMPTY"], repository, capsys)

        assert code == 0
        assert out.out.strip() == "No installed components for EMPTY."

    def test_fetch_failure(self, repository, capsys):
        code, out = run(["stats", "DOWN"], repository, capsys)

        assert code == 1
        assert "COMP_001" in out.err
