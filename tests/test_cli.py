"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from unittest.mock import patch

import pytest

from ice_popsicles.cli import cmd_build, cmd_fetch, cmd_info, cmd_refresh, create_parser, main
from ice_popsicles.datasources.usgs import GageFetchError


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "ice-popsicles"

    def test_parser_has_version(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        args = create_parser().parse_args(["--debug", "info"])
        assert args.debug is True

    @pytest.mark.parametrize("command", ["fetch", "build", "refresh"])
    def test_states_default_none(self, command: str) -> None:
        args = create_parser().parse_args([command])
        assert args.command == command
        assert args.states is None

    def test_states_list(self) -> None:
        args = create_parser().parse_args(["fetch", "--states", "WI", "MN"])
        assert args.states == ["WI", "MN"]


class TestCommands:
    """Command handlers delegate to the flows."""

    def test_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cmd_info(argparse.Namespace()) == 0
        out = capsys.readouterr().out
        assert "ice-popsicles" in out
        assert "2020-11-01" in out

    def test_fetch(self) -> None:
        with patch("ice_popsicles.cli.fetch_all") as mock_fetch:
            mock_fetch.return_value = {"fetched": ["WI"], "skipped": [], "failed": []}
            assert cmd_fetch(argparse.Namespace(states=["WI"])) == 0
        mock_fetch.assert_called_once_with(states=["WI"])

    def test_build_ok(self) -> None:
        with patch("ice_popsicles.cli.build_all", return_value={"output": "x.png"}) as mock_build:
            assert cmd_build(argparse.Namespace(states=None)) == 0
        mock_build.assert_called_once_with(states=None)

    def test_build_no_data(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("ice_popsicles.cli.build_all", return_value={"error": "no data"}):
            assert cmd_build(argparse.Namespace(states=None)) == 1
        assert "no data" in capsys.readouterr().err

    def test_refresh_order(self) -> None:
        calls: list[str] = []
        with (
            patch("ice_popsicles.cli.fetch_all", side_effect=lambda **_: calls.append("fetch")),
            patch(
                "ice_popsicles.cli.build_all",
                side_effect=lambda **_: calls.append("build") or {"output": "x.png"},
            ),
        ):
            assert cmd_refresh(argparse.Namespace(states=["WI"])) == 0
        assert calls == ["fetch", "build"]


class TestMain:
    """Entry point dispatch."""

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("sys.argv", ["ice-popsicles"]):
            assert main() == 0
        assert "usage" in capsys.readouterr().out

    def test_fetch_failure_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        with (
            patch("sys.argv", ["ice-popsicles", "fetch", "--states", "OH"]),
            patch("ice_popsicles.cli.fetch_all", side_effect=GageFetchError("OH", "empty result")),
        ):
            assert main() == 1
        assert "OH" in capsys.readouterr().err

    def test_dispatches_info(self) -> None:
        with patch("sys.argv", ["ice-popsicles", "info"]):
            assert main() == 0
