"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from datetime import date
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, Any
from unittest.mock import patch

import pytest

from butterfly_gallery.cli import cmd_info, cmd_scan, cmd_search, cmd_stats, create_parser, main
from butterfly_gallery.flows.scan import OBSERVATIONS_PATH
from butterfly_gallery.schemas import Observation
from butterfly_gallery.store import DataStore

if TYPE_CHECKING:
    from collections.abc import Iterator


def _make_obs(**overrides: Any) -> Observation:
    fields: dict[str, Any] = {
        "species": "Danaus plexippus",
        "common_name": "Monarch",
        "full_image_url": "https://example.com/full.jpg",
        "thumbnail_url": "https://example.com/thumb.jpg",
        "has_data_title": True,
    }
    fields.update(overrides)
    return Observation(**fields)


def _search_args(**overrides: Any) -> argparse.Namespace:
    values: dict[str, Any] = {
        "species": None,
        "location": None,
        "date_from": None,
        "date_to": None,
        "page": 1,
        "page_size": None,
        "debug": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.fixture
def saved_store(tmp_path: Path) -> Iterator[DataStore]:
    """A store holding three observations, patched into the CLI."""
    store = DataStore(tmp_path)
    store.write_observations(
        OBSERVATIONS_PATH,
        [
            _make_obs(location="Tucson, AZ", observed_on=date(2025, 3, 1), source_page="Arizona"),
            _make_obs(
                species="Danaus gilippus",
                common_name="Queen",
                location="Miami, FL",
                source_page="Florida",
            ),
            _make_obs(
                species="Unknown Species",
                common_name="Unknown",
                has_data_title=False,
                source_page="Florida",
            ),
        ],
        source="test",
    )
    with patch("butterfly_gallery.cli.store", store):
        yield store


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "butterfly-gallery"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_scan_command(self) -> None:
        """Parser accepts scan command with --force."""
        parser = create_parser()
        args = parser.parse_args(["scan", "--force"])
        assert args.command == "scan"
        assert args.force is True

    def test_parser_scan_default(self) -> None:
        """Scan does not force by default."""
        parser = create_parser()
        args = parser.parse_args(["scan"])
        assert args.force is False

    def test_parser_search_command(self) -> None:
        """Parser maps --from/--to onto date fields."""
        parser = create_parser()
        args = parser.parse_args(
            ["search", "--species", "monarch", "--location", "AZ", "--from", "2025-01-01"]
        )
        assert args.command == "search"
        assert args.species == "monarch"
        assert args.location == "AZ"
        assert args.date_from == "2025-01-01"
        assert args.date_to is None
        assert args.page == 1
        assert args.page_size is None

    def test_parser_stats_command(self) -> None:
        """Parser accepts stats command."""
        parser = create_parser()
        args = parser.parse_args(["stats"])
        assert args.command == "stats"


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        """Info command returns exit code 0."""
        args = argparse.Namespace()
        exit_code = cmd_info(args)
        assert exit_code == 0

    def test_prints_app_info(self) -> None:
        """Info command prints application information."""
        args = argparse.Namespace()

        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_info(args)
            output = mock_stdout.getvalue()
            assert "Application" in output
            assert "Data dir" in output


class TestCmdScan:
    """Tests for cmd_scan function."""

    def test_success_returns_zero(self) -> None:
        """Successful scan returns exit code 0."""
        args = argparse.Namespace(force=False, debug=False)

        with patch("butterfly_gallery.cli.scan_all_pages") as mock_scan:
            mock_scan.return_value = {"observations": 10, "pages": 8, "errors": {}}
            exit_code = cmd_scan(args)
            assert exit_code == 0
            mock_scan.assert_called_once_with(force=False)

    def test_passes_force(self) -> None:
        """--force is passed to the flow."""
        args = argparse.Namespace(force=True, debug=False)

        with patch("butterfly_gallery.cli.scan_all_pages") as mock_scan:
            mock_scan.return_value = {"observations": 0, "pages": 0, "errors": {}, "skipped": True}
            cmd_scan(args)
            mock_scan.assert_called_once_with(force=True)

    def test_partial_failure_returns_zero(self) -> None:
        """Some pages failing still counts as a successful scan."""
        args = argparse.Namespace(force=False, debug=False)

        with (
            patch("butterfly_gallery.cli.scan_all_pages") as mock_scan,
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            mock_scan.return_value = {
                "observations": 5,
                "pages": 2,
                "errors": {"a.html": "timed out"},
                "skipped": False,
            }
            assert cmd_scan(args) == 0
            assert "a.html" in mock_stderr.getvalue()

    def test_all_pages_failed_returns_one(self) -> None:
        """Every page failing returns exit code 1."""
        args = argparse.Namespace(force=False, debug=False)

        with (
            patch("butterfly_gallery.cli.scan_all_pages") as mock_scan,
            patch("sys.stderr", new=StringIO()),
        ):
            mock_scan.return_value = {
                "observations": 0,
                "pages": 1,
                "errors": {"a.html": "timed out"},
                "skipped": False,
            }
            assert cmd_scan(args) == 1

    def test_debug_mode_prints_settings(self) -> None:
        """Debug mode prints settings."""
        args = argparse.Namespace(force=False, debug=True)

        with (
            patch("butterfly_gallery.cli.scan_all_pages") as mock_scan,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            mock_scan.return_value = {"observations": 0, "pages": 0, "errors": {}, "skipped": True}
            cmd_scan(args)
            assert "Settings" in mock_stdout.getvalue()


class TestCmdSearch:
    """Tests for cmd_search function."""

    def test_no_filters_lists_everything(self, saved_store: DataStore) -> None:
        """Search without criteria shows all records."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            exit_code = cmd_search(_search_args())
            output = mock_stdout.getvalue()

        assert exit_code == 0
        assert "Showing 1-3 of 3 matching species" in output
        assert "(filtered)" not in output

    def test_location_filter(self, saved_store: DataStore) -> None:
        """Location search narrows results and marks them filtered."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            exit_code = cmd_search(_search_args(location="arizona"))
            output = mock_stdout.getvalue()

        assert exit_code == 0
        assert "Showing 1-1 of 1 matching species (filtered)" in output
        assert "Tucson, AZ" in output
        assert "2025-03-01" in output

    def test_invalid_date_returns_two(self, saved_store: DataStore) -> None:
        """A bad date is reported as a usage error."""
        with patch("sys.stderr", new=StringIO()) as mock_stderr:
            exit_code = cmd_search(_search_args(date_from="yesterday"))

        assert exit_code == 2
        assert "invalid search" in mock_stderr.getvalue()

    def test_no_saved_data_returns_one(self, tmp_path: Path) -> None:
        """Search before any scan returns 1."""
        with (
            patch("butterfly_gallery.cli.store", DataStore(tmp_path)),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = cmd_search(_search_args())

        assert exit_code == 1
        assert "scan" in mock_stderr.getvalue()

    def test_paging(self, saved_store: DataStore) -> None:
        """Page size splits results."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_search(_search_args(page=2, page_size=2))
            output = mock_stdout.getvalue()

        assert "Showing 3-3 of 3" in output
        assert "Page 2 of 2: 1 [2]" in output


class TestCmdStats:
    """Tests for cmd_stats function."""

    def test_prints_counts(self, saved_store: DataStore) -> None:
        """Stats lists totals per page and unidentified count."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            exit_code = cmd_stats(argparse.Namespace())
            output = mock_stdout.getvalue()

        assert exit_code == 0
        assert "Total images: 3" in output
        assert "Florida: 2" in output
        assert "Unknown species/names: 1/3" in output

    def test_no_saved_data_returns_one(self, tmp_path: Path) -> None:
        """Stats before any scan returns 1."""
        with (
            patch("butterfly_gallery.cli.store", DataStore(tmp_path)),
            patch("sys.stderr", new=StringIO()),
        ):
            assert cmd_stats(argparse.Namespace()) == 1


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        """No command shows help and exits 0."""
        with patch("sys.argv", ["butterfly-gallery"]):
            exit_code = main()
            assert exit_code == 0

    def test_info_command_executes(self) -> None:
        """Info command executes successfully."""
        with (
            patch("sys.argv", ["butterfly-gallery", "info"]),
            patch("butterfly_gallery.cli.cmd_info") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            exit_code = main()
            assert exit_code == 0
            mock_cmd.assert_called_once()

    def test_scan_command_executes(self) -> None:
        """Scan command executes successfully."""
        with (
            patch("sys.argv", ["butterfly-gallery", "scan"]),
            patch("butterfly_gallery.cli.cmd_scan") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            exit_code = main()
            assert exit_code == 0
            mock_cmd.assert_called_once()

    def test_search_command_executes(self) -> None:
        """Search command executes successfully."""
        with (
            patch("sys.argv", ["butterfly-gallery", "search", "--species", "monarch"]),
            patch("butterfly_gallery.cli.cmd_search") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            exit_code = main()
            assert exit_code == 0
            assert mock_cmd.call_args[0][0].species == "monarch"

    def test_unknown_command_shows_help(self) -> None:
        """Unknown command shows help and returns 1."""
        with (
            patch("sys.argv", ["butterfly-gallery", "info"]),
            patch("butterfly_gallery.cli.create_parser") as mock_parser,
        ):
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(command="unknown")
            exit_code = main()
            assert exit_code == 1
