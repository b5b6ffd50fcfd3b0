"""Integration tests for the voter-info CLI commands."""

import json
import uuid
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from voter_info.cli.app import app
from voter_info.services.feed_import_service import ImportResult

runner = CliRunner()


@pytest.fixture
def feed_file(tmp_path: Path, voter_info_document: dict) -> Path:
    path = tmp_path / "voterinfo.json"
    path.write_text(json.dumps(voter_info_document))
    return path


@pytest.fixture
def sqlite_db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI at a scratch SQLite file."""
    db_path = tmp_path / "cli.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    return db_path


class TestPopupCLI:
    """Tests for the `popup` command."""

    def test_name_and_party(self):
        result = runner.invoke(app, ["popup", "--name", "Jane Doe", "--party", "Independent"])
        assert result.exit_code == 0
        assert "Jane Doe" in result.stdout
        assert "Independent" in result.stdout
        assert "93x52" in result.stdout

    def test_html_format(self):
        result = runner.invoke(app, ["popup", "--name", "Jane Doe", "--format", "html"])
        assert result.exit_code == 0
        assert 'class="vi-popup"' in result.stdout

    def test_small_bounds_report_truncation(self):
        result = runner.invoke(
            app,
            ["popup", "--name", "Jane Doe", "--address", "1 Main St\\nColumbus, OH", "--max-height", "40"],
        )
        assert result.exit_code == 0
        assert "(truncated)" in result.stdout

    def test_non_positive_bounds(self):
        result = runner.invoke(app, ["popup", "--name", "Jane Doe", "--max-width", "0"])
        assert result.exit_code == 1

    def test_unknown_format(self):
        result = runner.invoke(app, ["popup", "--name", "Jane Doe", "--format", "pdf"])
        assert result.exit_code == 1

    def test_requires_name_or_feed(self):
        result = runner.invoke(app, ["popup"])
        assert result.exit_code == 1

    def test_from_feed(self, feed_file: Path):
        result = runner.invoke(app, ["popup", "--feed", str(feed_file)])
        assert result.exit_code == 0
        assert "Lincoln Elementary" in result.stdout

    def test_feed_index_out_of_range(self, feed_file: Path):
        result = runner.invoke(app, ["popup", "--feed", str(feed_file), "--index", "3"])
        assert result.exit_code == 1


class TestImportFeedCLI:
    """Tests for the `import-feed` command."""

    def test_reports_counts(self, feed_file: Path):
        fake = AsyncMock(return_value=ImportResult(contests_created=2, contests_updated=0, candidates_imported=2))
        with patch("voter_info.cli.import_cmd._import_impl", fake):
            result = runner.invoke(app, ["import-feed", str(feed_file)])

        assert result.exit_code == 0
        assert "Imported 2 candidates: 2 contests created, 0 updated" in result.stdout
        fake.assert_awaited_once()
        assert fake.await_args.args[1] is False

    def test_invalid_json(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        result = runner.invoke(app, ["import-feed", str(bad)])
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["import-feed", str(tmp_path / "missing.json")])
        assert result.exit_code != 0


class TestImportAndBrowse:
    """End-to-end: import into a scratch SQLite file, then browse with `candidates`."""

    def test_import_then_list(self, feed_file: Path, sqlite_db: Path):
        result = runner.invoke(app, ["import-feed", str(feed_file), "--create-tables"])
        assert result.exit_code == 0
        assert "2 contests created" in result.stdout

        contests = runner.invoke(app, ["candidates", "contests"])
        assert contests.exit_code == 0
        lines = contests.stdout.strip().splitlines()
        assert "Governor" in lines[0]
        governor_id = lines[0].split()[0]

        listing = runner.invoke(app, ["candidates", "list", governor_id])
        assert listing.exit_code == 0
        names = listing.stdout.strip().splitlines()
        assert "Amy Adams" in names[0]
        assert "Zed Zimmerman" in names[1]

    def test_reimport_updates_in_place(self, feed_file: Path, sqlite_db: Path):
        runner.invoke(app, ["import-feed", str(feed_file), "--create-tables"])
        result = runner.invoke(app, ["import-feed", str(feed_file)])
        assert result.exit_code == 0
        assert "0 contests created, 2 updated" in result.stdout

    def test_delete_candidate(self, feed_file: Path, sqlite_db: Path):
        runner.invoke(app, ["import-feed", str(feed_file), "--create-tables"])
        governor_id = runner.invoke(app, ["candidates", "contests"]).stdout.split()[0]
        first = runner.invoke(app, ["candidates", "list", governor_id]).stdout.strip().splitlines()[0]
        candidate_id = first.split()[-1]

        result = runner.invoke(app, ["candidates", "delete", candidate_id])
        assert result.exit_code == 0
        missing = runner.invoke(app, ["candidates", "delete", candidate_id])
        assert missing.exit_code == 1

    def test_invalid_contest_id(self):
        result = runner.invoke(app, ["candidates", "list", "not-a-uuid"])
        assert result.exit_code == 1

    def test_unknown_contest_lists_nothing(self, feed_file: Path, sqlite_db: Path):
        runner.invoke(app, ["import-feed", str(feed_file), "--create-tables"])
        result = runner.invoke(app, ["candidates", "list", str(uuid.uuid4())])
        assert result.exit_code == 0
        assert "No candidates found" in result.stdout
