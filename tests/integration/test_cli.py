"""Integration tests for the typer CLI over the packaged corpus."""

import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from zibra.adapters.inbound.cli.commands import app
from zibra.composition import container
from zibra.config.settings import Settings

runner = CliRunner()

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def fresh_container():
    container.reset_container()
    yield
    container.reset_container()
    # the CLI callback binds log handlers to the runner's output stream
    logging.getLogger("zibra").handlers.clear()


class TestRespond:
    def test_matched_template(self):
        result = runner.invoke(app, ["respond", "topup please", "--role", "rider"])

        assert result.exit_code == 0
        assert "r-wallet-topup" in result.output

    def test_fallback_template(self):
        result = runner.invoke(app, ["respond", "xyzzy", "-r", "driver"])

        assert result.exit_code == 0
        assert "x-general-help" in result.output
        assert "fallback" in result.output

    def test_unknown_role(self):
        result = runner.invoke(app, ["respond", "hello", "--role", "pilot"])

        assert result.exit_code == 2
        assert "Unknown role" in result.output


class TestSearch:
    def test_results_table(self):
        result = runner.invoke(app, ["search", "cash trip"])

        assert result.exit_code == 0
        assert "ct-1" in result.output

    def test_no_close_matches(self):
        result = runner.invoke(app, ["search", "zzzqqq"])

        assert result.exit_code == 0
        assert "No close matches" in result.output
        assert "gs-1" in result.output

    def test_category_filter(self):
        result = runner.invoke(app, ["search", "zzzqqq", "--category", "safety"])

        assert "sf-1" in result.output
        assert "gs-1" not in result.output


class TestAuditAndStatus:
    def test_packaged_corpus_passes_audit(self):
        result = runner.invoke(app, ["audit"])

        assert result.exit_code == 0
        assert "All 5 checks passed" in result.output

    def test_status(self):
        result = runner.invoke(app, ["status"])

        assert result.exit_code == 0
        assert "Response templates: 38" in result.output
        assert "x-general-help" in result.output

    def test_misconfigured_corpus(self, tmp_path):
        broken = Settings(_env_file=None, corpus_dir=tmp_path / "missing")

        with patch.object(container, "settings", broken):
            result = runner.invoke(app, ["audit"])

        assert result.exit_code == 1
        assert "ZB_CFG_002" in result.output


class TestServe:
    def test_runs_uvicorn(self):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "9001"])

        assert result.exit_code == 0
        args, kwargs = mock_run.call_args
        assert args[0] == "zibra.adapters.inbound.api.main:app"
        assert kwargs["port"] == 9001
