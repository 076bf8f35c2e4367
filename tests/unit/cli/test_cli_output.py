"""Unit tests for cli.output module."""

from io import StringIO

import pytest
from rich.console import Console

from src.cli.output import MASK, OutputHandler
from src.file_mapper.models import SyncConfig
from src.sync_engine.models import SyncPassResult
from src.sync_engine.notifier import Notifier
from tests.fixtures.sample_objects import make_config


def _handler(verbosity=0):
    """Return an OutputHandler whose console writes to a buffer."""
    handler = OutputHandler(verbosity=verbosity, no_color=True)
    handler.console = Console(file=StringIO(), no_color=True, highlight=False, width=120)
    return handler


def _text(handler):
    return handler.console.file.getvalue()


class TestOutputHandlerInit:
    """Test cases for OutputHandler initialization."""

    def test_defaults(self):
        handler = OutputHandler()

        assert handler.verbosity == 0
        assert handler.console is not None

    def test_is_a_notifier(self):
        assert isinstance(OutputHandler(), Notifier)


class TestMessages:
    """Test cases for message methods and verbosity gating."""

    def test_notice(self):
        handler = _handler()

        handler.notice("No new documents to sync")

        assert "No new documents to sync" in _text(handler)

    @pytest.mark.parametrize("method,symbol", [
        ("success", "✓"),
        ("error", "✗"),
        ("warning", "⚠"),
    ])
    def test_symbols(self, method, symbol):
        handler = _handler()

        getattr(handler, method)("message")

        assert f"{symbol} message" in _text(handler)

    def test_info_hidden_at_verbosity_0(self):
        handler = _handler(verbosity=0)

        handler.info("details")

        assert _text(handler) == ""

    def test_info_shown_at_verbosity_1(self):
        handler = _handler(verbosity=1)

        handler.info("details")

        assert "details" in _text(handler)

    def test_debug_requires_verbosity_2(self):
        quiet = _handler(verbosity=1)
        loud = _handler(verbosity=2)

        quiet.debug("trace")
        loud.debug("trace")

        assert _text(quiet) == ""
        assert "trace" in _text(loud)


class TestPrintSummary:
    """Test cases for OutputHandler.print_summary()."""

    def test_incomplete_pass(self):
        handler = _handler()

        handler.print_summary(None)

        assert "Sync did not complete" in _text(handler)

    def test_nothing_new(self):
        handler = _handler()

        handler.print_summary(SyncPassResult(new_watermark=5))

        assert "Already in sync" in _text(handler)

    def test_clean_pass(self):
        handler = _handler()

        handler.print_summary(SyncPassResult(candidate_count=2, success_count=2))

        text = _text(handler)
        assert "Imported: 2 document(s)" in text
        assert "Sync completed successfully" in text

    def test_pass_with_failures_lists_keys_at_debug(self):
        handler = _handler(verbosity=2)

        handler.print_summary(SyncPassResult(
            candidate_count=3,
            success_count=1,
            failed_keys=["docs/a.md"],
            skipped_keys=["docs/b.md"],
        ))

        text = _text(handler)
        assert "Failed: 1 document(s)" in text
        assert "Not downloaded: 1 document(s)" in text
        assert "docs/a.md" in text
        assert "docs/b.md" in text
        assert "Sync completed with errors" in text


class TestPrintConfig:
    """Test cases for OutputHandler.print_config()."""

    def test_secret_is_masked(self):
        handler = _handler()
        config = make_config()

        handler.print_config(config)

        text = _text(handler)
        assert MASK in text
        assert config.access_secret not in text
        assert config.bucket_name in text

    def test_never_synced(self):
        handler = _handler()

        handler.print_config(SyncConfig())

        text = _text(handler)
        assert "never synced" in text
        assert "last_sync_timestamp" not in text

    def test_watermark_shown_once_synced(self):
        handler = _handler()

        handler.print_config(make_config(
            last_sync_time="2024-01-15T10:30:00+00:00",
            last_sync_timestamp=1705314600000,
        ))

        text = _text(handler)
        assert "1705314600000" in text
        assert "never synced" not in text
