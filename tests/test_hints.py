"""Tests for clihelp.hints — project hints."""

import io

import pytest

from clihelp.lib.log_lib import OutputManager, get_hint


@pytest.fixture(autouse=True)
def _import_hints():
    """Ensure clihelp hints are registered."""
    import clihelp.hints  # noqa: F401


class TestHintsRegistered:

    @pytest.mark.parametrize("hint_id,category", [
        ('registry.list', 'registry'),
        ('config.define', 'config'),
        ('option.syntax', 'option'),
    ])
    def test_hint_exists(self, hint_id, category):
        h = get_hint(hint_id)
        assert h is not None, f"Hint '{hint_id}' not registered"
        assert h.category == category


class TestHintFiringInContext:

    def test_error_hint_shows_at_default(self):
        buf = io.StringIO()
        out = OutputManager(verbosity=0, file=buf)
        out.hint('registry.list', 'error')
        assert "clihelp list" in buf.getvalue()

    def test_error_hint_not_shown_for_results(self):
        buf = io.StringIO()
        out = OutputManager(verbosity=0, file=buf)
        out.hint('registry.list', 'result')
        assert buf.getvalue() == ""

    def test_verbose_hint_needs_v(self):
        buf = io.StringIO()
        OutputManager(verbosity=0, file=buf).hint('option.syntax', 'verbose')
        assert buf.getvalue() == ""
        OutputManager(verbosity=1, file=buf).hint('option.syntax', 'verbose')
        assert "repeatable" in buf.getvalue()

    def test_hint_suppressed_by_quiet(self):
        buf = io.StringIO()
        out = OutputManager(verbosity=-1, file=buf)
        out.hint('config.define', 'error')
        assert buf.getvalue() == ""
