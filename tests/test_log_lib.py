"""
Tests for lib.log_lib — THAC0 verbosity system with named channels.

Covers level ordering, per-channel overrides, opt-in channels,
channel_active gating, channel spec parsing, hints and tracing.
"""

import io

import pytest

from clihelp.channels import configure_channels
from clihelp.lib.log_lib import (
    Hint,
    OutputManager,
    get_output,
    init_output,
    register_hint,
    trace,
)
from clihelp.lib.log_lib.channels import (
    ChannelConfig,
    format_channel_list,
    parse_channel_spec,
)
from clihelp.lib.log_lib.levels import (
    DEBUG, RENDER, DETAIL, DEFAULT, MINIMAL, WARNING, ERROR, NOTHING,
)


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def out(buf):
    """An OutputManager writing to a buffer (verbosity=0)."""
    return OutputManager(verbosity=0, file=buf)


# =============================================================================
# Level constants
# =============================================================================

class TestLevelConstants:

    def test_level_ordering(self):
        assert NOTHING < ERROR < WARNING < MINIMAL < DEFAULT < DETAIL < RENDER < DEBUG

    def test_specific_values(self):
        assert DEFAULT == 0
        assert NOTHING == -4
        assert ERROR == -3
        assert DEBUG == 3


# =============================================================================
# Emit
# =============================================================================

class TestEmit:

    def test_level_at_threshold_shown(self, out, buf):
        out.emit(0, "shown")
        assert "shown" in buf.getvalue()

    def test_level_above_threshold_hidden(self, out, buf):
        out.emit(1, "hidden")
        assert buf.getvalue() == ""

    def test_format_kwargs(self, out, buf):
        out.emit(0, "Loaded {count} commands", count=3)
        assert buf.getvalue() == "Loaded 3 commands\n"

    def test_braces_untouched_without_kwargs(self, out, buf):
        out.emit(0, "literal {braces}")
        assert buf.getvalue() == "literal {braces}\n"

    def test_warning_level(self, buf):
        out = OutputManager(verbosity=-2, file=buf)
        out.warning("careful", channel='config')
        assert "careful" in buf.getvalue()

    def test_warning_hidden_at_QQQ(self, buf):
        out = OutputManager(verbosity=-3, file=buf)
        out.warning("careful")
        assert buf.getvalue() == ""

    def test_error_shown_at_QQQ(self, buf):
        out = OutputManager(verbosity=-3, file=buf)
        out.error("broken")
        assert "broken" in buf.getvalue()

    def test_hard_wall_blocks_errors(self, buf):
        out = OutputManager(verbosity=-4, file=buf)
        out.error("blocked")
        assert buf.getvalue() == ""


class TestPerChannelOverrides:

    def test_channel_override_shows_message(self, buf):
        out = OutputManager(verbosity=0, channel_overrides={'render': 2}, file=buf)
        out.emit(2, "render detail", channel='render')
        assert "render detail" in buf.getvalue()

    def test_channel_override_hides_message(self, buf):
        out = OutputManager(verbosity=2, channel_overrides={'render': 0}, file=buf)
        out.emit(1, "hidden", channel='render')
        assert buf.getvalue() == ""

    def test_global_threshold_used_without_override(self, buf):
        out = OutputManager(verbosity=1, channel_overrides={'render': 2}, file=buf)
        out.emit(1, "general msg")
        assert "general msg" in buf.getvalue()

    def test_hard_wall_on_channel(self, buf):
        out = OutputManager(verbosity=2, channel_overrides={'render': -4}, file=buf)
        out.emit(-3, "even errors", channel='render')
        assert buf.getvalue() == ""


class TestChannelActive:

    def test_default_channel_active_at_v0(self, out):
        assert out.channel_active('general') is True

    def test_inactive_at_negative(self, buf):
        assert OutputManager(verbosity=-1, file=buf).channel_active('general') is False

    def test_opt_in_channel_inactive_by_default(self):
        assert init_output(verbosity=0).channel_active('trace') is False

    def test_opt_in_channel_enabled_explicitly(self):
        assert init_output(verbosity=0, channels=['trace']).channel_active('trace') is True

    def test_project_opt_in_set_used(self):
        """init_output reads the channel set installed at startup."""
        configure_channels()
        mgr = init_output(verbosity=0)
        assert mgr.channel_overrides == {'trace': -1}


# =============================================================================
# Singleton
# =============================================================================

class TestSingleton:

    def test_get_output_creates_default(self):
        assert get_output().verbosity == 0

    def test_init_output_replaces_singleton(self):
        mgr = init_output(verbosity=2, channels=['render:3'])
        assert get_output() is mgr
        assert mgr.threshold('render') == 3
        assert mgr.threshold('config') == 2


# =============================================================================
# Channel specs
# =============================================================================

class TestParseChannelSpec:

    def test_name_only(self):
        assert parse_channel_spec("render") == ChannelConfig(name="render", level=0)

    def test_name_and_level(self):
        assert parse_channel_spec("render:2") == ChannelConfig(name="render", level=2)

    def test_negative_level(self):
        assert parse_channel_spec("trace:-1").level == -1

    def test_empty_level(self):
        assert parse_channel_spec("render:").level == 0

    def test_bad_level(self):
        with pytest.raises(ValueError):
            parse_channel_spec("render:loud")


class TestFormatChannelList:

    def test_default_channels(self):
        text = format_channel_list()
        assert text.startswith("Available channels:")
        assert "general" in text

    def test_project_channels(self):
        configure_channels()
        text = format_channel_list()
        for name in ('render', 'resolve', 'registry', 'config'):
            assert name in text
        assert "Function call tracing (opt-in)" in text


# =============================================================================
# Hints
# =============================================================================

class TestHints:

    @pytest.fixture(autouse=True)
    def _hint(self):
        register_hint(Hint(id='test.once', message="tip {what}",
                           context={'result'}, min_level=0))

    def test_hint_shown_once(self, out, buf):
        out.hint('test.once', 'result', what="here")
        out.hint('test.once', 'result', what="again")
        assert buf.getvalue() == "tip here\n"
        assert 'test.once' in out.shown_hints

    def test_wrong_context_not_shown(self, out, buf):
        out.hint('test.once', 'error')
        assert buf.getvalue() == ""

    def test_unknown_hint_ignored(self, out, buf):
        out.hint('test.missing')
        assert buf.getvalue() == ""

    def test_hint_hidden_at_Q(self, buf):
        out = OutputManager(verbosity=-1, file=buf)
        out.hint('test.once', 'result')
        assert buf.getvalue() == ""


# =============================================================================
# Trace
# =============================================================================

@trace
def _double(x):
    return x * 2


@trace
def _fail():
    raise RuntimeError("nope")


class TestTrace:

    def test_silent_by_default(self, buf):
        init_output(verbosity=0, file=buf)
        assert _double(2) == 4
        assert buf.getvalue() == ""

    def test_traces_when_enabled(self, buf):
        init_output(verbosity=0, channels=['trace:3'], file=buf)
        assert _double(21) == 42
        text = buf.getvalue()
        assert "[TRACE] >> " in text and "_double(21)" in text
        assert "returned: 42" in text

    def test_traces_exceptions(self, buf):
        init_output(verbosity=0, channels=['trace:3'], file=buf)
        with pytest.raises(RuntimeError):
            _fail()
        assert "raised: RuntimeError: nope" in buf.getvalue()

    def test_long_arguments_shortened(self, buf):
        init_output(verbosity=0, channels=['trace:3'], file=buf)
        _double("x" * 60)
        assert "..." in buf.getvalue()
