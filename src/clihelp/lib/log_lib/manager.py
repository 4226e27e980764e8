"""
OutputManager — the THAC0 verbosity system core.

A message is emitted when message.level <= threshold, where the threshold
is the per-channel override if one is set and the global verbosity
otherwise. A threshold of -4 is a hard wall: nothing is emitted.

    -v increments, -Q decrements. They compose: -vv -Q = 1
"""

import sys
from typing import Any, Dict, Optional, Set, TextIO

from . import channels as _channels
from .hints import get_hint


class OutputManager:
    """Central coordinator for verbosity-gated output.

    Everything is written to ``file`` (stderr by default) so that the
    primary output of a command (rendered help) stays clean on stdout.

    Usage::

        out = OutputManager(verbosity=1)
        out.emit(1, "Loaded {count} commands", channel='config', count=3)
        out.hint('registry.list', 'error')
        out.error("No such command: deploy")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stderr
        self._shown_hints: Set[str] = set()

    def threshold(self, channel: str) -> int:
        """Return the effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Emit a message if level <= threshold for that channel.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (uses str.format with kwargs)
            channel: Output channel name
            **kwargs: Values for template placeholders
        """
        threshold = self.threshold(channel)
        if threshold <= -4 or level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file)

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a registered hint once per session, if context and level allow."""
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return

        threshold = self.threshold('hint')
        if threshold <= -4 or h.min_level > threshold:
            return

        text = h.message.format(**kwargs) if kwargs else h.message
        print(text, file=self.file)
        self._shown_hints.add(hint_id)

    def warning(self, message: str, *, channel: str = 'general',
                **kwargs: Any) -> None:
        """Emit a warning (level -2) on the given channel."""
        self.emit(-2, message, channel=channel, **kwargs)

    def error(self, message: str) -> None:
        """Emit an error (level -3); shown everywhere except the hard wall."""
        self.emit(-3, message, channel='error')

    def channel_active(self, channel: str) -> bool:
        """True if a level-0 message on this channel would be shown."""
        threshold = self.threshold(channel)
        return threshold > -4 and 0 <= threshold

    @property
    def shown_hints(self) -> Set[str]:
        return self._shown_hints.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: list = None,
                file: TextIO = None) -> OutputManager:
    """Initialize the module-level OutputManager singleton.

    Call once at program startup after parsing CLI arguments.

    Args:
        verbosity: THAC0 verbosity (0=default, positive=verbose, negative=quiet)
        channels: Channel spec strings (e.g. ['render:2', 'trace'])
        file: Output stream, stderr when omitted

    Returns:
        The initialized OutputManager instance
    """
    global _manager

    # Opt-in channels stay off unless named explicitly
    channel_overrides = {ch: -1 for ch in _channels.OPT_IN_CHANNELS}

    for spec in channels or []:
        cfg = _channels.parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _manager


def get_output() -> OutputManager:
    """Get the module-level OutputManager, creating a default if needed."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
