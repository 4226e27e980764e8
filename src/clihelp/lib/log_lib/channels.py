"""
Channel configuration and parsing for the THAC0 verbosity system.

Channels are named output categories. Each channel may carry its own
threshold that overrides the global verbosity. The defaults below are
deliberately small; applications swap in their own set at startup
(see ``clihelp.channels``).

Channel spec syntax:
    CHANNEL[:LEVEL]

    Examples:
        resolve         # level 0
        render:2        # level 2
        trace:-1        # switched off
"""

from dataclasses import dataclass


KNOWN_CHANNELS = {
    'general',      # Default channel
    'hint',         # Hint messages
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

CHANNEL_DESCRIPTIONS = {
    'general':  'General output',
    'hint':     'Contextual tips and suggestions',
    'error':    'Error messages',
    'trace':    'Function call tracing',
}

# Channels that stay silent unless enabled with --show.
OPT_IN_CHANNELS = {
    'trace',
}


@dataclass
class ChannelConfig:
    """Threshold override for a single output channel."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a ``CHANNEL[:LEVEL]`` spec into a ChannelConfig.

    An empty level slot (``render:``) means level 0.

    Raises:
        ValueError: If the level is not an integer.
    """
    name, _, level = spec.partition(':')
    name = name.strip()
    level = level.strip()
    return ChannelConfig(name=name, level=int(level) if level else 0)


def format_channel_list() -> str:
    """Format the currently known channels for display."""
    lines = ["Available channels:"]
    max_name = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{max_name}}  {desc}{opt_in}")
    return "\n".join(lines)
