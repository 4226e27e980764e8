"""clihelp channel definitions for the THAC0 verbosity system.

Keeps log_lib itself project-agnostic: this module swaps the clihelp
channel set into log_lib at startup.
"""

from clihelp.lib.log_lib import channels as _ch


CLIHELP_CHANNELS = {
    'render',       # Section assembly
    'resolve',      # Option spec resolution
    'registry',     # Help document registration
    'config',       # Config file loading
    'general',      # Default channel
    'hint',         # Contextual tips and suggestions
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

CLIHELP_CHANNEL_DESCRIPTIONS = {
    'render':   'Help section assembly',
    'resolve':  'Option spec resolution and normalization',
    'registry': 'Help document registration',
    'config':   'Config file discovery and loading',
    'general':  'General output',
    'hint':     'Contextual tips and suggestions',
    'error':    'Error messages',
    'trace':    'Function call tracing',
}

CLIHELP_OPT_IN_CHANNELS = {
    'trace',
}


def configure_channels():
    """Install the clihelp channel set. Call once before init_output()."""
    _ch.KNOWN_CHANNELS = CLIHELP_CHANNELS
    _ch.CHANNEL_DESCRIPTIONS = CLIHELP_CHANNEL_DESCRIPTIONS
    _ch.OPT_IN_CHANNELS = CLIHELP_OPT_IN_CHANNELS
