"""clihelp — help-text rendering for command-line commands.

Renders a command's summary, usage lines, description and options into
markup-annotated help text for a CLI dispatcher.
"""

from clihelp._version import __version__, __app_name__

__all__ = ["__version__", "__app_name__"]
