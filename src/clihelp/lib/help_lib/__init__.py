"""
Help-text rendering engine for CLI commands.

Turns a command's summary, usage lines, description and option specs into
markup-annotated help text. Markup tokens (``<<bold>>``, ``<<ul>>``,
``<<reset>>``) are left for a downstream terminal layer to interpret.
"""

from .core import HelpDocument, build_help, NO_HELP
from .options import OptionRecord, TakesValue
from .getopt import resolve_option
from .formatters import OptionFormatter
from .content_registry import (
    register_help, register_help_documents, get_help, render_help,
    list_commands, get_all_help, clear_registry,
)

__all__ = [
    'HelpDocument',
    'build_help',
    'NO_HELP',
    'OptionRecord',
    'TakesValue',
    'resolve_option',
    'OptionFormatter',
    'register_help',
    'register_help_documents',
    'get_help',
    'render_help',
    'list_commands',
    'get_all_help',
    'clear_registry',
]
