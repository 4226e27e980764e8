"""
Central registry of help documents, keyed by command name.

A command dispatcher registers one HelpDocument per command while it
sets up, then asks for rendered help whenever a user requests it.
"""

from typing import Dict, List

from .core import HelpDocument
from ..log_lib import get_output


HELP_DOCUMENTS: Dict[str, HelpDocument] = {}


def register_help(name: str, doc: HelpDocument, replace: bool = False) -> None:
    """Register the help document for a command.

    Args:
        name: Command name
        doc: The command's HelpDocument
        replace: Allow overwriting an existing registration

    Raises:
        ValueError: If ``name`` is already registered and ``replace`` is False
    """
    if name in HELP_DOCUMENTS and not replace:
        raise ValueError(f"Duplicate help document for command: {name}")
    HELP_DOCUMENTS[name] = doc
    get_output().emit(1, "Registered help for '{name}'",
                      channel='registry', name=name)


def register_help_documents(docs: Dict[str, HelpDocument], replace: bool = False) -> None:
    """Register several help documents at once."""
    for name, doc in docs.items():
        register_help(name, doc, replace=replace)


def get_help(name: str) -> HelpDocument:
    """Get the help document for a command.

    Raises:
        KeyError: If no document is registered under ``name``
    """
    if name not in HELP_DOCUMENTS:
        raise KeyError(f"No help registered for command '{name}'")
    return HELP_DOCUMENTS[name]


def render_help(name: str) -> str:
    """Render the registered help for a command under its own name."""
    return get_help(name).render(name)


def list_commands() -> List[str]:
    """Sorted names of all commands with registered help."""
    return sorted(HELP_DOCUMENTS)


def get_all_help() -> Dict[str, HelpDocument]:
    return HELP_DOCUMENTS.copy()


def clear_registry() -> None:
    HELP_DOCUMENTS.clear()
