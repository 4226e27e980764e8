"""
Hint dataclass and global registry.

Domain modules register hints at import time; ``OutputManager.hint()``
decides whether a hint is shown (context, threshold, once per session).
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Set


@dataclass
class Hint:
    """A templated tip tied to the contexts where it makes sense.

    Attributes:
        id: Dot-namespaced identifier (e.g. 'registry.list')
        message: Template string with {var} placeholders for str.format()
        context: Contexts the hint applies to: 'error', 'result', 'verbose'
        min_level: Minimum verbosity level for display
        category: Grouping key (e.g. 'registry', 'config')
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'verbose'})
    min_level: int = 1
    category: str = 'general'


_HINTS: Dict[str, Hint] = {}


def register_hint(hint: Hint) -> None:
    """Register a hint. A later registration with the same ID replaces it."""
    _HINTS[hint.id] = hint


def register_hints(*hints: Hint) -> None:
    for h in hints:
        register_hint(h)


def get_hint(hint_id: str) -> Optional[Hint]:
    """Look up a hint by ID. Returns None if not found."""
    return _HINTS.get(hint_id)
