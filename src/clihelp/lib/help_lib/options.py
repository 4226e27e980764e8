"""
Structured option metadata consumed by the help renderer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TakesValue(str, Enum):
    """Whether a value follows an option flag."""
    NONE = 'none'
    OPTIONAL = 'optional'
    REQUIRED = 'required'

    @classmethod
    def _missing_(cls, value):
        # Older getopt-style parsers spell "no value" as "rejected"
        if value == 'rejected':
            return cls.NONE
        return None


@dataclass(frozen=True)
class OptionRecord:
    """One resolved command-line option.

    ``name`` is never empty. A two-character token (``-f``) is a short
    option; any other length (``--foo``) is a long option.
    """
    name: str
    alias: Optional[str] = None
    takes_value: TakesValue = TakesValue.NONE
    repeatable: bool = False
    description: str = ''

    @property
    def tokens(self):
        """The flag tokens of this option, name first."""
        return [self.name, self.alias] if self.alias else [self.name]


def is_short_token(token: str) -> bool:
    """True for two-character flag tokens such as ``-f``."""
    return len(token) == 2
