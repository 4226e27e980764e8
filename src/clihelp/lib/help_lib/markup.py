"""
Inline markup tokens emitted in rendered help.

The tokens are opaque to this package: a downstream terminal layer turns
them into styling or strips them for non-interactive output. Nothing here
interprets, validates or escapes them.
"""

BOLD = '<<bold>>'
UNDERLINE = '<<ul>>'
RESET = '<<reset>>'

TOKENS = frozenset({BOLD, UNDERLINE, RESET})


def bold(text: str) -> str:
    return f"{BOLD}{text}{RESET}"


def underline(text: str) -> str:
    return f"{UNDERLINE}{text}{RESET}"
