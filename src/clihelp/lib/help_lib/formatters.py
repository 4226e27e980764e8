"""
Formatters for the OPTIONS section of rendered help.
"""

from typing import Iterable, List

from .options import OptionRecord, TakesValue, is_short_token
from ..log_lib import get_output


INDENT = ' ' * 4
DESCR_INDENT = ' ' * 8
NO_DESCRIPTION = 'No description.'

# Value placeholders keyed by whether the token is short (-f) or long (--foo)
SHORT_SUFFIXES = {
    TakesValue.NONE: '',
    TakesValue.REQUIRED: ' <value>',
    TakesValue.OPTIONAL: ' [<value>]',
}
LONG_SUFFIXES = {
    TakesValue.NONE: '',
    TakesValue.REQUIRED: '=<value>',
    TakesValue.OPTIONAL: '[=<value>]',
}


def coerce_takes_value(value) -> TakesValue:
    """Return ``value`` as a TakesValue, treating unknown values as NONE.

    Unknown values come from resolvers that break the OptionRecord contract;
    they are reported as a warning on the 'resolve' channel.
    """
    if isinstance(value, TakesValue):
        return value
    try:
        return TakesValue(value)
    except ValueError:
        get_output().warning(
            "  [WARN] Unrecognized option value mode {value!r}; treating as 'none'",
            channel='resolve', value=value,
        )
        return TakesValue.NONE


class OptionFormatter:
    """Formats resolved options as indented help blocks."""

    @staticmethod
    def value_suffix(token: str, takes_value) -> str:
        """
        Get the value placeholder that follows a flag token.

        Args:
            token: Flag token like ``-f`` or ``--foo``
            takes_value: Whether the option takes a value

        Returns:
            Suffix such as ``" <value>"`` or ``"[=<value>]"``, possibly empty
        """
        mode = coerce_takes_value(takes_value)
        if is_short_token(token):
            return SHORT_SUFFIXES[mode]
        return LONG_SUFFIXES[mode]

    @staticmethod
    def format_param(token: str, takes_value, repeatable: bool = False) -> str:
        """
        Format one flag token with its value placeholder.

        Repeatable options repeat the whole expression in brackets:
        ``-f <value> [-f <value> [...]]``.

        Args:
            token: Flag token
            takes_value: Whether the option takes a value
            repeatable: Whether the option may be given more than once

        Returns:
            The formatted param expression
        """
        text = token + OptionFormatter.value_suffix(token, takes_value)
        if repeatable:
            text += f" [{text} [...]]"
        return text

    @staticmethod
    def format(option: OptionRecord) -> str:
        """
        Format one option as a help block.

        One line per flag token, then the indented description line.
        Every line ends with a newline.
        """
        lines = [
            INDENT + OptionFormatter.format_param(
                token, option.takes_value, option.repeatable)
            for token in option.tokens
        ]
        lines.append(DESCR_INDENT + ((option.description or '').strip()
                                     or NO_DESCRIPTION))
        return "\n".join(lines) + "\n"

    @staticmethod
    def format_list(options: Iterable[OptionRecord]) -> List[str]:
        """Format several options, each block followed by a blank line."""
        return [OptionFormatter.format(option) + "\n" for option in options]
