"""
Default option resolver: compact option specs to OptionRecords.

Spec syntax::

    f            -f, no value
    foo          --foo, no value
    f,foo:       -f / --foo, value required
    color::      --color, value optional
    v*           -v, may repeat
    I,include*:  -I / --include, may repeat, value required

The value marker (``:`` or ``::``) comes last; the repeat marker ``*``
sits directly before it. Specs are not validated.
"""

from .options import OptionRecord, TakesValue
from ..log_lib import get_output, trace


def fix_option_name(name: str) -> str:
    """Normalize a bare option name into its flag token.

    Surrounding spaces and dashes are dropped, then one-character names get
    a single dash and everything else a double dash.
    """
    name = name.strip(' -')
    if len(name) == 1:
        return f"-{name}"
    return f"--{name}"


def split_value_marker(spec: str):
    """Split the trailing value marker off a spec.

    Returns:
        Tuple of (remaining spec, TakesValue)
    """
    if spec.endswith('::'):
        return spec[:-2].rstrip(), TakesValue.OPTIONAL
    if spec.endswith(':'):
        return spec[:-1].rstrip(), TakesValue.REQUIRED
    return spec, TakesValue.NONE


@trace
def resolve_option(spec: str, descr: str = '') -> OptionRecord:
    """Resolve one option spec and its description into an OptionRecord.

    Args:
        spec: Compact spec string like ``"f,foo:"``
        descr: One-line description of the option

    Returns:
        The resolved OptionRecord
    """
    text, takes_value = split_value_marker(spec.strip())

    repeatable = text.endswith('*')
    if repeatable:
        text = text[:-1].rstrip()

    names = text.split(',')
    name = fix_option_name(names[0])
    alias = None
    if len(names) > 1 and names[1].strip(' -'):
        alias = fix_option_name(names[1])

    get_output().emit(3, "Resolved option {spec!r} -> {name} alias={alias} "
                         "value={value} repeatable={multi}",
                      channel='resolve', spec=spec, name=name, alias=alias,
                      value=takes_value.value, multi=repeatable)

    return OptionRecord(
        name=name,
        alias=alias,
        takes_value=takes_value,
        repeatable=repeatable,
        description=descr or '',
    )
