"""clihelp hints for the THAC0 verbosity system.

Import this module to register the hints with the global registry.
"""

from clihelp.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='registry.list',
        message="  Tip: Run 'clihelp list' to see commands with registered help.",
        context={'error'},
        min_level=0,
        category='registry',
    ),
    Hint(
        id='config.define',
        message=('  Tip: Define command help under "commands" in .clihelp.json '
                 'or ~/.clihelp/config.json.'),
        context={'result', 'error'},
        min_level=0,
        category='config',
    ),
    Hint(
        id='option.syntax',
        message=("  Note: Option specs end with ':' (value required) or '::' "
                 "(value optional); '*' before that marks a repeatable option."),
        context={'verbose'},
        min_level=1,
        category='option',
    ),
)
