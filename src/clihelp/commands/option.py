"""clihelp option — preview the help block for a single option spec."""

from clihelp.lib.help_lib import OptionFormatter, build_help, resolve_option
from clihelp.output import get_output, print_text


NAME = "option"


def help_document():
    return build_help(
        summary="Preview the help block for one option spec.",
        usage="<spec> [<description>]",
        descr=(
            "Resolves a compact option spec such as 'f,foo:' and prints the "
            "block it produces in an OPTIONS section."
        ),
    )


def register(subparsers, parents):
    """Register the 'option' subcommand."""
    p = subparsers.add_parser(
        NAME,
        parents=parents,
        help="Preview the help block for one option spec",
    )
    p.add_argument("spec", metavar="SPEC",
                   help="Option spec, e.g. 'f,foo:' or 'v*'")
    p.add_argument("description", metavar="DESCRIPTION", nargs="?", default="",
                   help="One-line option description")
    p.set_defaults(func=run)


def run(args):
    option = resolve_option(args.spec, args.description)
    print_text(OptionFormatter.format(option))
    get_output().hint('option.syntax', 'verbose')
    return 0
