"""clihelp render — print the help text registered for a command.

Output keeps the inline markup tokens (<<bold>>, <<ul>>, <<reset>>) for
a downstream terminal layer to interpret.
"""

import argparse

from clihelp.lib.help_lib import build_help, render_help
from clihelp.output import get_output, print_error, print_text


NAME = "render"


def help_document():
    """Help for the 'render' command itself."""
    return build_help(
        summary="Render the help text registered for a command.",
        usage=["<command>", "[-v] <command>"],
        descr=(
            "Looks up the help document registered for <command> (built-in "
            "commands plus those defined in config files) and prints it with "
            "its inline markup tokens intact."
        ),
        options={
            "v,verbose*": "Increase verbosity; repeat for more detail.",
            "show::": "Show an output channel, optionally at a level (CHANNEL[:LEVEL]).",
            "config:": "Read command help from this JSON file.",
        },
    )


def register(subparsers, parents):
    """Register the 'render' subcommand."""
    p = subparsers.add_parser(
        NAME,
        parents=parents,
        help="Render the help text registered for a command",
        description=(
            "Render the help text registered for a command, including the\n"
            "built-in clihelp commands."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("name", metavar="COMMAND",
                   help="Command whose help should be rendered")
    p.set_defaults(func=run)


def run(args):
    """Render help for args.name. Returns the exit code."""
    out = get_output()
    try:
        text = render_help(args.name)
    except KeyError:
        print_error(f"No help registered for command '{args.name}'.")
        out.hint('registry.list', 'error')
        out.hint('config.define', 'error')
        return 1
    print_text(text)
    return 0
