"""clihelp list — list commands with registered help."""

from clihelp.lib.help_lib import build_help, get_all_help
from clihelp.output import print_text


NAME = "list"


def help_document():
    return build_help(
        summary="List commands with registered help.",
        usage="[--config <path>]",
        descr="Prints each command name next to its one-line summary.",
    )


def register(subparsers, parents):
    """Register the 'list' subcommand."""
    p = subparsers.add_parser(
        NAME,
        parents=parents,
        help="List commands with registered help",
    )
    p.set_defaults(func=run)


def format_command_list(docs):
    """Format command names and summaries as an aligned listing."""
    if not docs:
        return "No commands registered."
    lines = ["Commands:"]
    width = max(len(name) for name in docs)
    for name in sorted(docs):
        summary = docs[name].get_summary()
        lines.append(f"  {name:<{width}}  {summary}".rstrip())
    return "\n".join(lines)


def run(args):
    print_text(format_command_list(get_all_help()))
    return 0
