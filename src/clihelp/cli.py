"""Main CLI entry point for clihelp.

Two-pass argument parser:
  1. First pass: extract global flags (--verbose, --quiet, --show, --config)
  2. Second pass: dispatch to the subcommand

Global flags can appear before OR after the subcommand:
  clihelp --verbose render deploy      # works
  clihelp render deploy --verbose      # also works

Subcommands self-register via the register(subparsers, parents) convention
and describe themselves through help_document(), so the built-in commands
are rendered by the same engine as user-defined ones.
"""

import argparse
import copy
import sys
from pathlib import Path

from clihelp._version import __version__


# ---------------------------------------------------------------------------
# Global flags (can precede or follow the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Show output channel (bare --show lists channels)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Extra JSON file with command help definitions"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, spec in GLOBAL_FLAGS.items():
        kwargs = copy.deepcopy(spec)
        aliases = kwargs.pop("aliases", [])
        global_parser.add_argument(flag, *aliases, **kwargs)

    return global_parser.parse_known_args(argv)


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in clihelp.commands must export:
      NAME                         — subcommand name
      register(subparsers, parents) — add itself to the subparser
      run(args)                    — execute the command
      help_document()              — build its HelpDocument
    """
    from clihelp.commands import list_cmd, option, render
    return [render, list_cmd, option]


def _register_help(commands, config_path=None):
    """Register help for the built-in commands, then configured ones.

    Configured commands win over built-ins of the same name.
    """
    from clihelp.config import load_help_documents
    from clihelp.lib.help_lib import register_help, register_help_documents

    for cmd_module in commands:
        register_help(cmd_module.NAME, cmd_module.help_document(), replace=True)
    register_help_documents(load_help_documents(config_path), replace=True)


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="clihelp",
        description="clihelp — render help text for CLI commands",
        epilog=(
            "Run 'clihelp render <command>' for the help of any registered\n"
            "command, including clihelp's own.\n"
            "\n"
            "Global flags (--verbose, --quiet, --show, --config) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"clihelp {__version__}",
    )

    # Add global flags to main parser too (for --help display)
    for flag, spec in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in spec.items() if k != "aliases"}
        parser.add_argument(flag, *spec.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the clihelp CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    from clihelp.channels import configure_channels
    from clihelp.lib.log_lib import format_channel_list, init_output
    configure_channels()

    # Bare --show lists channels and exits
    if global_args.show and None in global_args.show:
        print(format_channel_list())
        return 0

    # Initialize THAC0 output system
    verbosity = (global_args.verbose or 0) - (global_args.quiet or 0)
    channels = [s for s in (global_args.show or []) if s is not None]
    try:
        init_output(verbosity=verbosity, channels=channels)
    except ValueError:
        print(f"ERROR: invalid --show value: {', '.join(channels)}",
              file=sys.stderr)
        return 1
    import clihelp.hints  # noqa: F401 — register clihelp hints

    from clihelp.output import print_warn
    if global_args.config and not Path(global_args.config).is_file():
        print_warn(f"Config file not found: {global_args.config}")

    # Pass 2: parse subcommand args
    commands = _discover_commands()
    _register_help(commands, global_args.config)
    parser = _build_parser(commands)

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
