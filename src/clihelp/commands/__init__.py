"""clihelp subcommands. Each module exports register(), run() and help_document()."""
