"""Configuration management for clihelp.

Command help can be declared in JSON config files. Three layers are
merged, highest priority last:
  1. Global config — ~/.clihelp/config.json
  2. Project config — .clihelp.json, found by walking up from the cwd
  3. Explicit config — the file passed with --config

Each file may hold a "commands" object::

    {
      "commands": {
        "deploy": {
          "summary": "Deploy the application",
          "usage": ["[options] <env>"],
          "descr": "Builds and ships the current tree.",
          "options": {"f,force": "Skip confirmation", "t,tag*:": "Release tag"}
        }
      }
    }

A command defined in a higher layer replaces the lower definition whole.
"""

import json
import os
from pathlib import Path

from clihelp.lib.help_lib import HelpDocument
from clihelp.lib.log_lib import get_output


PROJECT_CONFIG_NAME = ".clihelp.json"


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.clihelp/)."""
    return Path.home() / ".clihelp"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .clihelp.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def _commands_from(path):
    """Return the "commands" object of a config file ({} if none)."""
    commands = load_json(path).get("commands", {})
    if not isinstance(commands, dict):
        get_output().warning("  [WARN] Ignoring non-object \"commands\" in {path}",
                             channel='config', path=path)
        return {}
    get_output().emit(1, "Loaded {count} command(s) from {path}",
                      channel='config', count=len(commands), path=path)
    return commands


def load_help_config(config_path=None, start_dir=None):
    """Merge command definitions from all config layers.

    Args:
        config_path: Explicit config file (highest priority)
        start_dir: Where to start looking for .clihelp.json

    Returns:
        Dict mapping command names to their raw definitions
    """
    layers = [get_global_config_path(), find_project_config(start_dir)]
    if config_path:
        layers.append(Path(config_path))

    merged = {}
    for path in layers:
        if path is None or not Path(path).is_file():
            continue
        merged.update(_commands_from(path))
    return merged


def _is_str_list(value):
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _invalid_field(entry):
    """Return the first field of a command definition with the wrong type.

    summary and descr must be strings, usage a string or a list of strings,
    options an object mapping option specs to string descriptions.
    """
    for key in ("summary", "descr"):
        if entry.get(key) is not None and not isinstance(entry[key], str):
            return key
    usage = entry.get("usage")
    if usage is not None and not (isinstance(usage, str) or _is_str_list(usage)):
        return "usage"
    options = entry.get("options")
    if options is not None and not (
            isinstance(options, dict)
            and all(v is None or isinstance(v, str) for v in options.values())):
        return "options"
    return None


def load_help_documents(config_path=None, start_dir=None):
    """Load all configured commands as HelpDocuments.

    Entries that are not JSON objects, or whose fields have the wrong
    type, are skipped with a warning.
    """
    docs = {}
    for name, entry in load_help_config(config_path, start_dir).items():
        if not isinstance(entry, dict):
            get_output().warning("  [WARN] Skipping command '{name}': "
                                 "definition is not an object",
                                 channel='config', name=name)
            continue
        bad = _invalid_field(entry)
        if bad:
            get_output().warning("  [WARN] Skipping command '{name}': "
                                 "'{field}' has the wrong type",
                                 channel='config', name=name, field=bad)
            continue
        docs[name] = HelpDocument.from_dict(entry)
    return docs
