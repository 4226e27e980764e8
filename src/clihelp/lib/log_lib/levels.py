"""
THAC0 verbosity level constants.

The manager compares raw integers; these names exist for readability at
call sites. A message is shown when:

    message.level <= threshold

Level assignments:
    ←── quieter ────────── default ────────── louder ──→
    -4    -3     -2       -1      0       1      2       3
    wall  errors warnings minimal default detail render  debug
"""

# Positive levels (shown with -v/-vv/-vvv)
DEBUG = 3          # Per-option resolution, call tracing
RENDER = 2         # Section assembly details
DETAIL = 1         # Config files loaded, registry contents
DEFAULT = 0        # Normal output, result-context hints

# Negative levels (suppressed with -Q/-QQ/-QQQ/-QQQQ)
MINIMAL = -1       # Suppress hints
WARNING = -2       # Warnings only
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall — exit code only
