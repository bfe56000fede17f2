"""
Severity level constants.

The emit rule is simple:

    SILENT < message.level <= threshold  →  message is shown

Level assignments:
    ←── quieter ───────────────────────────── louder ──→
    0       1      2      3        4      5      6
    silent  fatal  error  warning  debug  trace  verbose
"""

from .errors import LevelError

SILENT = 0         # No output at all
FATAL = 1          # Fatal errors
ERROR = 2          # All errors
WARNING = 3        # Errors and warnings
DEBUG = 4          # Errors, warnings and debug
TRACE = 5          # Errors, warnings, debug, traces
VERBOSE = 6        # Everything

# Display character for each non-silent level, index = level - 1
LEVEL_CHARS = "FEWDTV"

LEVEL_NAMES = {
    SILENT: 'silent',
    FATAL: 'fatal',
    ERROR: 'error',
    WARNING: 'warning',
    DEBUG: 'debug',
    TRACE: 'trace',
    VERBOSE: 'verbose',
}

LEVEL_DESCRIPTIONS = {
    SILENT: 'No output',
    FATAL: 'Fatal errors',
    ERROR: 'All errors',
    WARNING: 'Errors and warnings',
    DEBUG: 'Errors, warnings and debug',
    TRACE: 'Errors, warnings, debug, traces',
    VERBOSE: 'All messages',
}


def clamp_level(level: int) -> int:
    """Pin an integer into the SILENT..VERBOSE range."""
    return max(SILENT, min(VERBOSE, int(level)))


def level_char(level: int) -> str:
    """Return the single display character for a non-silent level."""
    if not FATAL <= level <= VERBOSE:
        raise LevelError(f"level {level!r} has no display character")
    return LEVEL_CHARS[level - 1]


def parse_level(value) -> int:
    """Resolve a level from an int, a digit string, a name or a display char.

    Names are case-insensitive full names ("warning", "Warning"). A single
    character is matched against LEVEL_CHARS, so "W" and "w" both give
    WARNING. Integers are clamped into range.

    Raises:
        LevelError: If the value names no known level.
    """
    if isinstance(value, bool):
        raise LevelError(f"unknown level: {value!r}")
    if isinstance(value, int):
        return clamp_level(value)

    text = str(value).strip()
    if text.lstrip('-').isdigit():
        return clamp_level(int(text))

    lowered = text.lower()
    for level, name in LEVEL_NAMES.items():
        if name == lowered:
            return level
    if len(text) == 1 and text.upper() in LEVEL_CHARS:
        return LEVEL_CHARS.index(text.upper()) + 1

    raise LevelError(f"unknown level: {value!r}")


def format_level_list() -> str:
    """Format the list of levels for display.

    Returns:
        Formatted string listing every level with its character.
    """
    lines = ["Available levels:"]
    max_name = max(len(name) for name in LEVEL_NAMES.values())
    for level in sorted(LEVEL_NAMES):
        name = LEVEL_NAMES[level]
        char = LEVEL_CHARS[level - 1] if level > SILENT else '-'
        desc = LEVEL_DESCRIPTIONS.get(level, '')
        lines.append(f"  {level}  {char}  {name:<{max_name}}  {desc}")
    return "\n".join(lines)
