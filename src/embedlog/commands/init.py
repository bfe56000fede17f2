"""embedlog init — write a project .embedlog.json.

Captures the current global flags (or the defaults) into a project
config file, so later runs in this directory need no flags::

    $ embedlog -t debug --word-bits 16 init
      [OK] Wrote /path/to/project/.embedlog.json
"""

from pathlib import Path

from embedlog.config import DEFAULTS, PROJECT_CONFIG_NAME, save_project_config
from embedlog.lib.log_lib import EmbedLogError, LEVEL_CHARS, parse_level
from embedlog.lib.log_lib.levels import LEVEL_NAMES
from embedlog.output import print_error, print_ok


def register(subparsers, parents):
    """Register the 'init' subcommand."""
    p = subparsers.add_parser(
        "init",
        parents=parents,
        help="Write .embedlog.json in the target directory",
    )
    p.add_argument("--dir", metavar="PATH", default=None,
                   help="Directory to write into (default: current)")
    p.add_argument("--force", action="store_true", default=False,
                   help="Overwrite an existing .embedlog.json")
    p.set_defaults(func=run)


def _value(args, key):
    value = getattr(args, key, None)
    return DEFAULTS[key] if value is None else value


def run(args):
    """Execute the init command."""
    target_dir = Path(args.dir or ".")
    target = target_dir / PROJECT_CONFIG_NAME
    if target.exists() and not args.force:
        print_error(f"{target} already exists (use --force to overwrite)")
        return 1

    try:
        level = parse_level(_value(args, "level"))
    except EmbedLogError as e:
        print_error(str(e))
        return 1

    data = {
        "level": LEVEL_NAMES[level],
        "show_level": _value(args, "show_level"),
        "strict": _value(args, "strict"),
        "word_bits": _value(args, "word_bits"),
    }
    path = save_project_config(data, target_dir)
    char = LEVEL_CHARS[level - 1] if level else "-"
    print_ok(f"Wrote {path} (threshold {LEVEL_NAMES[level]} [{char}])")
    return 0
