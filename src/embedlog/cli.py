"""Main CLI entry point for embedlog.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--threshold, --no-level, --strict, ...)
  2. Second pass: dispatch to subcommand

Global flags can appear before OR after the subcommand:
  embedlog -t debug emit warning "x=%d" 5      # works
  embedlog emit warning "x=%d" 5 -t debug      # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from embedlog._version import __version__


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--threshold": {"aliases": ["-t"], "dest": "level", "metavar": "LEVEL",
                    "default": None,
                    "help": "Highest level to emit (name, letter or 0-6)"},
    "--no-level": {"dest": "show_level", "action": "store_const",
                   "const": False, "default": None,
                   "help": "Do not prefix lines with 'X: '"},
    "--strict": {"action": "store_const", "const": True, "default": None,
                 "help": "Reject arguments that do not fit the format"},
    "--word-bits": {"type": int, "metavar": "N", "default": None,
                    "help": "Bit width for negative %%x/%%b values (default 32)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: nearest .embedlog.json)"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in embedlog.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command, return exit code
    """
    from embedlog.commands import emit, init, levels
    return [emit, levels, init]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="embedlog",
        description="embedlog — render leveled printf-style log lines",
        epilog=(
            "Run 'embedlog <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--threshold, --no-level, --strict, --word-bits,\n"
            "--config) can appear before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"embedlog {__version__}",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

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
    """Main entry point for embedlog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Pass 2: parse subcommand + specific args
    commands = _discover_commands()
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
        if getattr(args, key, None) is None:
            setattr(args, key, value)

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
