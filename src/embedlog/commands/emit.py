"""embedlog emit — render one log line to stdout.

Builds a Logger from the resolved configuration (CLI flags, project
.embedlog.json, global config), parses the shell arguments into the
types the format specifiers expect, and emits at the requested level::

    $ embedlog -t warning emit warning "Log as Warning with integer values : %d, %d" 34 799870
    W: Log as Warning with integer values : 34, 799870

Lines above the threshold print nothing and still exit 0.
"""

import argparse
import sys

from embedlog.config import resolve_config
from embedlog.lib.log_lib import (
    EmbedLogError, F, Logger, RamSource, coerce_args, parse_level,
    newline_suffix, uptime_prefix,
)
from embedlog.output import print_error


def register(subparsers, parents):
    """Register the 'emit' subcommand."""
    p = subparsers.add_parser(
        "emit",
        parents=parents,
        help="Render a format string at a severity level",
        description=(
            "Render FORMAT with ARGS through a logger writing to stdout.\n"
            "Arguments are parsed according to their specifier: integers\n"
            "accept 0x/0b prefixes, booleans accept true/false/1/0."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("severity", metavar="LEVEL",
                   help="Message level (fatal, error, warning, debug, trace, verbose)")
    p.add_argument("format", metavar="FORMAT",
                   help="printf-style format string")
    p.add_argument("values", metavar="ARG", nargs="*",
                   help="Values for the specifiers, in order")
    p.add_argument("--flash", action="store_true", default=False,
                   help="Read the format from program memory instead of RAM")
    p.add_argument("-e", "--escapes", action="store_true", default=False,
                   help="Interpret backslash escapes such as \\n in FORMAT")
    p.add_argument("--no-newline", action="store_true", default=False,
                   help="Do not end the line with a newline")
    p.add_argument("--timestamp", action="store_true", default=False,
                   help="Prefix the line with the uptime in milliseconds")
    p.set_defaults(func=run)


def build_logger(args, stream=None):
    """Create a Logger for this invocation from the resolved config."""
    cfg = resolve_config(args, config_path=getattr(args, "config", None))
    log = Logger(
        cfg["level"],
        stream if stream is not None else sys.stdout,
        cfg["show_level"],
        strict=cfg["strict"],
        word_bits=cfg["word_bits"],
    )
    if getattr(args, "timestamp", False):
        log.set_prefix(uptime_prefix)
    if not getattr(args, "no_newline", False):
        log.set_suffix(newline_suffix)
    return log


def run(args):
    """Execute the emit command."""
    fmt = args.format
    if args.escapes:
        fmt = fmt.encode("latin-1", "backslashreplace").decode("unicode_escape")

    source = F(fmt) if args.flash else RamSource(fmt)
    try:
        level = parse_level(args.severity)
        log = build_logger(args)
        values = coerce_args(source, args.values)
        log.emit_at(level, source, *values)
    except EmbedLogError as e:
        print_error(str(e))
        return 1
    return 0
