"""embedlog levels — list the severity levels."""

from embedlog.lib.log_lib import format_level_list


def register(subparsers, parents):
    """Register the 'levels' subcommand."""
    p = subparsers.add_parser(
        "levels",
        parents=parents,
        help="List severity levels and their display characters",
    )
    p.set_defaults(func=run)


def run(args):
    print(format_level_list())
    return 0
