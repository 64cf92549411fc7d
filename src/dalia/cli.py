"""
Command-line interface for dalia.
"""

import argparse
import logging
import sys
from typing import List

from dalia import __version__
from dalia.dalia_config import DaliaConfig
from dalia.dalia_error import DaliaError
from dalia.dalia_printer import DaliaAliasPrinter, OUTPUT_FORMATS


USAGE = """Usage: dalia <command> [arguments]

Commands:
    aliases: Generates all shell aliases for each configured directory at DALIA_CONFIG_PATH
    version: The current build version
    help: Prints this usage message

Examples:
    $ dalia aliases

Environment:
DALIA_CONFIG_PATH
    The location where dalia looks for alias configurations. This is set to $HOME/.dalia by default.
    Put the alias configurations in a file named `config` here.

Use "dalia help <command>" for more information about that command."""

ALIASES_USAGE = """Usage: dalia aliases [--config FILE] [--format shell|json|yaml] [--verbose]

Description:
    Aliases generates shell aliases for each directory listed in DALIA_CONFIG_PATH/config.
    The aliases are only for changing directories to the specified locations. No other types
    of aliases are supported.

    Each alias outputted by this command is of the form `alias path='cd /some/path'`.

    The simplest way to generate an alias to a directory is to provide its path on disk. The
    generated alias uses the lowercase name of the directory at the end of the path. The alias
    name can be customized by prepending the path with a name surrounded by square brackets
    (i.e. `[` and `]`). The casing of a custom name is kept exactly as written.

    A line starting with an asterisk surrounded by square brackets (i.e. `[*]`) expands a single
    directory into one lowercase alias for each of its immediate subdirectories. Files are ignored.

Options:
    --config FILE   Read this configuration file instead of DALIA_CONFIG_PATH/config
    --format FMT    Output format: shell (default), json or yaml
    --verbose       Log parsing details to stderr

Examples:
    Simple path
    /some/path => alias path='cd /some/path'

    Custom name
    [my-path]/some/path => alias my-path='cd /some/path'
    [MyPath]/some/path => alias MyPath='cd /some/path'

    Directory Expansion
    [*]/some/path =>
        alias one='cd /some/path/one'
        alias three='cd /some/path/three'
        alias two='cd /some/path/two'

    when /some/path has contents /one, /two, file.txt, and /three."""

VERSION_USAGE = """Usage: dalia version

Description:
    Version prints the current semantic version of the dalia executable."""

COMMAND_USAGE = {
    'aliases': ALIASES_USAGE,
    'version': VERSION_USAGE,
    'help': USAGE,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='dalia',
        description="Generate shell aliases for changing directories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s aliases                  # Print aliases from $DALIA_CONFIG_PATH/config
  %(prog)s aliases --format json    # Print the alias map as JSON
  %(prog)s help aliases             # Describe the configuration format
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    aliases_parser = subparsers.add_parser('aliases', help='Generate shell aliases')
    aliases_parser.add_argument('--config', '-c', help='Configuration file path')
    aliases_parser.add_argument('--format', '-f', choices=OUTPUT_FORMATS, default='shell',
                                help='Output format')
    aliases_parser.add_argument('--verbose', '-v', action='store_true',
                                help='Verbose output')

    subparsers.add_parser('version', help='Show the dalia version')

    help_parser = subparsers.add_parser('help', help='Show usage information')
    help_parser.add_argument('topic', nargs='?', help='Command to describe')

    return parser


def setup_logging(verbose: bool) -> None:
    """Send log output to stderr, at debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def main(argv: List[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        print(USAGE)
        return 0

    try:
        if args.command == 'aliases':
            return handle_aliases(args)

        if args.command == 'version':
            return handle_version(args)

        return handle_help(args)

    except DaliaError as e:
        print(f"dalia: {e}", file=sys.stderr)
        return 1


def handle_aliases(args: argparse.Namespace) -> int:
    """Handle the aliases command."""
    setup_logging(args.verbose)

    if args.config:
        config = DaliaConfig.from_file(args.config)

    else:
        config = DaliaConfig.from_environment()

    aliases = config.load_aliases()
    logging.getLogger("DaliaCli").debug("generated %d aliases from %s", len(aliases), config.config_file)

    print(DaliaAliasPrinter().format(aliases, args.format), end='')
    return 0


def handle_version(args: argparse.Namespace) -> int:  # pylint: disable=unused-argument
    """Handle the version command."""
    print(f"dalia version {__version__}")
    return 0


def handle_help(args: argparse.Namespace) -> int:
    """Handle the help command."""
    if args.topic is None:
        print(USAGE)
        return 0

    usage = COMMAND_USAGE.get(args.topic)
    if usage is None:
        print(f"dalia: unknown command: {args.topic}", file=sys.stderr)
        return 1

    print(usage)
    return 0


if __name__ == '__main__':
    sys.exit(main())
