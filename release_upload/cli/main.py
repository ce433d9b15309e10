"""Main CLI entry point for upload-release-asset."""

import argparse
import sys
from typing import List, Optional

from release_upload import __version__
from release_upload.security.token import DEFAULT_TOKEN_ENV
from release_upload.upload.client import DEFAULT_API_VERSION

from .commands import format_pattern_command, upload_release_asset


COMMANDS = ('upload', 'format')


def _add_logging_arguments(parser: argparse.ArgumentParser):
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='info',
        help='Set log level'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the upload-release-asset CLI."""
    parser = argparse.ArgumentParser(
        prog='upload-release-asset',
        description='Upload a file as a release asset with a templated name'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Upload command
    upload_parser = subparsers.add_parser('upload', help='Upload the asset for a release event')
    upload_parser.add_argument(
        '--file',
        type=str,
        help='Path to the asset (overrides INPUT_FILE)'
    )
    upload_parser.add_argument(
        '--mime',
        type=str,
        help='MIME type of the asset (overrides INPUT_MIME)'
    )
    upload_parser.add_argument(
        '--pattern',
        type=str,
        help='Asset name pattern (overrides INPUT_PATTERN / INPUT_NAME)'
    )
    upload_parser.add_argument(
        '--inputs-file',
        type=str,
        help='Path to YAML file containing action inputs'
    )
    upload_parser.add_argument(
        '--event-path',
        type=str,
        help='Path to the release event payload (default: $GITHUB_EVENT_PATH)'
    )
    upload_parser.add_argument(
        '--token-env',
        type=str,
        default=DEFAULT_TOKEN_ENV,
        help='Environment variable holding the API token'
    )
    upload_parser.add_argument(
        '--var',
        action='append',
        metavar='KEY=VALUE',
        help='Extra pattern variables (can be specified multiple times)'
    )
    upload_parser.add_argument(
        '--api-version',
        type=str,
        default=DEFAULT_API_VERSION,
        help='Value of the X-GitHub-Api-Version header'
    )
    upload_parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='Upload request timeout in seconds'
    )
    upload_parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Resolve inputs and asset name without uploading'
    )
    _add_logging_arguments(upload_parser)

    # Format command
    format_parser = subparsers.add_parser('format', help='Preview an asset name pattern')
    format_parser.add_argument(
        'pattern',
        type=str,
        help='Asset name pattern'
    )
    format_parser.add_argument(
        'var',
        nargs='*',
        metavar='KEY=VALUE',
        help='Pattern variables'
    )
    format_parser.add_argument(
        '--event-path',
        type=str,
        help='Release event payload providing TAG, COMMITISH and the other release variables'
    )
    _add_logging_arguments(format_parser)

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    if args is None:
        args = sys.argv[1:]

    # The action runs with no arguments: upload is the default command
    if not args or (args[0] not in COMMANDS and args[0] not in ('-h', '--help', '--version')):
        args = ['upload'] + list(args)

    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.command == 'upload':
        return upload_release_asset(parsed_args)
    elif parsed_args.command == 'format':
        return format_pattern_command(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
