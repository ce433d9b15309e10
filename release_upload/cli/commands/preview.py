"""Format command: preview an asset name pattern."""

import logging
from argparse import Namespace

from release_upload.event import load_release_event
from release_upload.exceptions import ReleaseUploadError
from release_upload.variables.pattern import format_pattern
from release_upload.variables.release import build_release_variables

from .upload import configure_logging, parse_vars


logger = logging.getLogger(__name__)


def format_pattern_command(args: Namespace) -> int:
    """Print a pattern formatted against KEY=VALUE pairs and, optionally, a release event."""
    configure_logging(args)

    try:
        variables = parse_vars(args.var)
        if args.event_path:
            event = load_release_event(args.event_path)
            variables = build_release_variables(event, base=variables)
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        return 2
    except ReleaseUploadError as e:
        logger.error(str(e))
        return e.exit_code

    print(format_pattern(args.pattern, variables))
    return 0
