"""Upload command implementation."""

import logging
import os
from argparse import Namespace
from typing import Dict, List, Optional

from release_upload.event import load_release_event
from release_upload.exceptions import InputValidationError, ReleaseUploadError
from release_upload.inputs import InputsLoader
from release_upload.outputs import add_mask, set_failed, set_output
from release_upload.security.token import TokenManager, TokenMaskingFilter
from release_upload.upload.client import ReleaseAssetClient
from release_upload.variables.release import build_release_variables


logger = logging.getLogger(__name__)


def configure_logging(args: Namespace, token_manager: Optional[TokenManager] = None):
    """Set up root logging from the CLI flags, masking the token if given."""
    log_level = getattr(logging, args.log_level.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    elif args.verbose:
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if token_manager is not None:
        for handler in logging.getLogger().handlers:
            attached = [f for f in handler.filters if isinstance(f, TokenMaskingFilter)]
            if attached:
                # One masking filter per handler; point it at the current token
                for masking in attached:
                    masking.token_manager = token_manager
            else:
                handler.addFilter(TokenMaskingFilter(token_manager))


def parse_vars(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse KEY=VALUE pairs into a variables dict."""
    variables = {}
    for item in pairs or []:
        if '=' not in item:
            raise ValueError(f"Invalid variable format: {item}. Expected KEY=VALUE")
        key, value = item.split('=', 1)
        if not key:
            raise ValueError(f"Invalid KEY in pair: {item}")
        variables[key] = value
    return variables


def environment_variables(exclude: str) -> Dict[str, str]:
    """Snapshot of the process environment without the token variable."""
    return {key: value for key, value in os.environ.items() if key != exclude}


def upload_release_asset(args: Namespace) -> int:
    """
    Upload the asset for the triggering release and publish its URL.

    Returns:
        Exit code: 0 on success, 2 on configuration errors, 1 otherwise
    """
    token_manager = TokenManager(args.token_env)
    configure_logging(args, token_manager)

    try:
        event = load_release_event(args.event_path)

        inputs = InputsLoader().load(
            inputs_file=args.inputs_file,
            overrides={'file': args.file, 'mime': args.mime, 'pattern': args.pattern},
        )
        extra_vars = parse_vars(args.var)

        client = None
        if not args.dry_run:
            token = token_manager.resolve()
            add_mask(token)
            client = ReleaseAssetClient(token, api_version=args.api_version, timeout=args.timeout)
            token_manager.scrub()

        base = environment_variables(exclude=args.token_env)
        base.update(extra_vars)
        variables = build_release_variables(event, base=base)

        name = inputs.display_name(variables)
        logger.info(f"Asset display name: {name}")

        if client is None:
            logger.info(f"[DRY RUN] Would upload {inputs.file} ({inputs.mime}) as '{name}'")
            return 0

        try:
            result = client.upload_asset(event.upload_url, inputs.file, name, inputs.mime)
        finally:
            client.close()

        set_output('url', result.browser_download_url)
        return 0

    except InputValidationError as e:
        for error in e.errors:
            logger.error(error.message)
        set_failed(str(e))
        return e.exit_code
    except ReleaseUploadError as e:
        logger.error(str(e))
        set_failed(str(e))
        return e.exit_code
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        set_failed(str(e))
        return 2
    except OSError as e:
        logger.error(f"File error: {e}")
        set_failed(str(e))
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        set_failed(str(e))
        return 1
