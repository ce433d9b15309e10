"""Release trigger payload loading and validation."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from release_upload.exceptions import PreconditionError


logger = logging.getLogger(__name__)

EVENT_PATH_ENV = 'GITHUB_EVENT_PATH'
REQUIRED_RELEASE_FIELDS = ('upload_url', 'tag_name', 'target_commitish')


@dataclass
class ReleaseEvent:
    """Release metadata taken from the trigger payload."""
    upload_url: str
    tag_name: str
    target_commitish: str
    name: str = ''
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> 'ReleaseEvent':
        """
        Build a release event from a decoded trigger payload.

        Raises:
            PreconditionError: If the payload is not a release event or the
                release object lacks required fields
        """
        if not isinstance(payload, dict) or not isinstance(payload.get('release'), dict):
            raise PreconditionError("This is not a release event")

        release = payload['release']
        missing = [key for key in REQUIRED_RELEASE_FIELDS if not release.get(key)]
        if missing:
            raise PreconditionError(
                f"Release payload is missing required fields: {', '.join(missing)}"
            )

        return cls(
            upload_url=str(release['upload_url']),
            tag_name=str(release['tag_name']),
            target_commitish=str(release['target_commitish']),
            name=str(release.get('name') or ''),
            raw=release,
        )


def load_release_event(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None
) -> ReleaseEvent:
    """
    Load the release event from the trigger payload file.

    Args:
        path: Payload path; defaults to $GITHUB_EVENT_PATH
        environ: Environment to read the path from (defaults to os.environ)

    Returns:
        Parsed ReleaseEvent
    """
    if path is None:
        env = os.environ if environ is None else environ
        path = env.get(EVENT_PATH_ENV)
        if not path:
            raise PreconditionError(
                f"{EVENT_PATH_ENV} is not set; no trigger payload to read"
            )

    event_path = Path(path)
    if not event_path.exists():
        raise PreconditionError(f"Event payload not found: {event_path}")

    logger.debug(f"Reading event payload: {event_path}")
    try:
        with open(event_path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PreconditionError(f"Event payload is not valid JSON: {e}") from e

    event = ReleaseEvent.from_payload(payload)
    logger.info(f"Release event for tag {event.tag_name} ({event.target_commitish})")
    return event
