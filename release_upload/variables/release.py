"""
Release variable table construction.

Builds the read-only mapping consumed by the pattern formatter from release
metadata and the current UTC date.
"""

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from ..event import ReleaseEvent


def normalize_tag(tag: str) -> str:
    """Strip a single leading 'v' from a release tag."""
    if tag.startswith('v'):
        return tag[1:]
    return tag


def build_release_variables(
    release: ReleaseEvent,
    now: Optional[datetime] = None,
    base: Optional[Mapping[str, Any]] = None
) -> Mapping[str, Any]:
    """
    Build the variable table for a release.

    Args:
        release: Parsed release event
        now: Timestamp used for YEAR/MONTH/DAY (defaults to current UTC time)
        base: Lower-precedence variables, overridden by release variables

    Returns:
        Read-only mapping of variable name to value
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)

    variables: Dict[str, Any] = dict(base or {})
    variables.update({
        'TAG_RAW': release.tag_name,
        'TAG': normalize_tag(release.tag_name),
        'COMMITISH': release.target_commitish,
        'RELEASE_NAME': release.name or '',
        'YEAR': str(now.year),
        'MONTH': f"{now.month:02d}",
        'DAY': f"{now.day:02d}",
    })

    return MappingProxyType(variables)
