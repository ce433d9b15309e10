"""CLI command handlers."""

from .upload import upload_release_asset
from .preview import format_pattern_command

__all__ = ['upload_release_asset', 'format_pattern_command']
