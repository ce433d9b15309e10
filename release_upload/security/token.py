"""
API token handling and masking.

- The token is read from the process environment only
- A missing or empty token is a configuration error raised before any request
- Once the HTTP client holds the token, the environment variable is blanked
- Best-effort masking of the token in log records
"""

import logging
import os
import re
from typing import Any, Dict, MutableMapping, Optional, Set

from release_upload.exceptions import ConfigurationError


DEFAULT_TOKEN_ENV = 'GITHUB_TOKEN'
MASK = '***'


class TokenManager:
    """Resolves the API token and keeps track of values to mask."""

    def __init__(
        self,
        env_name: str = DEFAULT_TOKEN_ENV,
        environ: Optional[MutableMapping[str, str]] = None
    ):
        self.env_name = env_name
        self.environ = os.environ if environ is None else environ
        self._masked_values: Set[str] = set()

    def resolve(self) -> str:
        """
        Read the token from the environment.

        Returns:
            Token value

        Raises:
            ConfigurationError: If the variable is unset or empty
        """
        token = self.environ.get(self.env_name)
        if not token:
            raise ConfigurationError(
                f"{self.env_name} is not set; an API token is required to upload"
            )
        self._masked_values.add(token)
        return token

    def scrub(self):
        """Blank the token in the environment so later steps cannot read it."""
        if self.env_name in self.environ:
            self.environ[self.env_name] = ''

    def mask_text(self, text: str) -> str:
        """Replace known token values in text with '***'."""
        if not text or not self._masked_values:
            return text

        masked = text
        # Longest first so a token containing another is masked whole
        for value in sorted(self._masked_values, key=len, reverse=True):
            if value in masked:
                masked = re.sub(re.escape(value), MASK, masked)
        return masked

    def mask_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Mask token values in the string entries of a mapping."""
        if not data or not self._masked_values:
            return data
        return {
            key: self.mask_text(value) if isinstance(value, str) else value
            for key, value in data.items()
        }


class TokenMaskingFilter(logging.Filter):
    """
    Logging filter that masks the token in log records.

    Attach to handlers so messages and their arguments never carry it.
    """

    def __init__(self, token_manager: TokenManager):
        super().__init__()
        self.token_manager = token_manager

    def filter(self, record):
        record.msg = self.token_manager.mask_text(str(record.msg))

        if record.args:
            if isinstance(record.args, dict):
                record.args = self.token_manager.mask_dict(record.args)
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self.token_manager.mask_text(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )

        return True
