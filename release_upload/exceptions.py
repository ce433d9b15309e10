"""Release upload exceptions."""

from typing import List
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single input validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class ReleaseUploadError(Exception):
    """Base class for failures reported by the upload step."""

    exit_code = 1


class ConfigurationError(ReleaseUploadError):
    """Raised when a required input or environment variable is missing."""

    exit_code = 2


class InputValidationError(ConfigurationError):
    """Raised when action inputs fail validation.

    Collects every problem found so the CLI can report them together
    and map to the configuration exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Input error at '{error.path}': {error.message}")
            else:
                messages.append(f"Input error: {error.message}")

        super().__init__("\n".join(messages))


class PreconditionError(ReleaseUploadError):
    """Raised when the trigger payload is missing or is not a release event."""


class UploadError(ReleaseUploadError):
    """Raised when the release API rejects the upload or cannot be reached."""

    def __init__(self, message: str, status_code: int = 0):
        self.status_code = status_code
        super().__init__(message)
