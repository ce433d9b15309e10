"""Action inputs loading and strict validation."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from release_upload.exceptions import InputValidationError, ValidationError
from release_upload.variables.pattern import format_pattern


logger = logging.getLogger(__name__)

KNOWN_INPUTS = ('file', 'mime', 'pattern', 'name')
REQUIRED_INPUTS = ('file', 'mime')


def input_env_name(name: str) -> str:
    """Environment variable the Actions runner uses for an input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


@dataclass
class ActionInputs:
    """Validated inputs for one upload."""
    file: str
    mime: str
    pattern: str = ''

    def display_name(self, variables: Mapping[str, Any]) -> str:
        """Asset display name: the formatted pattern, or the file input verbatim."""
        if self.pattern:
            return format_pattern(self.pattern, variables)
        return self.file


class InputsLoader:
    """
    Collects action inputs from the environment, an optional YAML inputs
    file, and explicit overrides (highest precedence).
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ
        self.errors: List[ValidationError] = []

    def load(
        self,
        inputs_file: Optional[Union[str, Path]] = None,
        overrides: Optional[Dict[str, Optional[str]]] = None
    ) -> ActionInputs:
        """
        Load and validate inputs.

        Args:
            inputs_file: Optional YAML mapping of input name to value
            overrides: Values from the command line; None entries are ignored

        Returns:
            ActionInputs

        Raises:
            InputValidationError: If any input is unknown or a required one is missing
        """
        self.errors = []
        values = self._from_environment()

        if inputs_file:
            values.update(self._from_file(Path(inputs_file)))

        for key, value in (overrides or {}).items():
            if value is not None:
                values[key] = value

        for key in REQUIRED_INPUTS:
            if not values.get(key, '').strip():
                self._add_error(f"Input required and not supplied: {key}", key)

        if self.errors:
            raise InputValidationError(self.errors)

        # 'name' is the older spelling of 'pattern'
        pattern = values.get('pattern') or values.get('name') or ''
        inputs = ActionInputs(
            file=values['file'].strip(),
            mime=values['mime'].strip(),
            pattern=pattern,
        )
        logger.debug(f"Inputs: file={inputs.file} mime={inputs.mime} pattern={inputs.pattern!r}")
        return inputs

    def _from_environment(self) -> Dict[str, str]:
        values = {}
        for key in KNOWN_INPUTS:
            value = self.environ.get(input_env_name(key))
            if value:
                values[key] = value
        return values

    def _from_file(self, path: Path) -> Dict[str, str]:
        """Read a YAML inputs file; scalars are kept as strings."""
        if not path.exists():
            self._add_error(f"Inputs file not found: {path}", str(path))
            return {}

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.load(f, Loader=yaml.BaseLoader)
        except yaml.YAMLError as e:
            self._add_error(f"Failed to load inputs file: {e}", str(path))
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            self._add_error("Inputs file must be a YAML mapping", str(path))
            return {}

        values = {}
        for key, value in data.items():
            if key not in KNOWN_INPUTS:
                self._add_error(f"Unknown input '{key}'", key)
            elif not isinstance(value, str):
                self._add_error(f"Input '{key}' must be a scalar value", key)
            else:
                values[key] = value
        return values

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message=message, path=path))
