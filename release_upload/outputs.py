"""
Step outputs and workflow commands for the Actions runner.

Outputs are appended to the file named by GITHUB_OUTPUT; failures and masks
are written to stdout as workflow commands.
"""

import os
import sys
import uuid
from pathlib import Path
from typing import Mapping, Optional, TextIO


OUTPUT_FILE_ENV = 'GITHUB_OUTPUT'


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


def _make_delimiter(value: str) -> str:
    delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    while delimiter in value:
        delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    return delimiter


def set_output(
    name: str,
    value: str,
    environ: Optional[Mapping[str, str]] = None,
    stream: Optional[TextIO] = None
):
    """
    Publish a step output.

    Args:
        name: Output name
        value: Output value
        environ: Environment holding GITHUB_OUTPUT (defaults to os.environ)
        stream: Fallback stream when GITHUB_OUTPUT is unset (defaults to stdout)
    """
    env = os.environ if environ is None else environ
    output_file = env.get(OUTPUT_FILE_ENV)

    if not output_file:
        print(f"{name}={value}", file=stream or sys.stdout)
        return

    with Path(output_file).open('a', encoding='utf-8') as out:
        if '\n' in value or '\r' in value:
            delimiter = _make_delimiter(value)
            out.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            out.write(f"{name}={value}\n")


def add_mask(value: str, stream: Optional[TextIO] = None):
    """Ask the runner to mask a value in the job log."""
    if value:
        print(f"::add-mask::{escape_data(value)}", file=stream or sys.stdout)


def set_failed(message: str, stream: Optional[TextIO] = None) -> int:
    """
    Report a failure and return the step's exit code.

    Returns:
        1, the exit code that marks the step failed
    """
    print(f"::error::{escape_data(message)}", file=stream or sys.stdout)
    return 1
