"""
Asset name pattern formatting.
Handles ${NAME}, ${NAME:start} and ${NAME:start:end} placeholders.

Placeholders are resolved against a flat variable table. Unknown or empty
variables resolve to an empty string and malformed slice bounds fall back to
their defaults, so formatting never fails.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


OPEN_MARKER = '${'
CLOSE_MARKER = '}'


@dataclass(frozen=True)
class Placeholder:
    """Parsed body of a ${...} placeholder."""
    name: str
    start: Optional[int] = None
    end: Optional[int] = None


def _parse_bound(text: Optional[str]) -> Optional[int]:
    """Parse a slice bound, treating empty or non-numeric text as absent."""
    if not text:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def parse_placeholder(body: str) -> Placeholder:
    """
    Parse a placeholder body of the form NAME[:START[:END]].

    Args:
        body: Text between '${' and '}'

    Returns:
        Placeholder with unset bounds left as None
    """
    parts = body.split(':', 2)
    name = parts[0]
    start = _parse_bound(parts[1]) if len(parts) > 1 else None
    end = _parse_bound(parts[2]) if len(parts) > 2 else None
    return Placeholder(name=name, start=start, end=end)


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class PatternFormatter:
    """
    Formats asset name patterns against a variable table.

    The scan resumes right after each inserted value, so text produced by a
    substitution is never rescanned for placeholders. Slicing follows Python
    semantics: out-of-range bounds are clamped, an end before the start gives
    an empty string, and negative bounds count from the end of the value.
    """

    def __init__(self, variables: Mapping[str, Any]):
        self.variables = variables

    def resolve(self, body: str) -> str:
        """
        Resolve one placeholder body to its (possibly sliced) value.

        Args:
            body: Placeholder body, e.g. 'COMMITISH:0:7'

        Returns:
            Resolved string, empty when the variable is absent or falsy
        """
        placeholder = parse_placeholder(body)
        value = self.variables.get(placeholder.name)
        if not value:
            return ''

        text = _stringify(value)
        return text[placeholder.start:placeholder.end]

    def format(self, pattern: str) -> str:
        """
        Substitute every well-formed placeholder in a pattern.

        Args:
            pattern: Pattern containing ${...} placeholders

        Returns:
            Formatted string; an unterminated '${' and everything after it
            is kept verbatim
        """
        result = pattern
        cursor = 0
        while True:
            begin = result.find(OPEN_MARKER, cursor)
            if begin == -1:
                break
            close = result.find(CLOSE_MARKER, begin + len(OPEN_MARKER))
            if close == -1:
                break

            value = self.resolve(result[begin + len(OPEN_MARKER):close])
            result = result[:begin] + value + result[close + 1:]
            cursor = begin + len(value)

        return result


def format_pattern(pattern: str, variables: Mapping[str, Any]) -> str:
    """Format a pattern against a variable table."""
    return PatternFormatter(variables).format(pattern)
