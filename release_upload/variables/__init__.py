"""
Variable formatting module.
Implements asset name patterns and the release variable table.
"""

from .pattern import PatternFormatter, Placeholder, format_pattern, parse_placeholder
from .release import build_release_variables, normalize_tag

__all__ = [
    'PatternFormatter',
    'Placeholder',
    'format_pattern',
    'parse_placeholder',
    'build_release_variables',
    'normalize_tag',
]
