"""
Horspool Matcher Subpackage

Exact single-keyword byte search with a bad-character skip table.

Modules:
--------
- matcher: build_skip_table, contains_keyword and the HorspoolMatcher class
"""

from .matcher import ALPHABET_SIZE, HorspoolMatcher, build_skip_table, contains_keyword

__all__ = [
    'ALPHABET_SIZE',
    'HorspoolMatcher',
    'build_skip_table',
    'contains_keyword',
]
