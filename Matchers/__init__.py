"""
Keyword Matchers Module
Dr. Venkata Rajesh Yella | 2025.1 | MIT License

Re-exports the matcher classes and helpers used by the chunked scanner.
"""

from Matchers.base.base_matcher import BaseKeywordMatcher, KeywordError, validate_buffer, validate_keyword
from Matchers.horspool.matcher import HorspoolMatcher, build_skip_table, contains_keyword

__all__ = [
    "BaseKeywordMatcher",
    "KeywordError",
    "HorspoolMatcher",
    "build_skip_table",
    "contains_keyword",
    "validate_buffer",
    "validate_keyword",
]

__version__ = "2025.1"
__author__ = "Dr. Venkata Rajesh Yella"
