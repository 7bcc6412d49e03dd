"""Base matcher module - keyword validation and abstract matcher interface"""

from Matchers.base.base_matcher import (
    BaseKeywordMatcher,
    KeywordError,
    validate_buffer,
    validate_keyword,
)

__all__ = ["BaseKeywordMatcher", "KeywordError", "validate_buffer", "validate_keyword"]
