"""Abstract base class and keyword validation for single-pattern byte matchers."""
# IMPORTS
from abc import ABC, abstractmethod
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


class KeywordError(ValueError):
    """Raised when a search keyword is empty or not a byte sequence"""
    pass


def validate_keyword(keyword: Union[str, bytes, bytearray]) -> bytes:
    """
    Normalize a keyword to immutable ``bytes`` and reject empty patterns.

    Args:
        keyword: Pattern to search for. ``str`` is encoded as UTF-8.

    Returns:
        The keyword as ``bytes``.

    Raises:
        KeywordError: If the keyword is empty or of an unsupported type.
    """
    if isinstance(keyword, str):
        keyword = keyword.encode("utf-8")
    elif isinstance(keyword, (bytearray, memoryview)):
        keyword = bytes(keyword)
    elif not isinstance(keyword, bytes):
        raise KeywordError(f"keyword must be bytes or str, got {type(keyword).__name__}")

    if not keyword:
        raise KeywordError("keyword must not be empty")
    return keyword


def validate_buffer(buffer: BytesLike) -> BytesLike:
    """
    Check that *buffer* is bytes-like and expose it as a flat run of bytes.

    Memoryviews with a wider or signed item format, or more than one
    dimension, are recast to unsigned bytes so indexing yields values 0..255.

    Raises:
        TypeError: If *buffer* is not bytes-like, or is a non-contiguous view.
    """
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        raise TypeError(f"buffer must be bytes-like, got {type(buffer).__name__}")
    if isinstance(buffer, memoryview) and (buffer.ndim != 1 or buffer.format != 'B'):
        buffer = buffer.cast('B')
    return buffer


class BaseKeywordMatcher(ABC):
    """Abstract base class for exact single-keyword matchers."""

    ALGORITHM = 'Override in subclass'

    def __init__(self, keyword: Union[str, bytes, bytearray]):
        self.keyword = validate_keyword(keyword)

    @abstractmethod
    def contains(self, buffer: BytesLike) -> bool:
        """Return True if the keyword occurs anywhere in *buffer*."""

    def __len__(self) -> int:
        return len(self.keyword)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keyword={self.keyword!r}, algorithm={self.ALGORITHM!r})"
