"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Horspool Keyword Matcher - Bad-Character Skip Search                         │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Exact single-keyword search over raw bytes using the Boyer-Moore
    bad-character rule (Horspool variant).  The keyword is aligned with the
    buffer and compared right-to-left; on a mismatch the window is shifted by
    the skip-table entry of the buffer byte under the window's last position.

    Skip table (256 entries, one per byte value):

        default            = len(keyword)
        keyword[i], i<m-1  = len(keyword) - i - 1   (last occurrence wins)

    Every entry lies in [1, len(keyword)], so the cursor strictly advances and
    the loop always terminates.  Average case is sub-linear; repeated-byte
    inputs degrade to a linear scan.

    Only the first occurrence is looked for: the search stops as soon as a
    full match is seen.

USAGE::

    from Matchers.horspool.matcher import contains_keyword, HorspoolMatcher

    contains_keyword(pdf_bytes, b"/Encrypt")      # -> bool
    HorspoolMatcher(b"/Encrypt").contains(pdf_bytes)
"""

from __future__ import annotations

import logging
from typing import List, Union

from Matchers.base.base_matcher import (
    BaseKeywordMatcher,
    BytesLike,
    validate_buffer,
    validate_keyword,
)

logger = logging.getLogger(__name__)

ALPHABET_SIZE: int = 256


def build_skip_table(keyword: bytes) -> List[int]:
    """
    Build the bad-character skip table for *keyword*.

    Args:
        keyword: Non-empty search pattern.

    Returns:
        List of 256 shift amounts indexed by byte value.
    """
    keyword_len = len(keyword)
    table = [keyword_len] * ALPHABET_SIZE
    # The final keyword byte is excluded so no entry can be 0.
    for i in range(keyword_len - 1):
        table[keyword[i]] = keyword_len - i - 1
    logger.debug(f"Horspool skip table built for {keyword_len}-byte keyword {keyword!r}")
    return table


def contains_keyword(buffer: BytesLike, keyword: Union[str, bytes, bytearray]) -> bool:
    """
    Return True if *keyword* occurs as a contiguous run anywhere in *buffer*.

    Args:
        buffer:  Bytes-like object to search (bytes, bytearray or memoryview).
        keyword: Non-empty pattern.

    Returns:
        True on the first full match, False if the buffer is exhausted.

    Raises:
        KeywordError: If *keyword* is empty.
    """
    keyword = validate_keyword(keyword)
    keyword_len = len(keyword)
    buffer_len = len(buffer)

    if buffer_len < keyword_len:
        return False

    skip = build_skip_table(keyword)
    last = keyword_len - 1

    cursor = last
    while cursor < buffer_len:
        k = 0
        while k < keyword_len and keyword[last - k] == buffer[cursor - k]:
            k += 1
        if k == keyword_len:
            return True
        cursor += skip[buffer[cursor]]

    return False


class HorspoolMatcher(BaseKeywordMatcher):
    """
    Object form of :func:`contains_keyword` bound to one keyword.

    The skip table is rebuilt on every :meth:`contains` call; instances hold
    no per-buffer state and pickle cleanly, so one instance can be shared by
    thread and process workers.
    """

    ALGORITHM = 'Boyer-Moore-Horspool (bad-character rule)'

    def contains(self, buffer: BytesLike) -> bool:
        return contains_keyword(validate_buffer(buffer), self.keyword)
