"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ PDFScanner - Password-Protection Marker Detection                            │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘
"""
# ═══════════════════════════════════════════════════════════════════════════════
# IMPORTS
# ═══════════════════════════════════════════════════════════════════════════════
import logging
from pathlib import Path
from typing import Any, Optional, Union

from Matchers.base.base_matcher import BytesLike, validate_buffer
from Matchers.horspool.matcher import contains_keyword
from Utilities.config.scan import ENCRYPT_KEYWORD
from Utilities.core.chunk_scanner import ChunkScanner

logger = logging.getLogger(__name__)

__version__ = "2025.1"; __author__ = "Dr. Venkata Rajesh Yella"

Keyword = Union[str, bytes, bytearray]


# ═══════════════════════════════════════════════════════════════════════════════
# PUBLIC API
# ═══════════════════════════════════════════════════════════════════════════════

def scan_parallel(
    buffer: BytesLike,
    keyword: Keyword = ENCRYPT_KEYWORD,
    parallelism: Optional[int] = None,
    **options: Any,
) -> bool:
    """
    Chunked, concurrent keyword check.

    Args:
        buffer:      Document bytes.
        keyword:     Pattern to search for (default ``b"/Encrypt"``).
        parallelism: Execution units (default: logical CPU count).
        **options:   Forwarded to :class:`ChunkScanner` (``executor``,
                     ``overlap_boundaries``, ``min_parallel_size``,
                     ``oversubscription``).

    Returns:
        True if any chunk contains the keyword.

    Note:
        Chunks do not overlap unless ``overlap_boundaries=True``; a keyword
        straddling a chunk boundary is then missed.
    """
    scanner = ChunkScanner(keyword, parallelism=parallelism, **options)
    return scanner.scan(buffer)


def scan_simple(buffer: BytesLike, keyword: Keyword = ENCRYPT_KEYWORD) -> bool:
    """Single-pass keyword check over the whole buffer, no parallelism."""
    return contains_keyword(validate_buffer(buffer), keyword)


def is_password_protected(buffer: BytesLike) -> bool:
    """Return True if *buffer* contains the ``/Encrypt`` marker (chunked scan)."""
    return scan_parallel(buffer, ENCRYPT_KEYWORD)


def is_password_protected_simple(buffer: BytesLike) -> bool:
    """Return True if *buffer* contains the ``/Encrypt`` marker (single pass)."""
    return scan_simple(buffer, ENCRYPT_KEYWORD)


def scan_file(
    path: Union[str, Path],
    parallel: bool = True,
    keyword: Keyword = ENCRYPT_KEYWORD,
    **options: Any,
) -> bool:
    """
    Read *path* fully into memory and scan it for *keyword*.

    Raises:
        OSError: If the file cannot be read.
    """
    data = Path(path).read_bytes()
    logger.debug(f"scan_file: read {len(data):,} B from {path}")
    if parallel:
        return scan_parallel(data, keyword, **options)
    return scan_simple(data, keyword)
