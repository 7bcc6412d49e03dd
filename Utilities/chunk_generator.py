"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ Chunk Generator - Contiguous Buffer Range Partitioning                       │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Splits a buffer of ``buffer_length`` bytes into contiguous half-open
    ranges ``[start, end)`` that cover ``[0, buffer_length)`` exactly once.
    Every chunk is ``chunk_size`` bytes long except the last, which holds the
    remainder.

    Chunk size is derived from the available parallelism:

        target_tasks = parallelism * oversubscription
        chunk_size   = max(1, buffer_length // target_tasks)

    Example with buffer_length=10, parallelism=1, oversubscription=2:

        chunk_size = 5
        Chunk 0:  [0 – 5)
        Chunk 1:  [5 – 10)

    Optional overlap: ``scan_end`` extends a chunk past ``end`` by
    ``overlap`` bytes (clipped to the buffer) so a keyword of length
    ``overlap + 1`` straddling ``end`` is fully inside one searched range.
    ``[start, end)`` ranges stay disjoint either way.

USAGE::

    gen = ChunkGenerator(buffer_length=len(data), chunk_size=4096, overlap=7)
    for chunk in gen.generate():
        # chunk["index"], chunk["start"], chunk["end"], chunk["scan_end"]
        search(data[chunk["start"]:chunk["scan_end"]])
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Generator, List

logger = logging.getLogger(__name__)


def calculate_chunk_size(
    buffer_length: int,
    parallelism: int,
    oversubscription: int = 2,
) -> int:
    """
    Return the nominal chunk size for a buffer.

    Non-positive ``parallelism`` or ``oversubscription`` values are clamped
    to 1 so the division is always defined.

    Args:
        buffer_length:    Total buffer length in bytes.
        parallelism:      Available execution units (e.g. logical CPUs).
        oversubscription: Tasks per execution unit.

    Returns:
        Chunk size in bytes (≥ 1).
    """
    if parallelism < 1:
        logger.warning(f"calculate_chunk_size: parallelism={parallelism} clamped to 1")
        parallelism = 1
    if oversubscription < 1:
        logger.warning(
            f"calculate_chunk_size: oversubscription={oversubscription} clamped to 1"
        )
        oversubscription = 1

    target_tasks = parallelism * oversubscription
    return max(1, buffer_length // target_tasks)


class ChunkGenerator:
    """
    Yield contiguous buffer chunks as dicts for downstream searching.

    Each yielded dict contains:

    * ``index``     – int, zero-based chunk number
    * ``start``     – int, buffer offset (inclusive)
    * ``end``       – int, end of the owned range (exclusive)
    * ``scan_end``  – int, end of the searched range (exclusive);
                     ``end + overlap`` clipped to the buffer length
    """

    def __init__(self, buffer_length: int, chunk_size: int, overlap: int = 0):
        """
        Args:
            buffer_length: Total buffer length in bytes.
            chunk_size:    Nominal chunk length in bytes.
            overlap:       Extra bytes searched past each chunk end.

        Raises:
            ValueError: If chunk_size < 1, overlap < 0 or buffer_length < 0.
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size ({chunk_size}) must be at least 1")
        if overlap < 0:
            raise ValueError(f"overlap ({overlap}) must not be negative")
        if buffer_length < 0:
            raise ValueError(f"buffer_length ({buffer_length}) must not be negative")
        self.buffer_length = buffer_length
        self.chunk_size = chunk_size
        self.overlap = overlap

    def generate(self) -> Generator[Dict[str, Any], None, None]:
        """
        Yield chunk dicts in buffer order.

        Yields:
            Dict with keys ``index``, ``start``, ``end``, ``scan_end``.
        """
        index = 0
        for start in range(0, self.buffer_length, self.chunk_size):
            end = min(start + self.chunk_size, self.buffer_length)
            yield {
                "index": index,
                "start": start,
                "end": end,
                "scan_end": min(end + self.overlap, self.buffer_length),
            }
            index += 1

        logger.debug(
            f"ChunkGenerator: yielded {index} chunk(s) "
            f"for buffer length {self.buffer_length:,} (chunk_size={self.chunk_size:,})"
        )


def plan_chunks(
    buffer_length: int,
    parallelism: int,
    keyword_length: int,
    overlap_boundaries: bool = False,
    oversubscription: int = 2,
) -> List[Dict[str, Any]]:
    """
    Compute the chunk layout of one scan.

    Args:
        buffer_length:      Total buffer length in bytes.
        parallelism:        Available execution units.
        keyword_length:     Length of the searched keyword.
        overlap_boundaries: Search ``keyword_length - 1`` bytes past each chunk.
        oversubscription:   Tasks per execution unit.

    Returns:
        List of chunk dicts (see :class:`ChunkGenerator`).
    """
    chunk_size = calculate_chunk_size(buffer_length, parallelism, oversubscription)
    overlap = max(0, keyword_length - 1) if overlap_boundaries else 0
    chunks = list(ChunkGenerator(buffer_length, chunk_size, overlap).generate())

    logger.info(
        f"plan_chunks: buffer={buffer_length:,} B, parallelism={parallelism}, "
        f"chunk_size={chunk_size:,}, overlap={overlap} → {len(chunks)} chunk(s)"
    )
    return chunks
