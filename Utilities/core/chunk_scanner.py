"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ ChunkScanner - Chunk-Parallel Keyword Search Engine                          │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Partitions a byte buffer into contiguous chunks sized to the available
    parallelism, searches every chunk for the keyword in its own task and
    reduces the per-chunk answers with a logical OR.

    Execution model::

        Caller buffer
            ↓
        plan_chunks()  (chunk_size = len // (cpus * 2))
            ↓
        Executor (process pool by default, thread pool on request)
            ↓
        _chunk_worker()  [one task per chunk, all submitted up front]
            ↓
        HorspoolMatcher.contains(chunk)
            ↓
        as_completed(): first True wins, otherwise False after all tasks

    On the first match the scanner returns immediately: tasks that have not
    started yet are cancelled, running tasks finish in the background and
    their results are ignored.

    Process workers receive byte copies of their chunk; thread workers
    receive zero-copy ``memoryview`` slices.  When the buffer exceeds the RAM
    budget the process pool is swapped for a thread pool.

KNOWN LIMITATION
    With ``overlap_boundaries=False`` (default) chunks are disjoint and a
    keyword straddling two chunks is missed by this path while
    ``contains_keyword`` over the whole buffer still finds it.  Pass
    ``overlap_boundaries=True`` to search ``len(keyword) - 1`` extra bytes
    past every chunk end.
"""

from __future__ import annotations

import logging
from concurrent.futures import (
    BrokenExecutor,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)
from time import perf_counter
from typing import Any, Dict, List, Optional, Tuple, Union

from Matchers.base.base_matcher import BaseKeywordMatcher, BytesLike, validate_buffer
from Matchers.horspool.matcher import HorspoolMatcher
from Utilities.chunk_generator import plan_chunks
from Utilities.config.scan import ENCRYPT_KEYWORD, SCAN_CONFIG, VALID_EXECUTORS
from Utilities.core.performance_monitor import PerformanceMonitor
from Utilities.system_resource_inspector import SystemResourceInspector

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# MODULE-LEVEL WORKER (must be picklable for ProcessPoolExecutor)
# ──────────────────────────────────────────────────────────────────────────────

def _chunk_worker(args: Tuple[BytesLike, BaseKeywordMatcher, int]) -> Dict[str, Any]:
    """
    Search one chunk for the keyword.

    Args:
        args: Tuple of (chunk, matcher, chunk_index).

    Returns:
        Dict with keys ``chunk_index``, ``found``, ``elapsed``, ``byte_count``.
    """
    chunk, matcher, chunk_index = args
    t0 = perf_counter()
    found = matcher.contains(chunk)
    return {
        "chunk_index": chunk_index,
        "found": found,
        "elapsed": perf_counter() - t0,
        "byte_count": len(chunk),
    }


# ──────────────────────────────────────────────────────────────────────────────
# CHUNK SCANNER
# ──────────────────────────────────────────────────────────────────────────────

class ChunkScanner:
    """
    Chunk-parallel keyword scanner with per-scan telemetry.

    Usage::

        scanner = ChunkScanner(b"/Encrypt", executor="thread")
        if scanner.scan(pdf_bytes):
            print("password-protected")
        print(scanner.get_performance_summary()["chunk_count"])

    Each call to :meth:`scan` records into its own PerformanceMonitor;
    :meth:`get_performance_summary` reports the most recently finished scan.
    """

    def __init__(
        self,
        keyword: Union[str, bytes, bytearray] = ENCRYPT_KEYWORD,
        parallelism: Optional[int] = None,
        executor: Optional[str] = None,
        overlap_boundaries: Optional[bool] = None,
        min_parallel_size: Optional[int] = None,
        oversubscription: Optional[int] = None,
        resource_inspector: Optional[SystemResourceInspector] = None,
    ) -> None:
        """
        Args:
            keyword:            Non-empty pattern to search for.
            parallelism:        Execution units (default: logical CPU count).
            executor:           ``"process"`` or ``"thread"`` (default from SCAN_CONFIG).
            overlap_boundaries: Search ``len(keyword) - 1`` bytes past every chunk end.
            min_parallel_size:  Buffers shorter than this are searched as one chunk.
            oversubscription:   Tasks per execution unit (default 2).
            resource_inspector: Source of CPU / RAM figures.

        Raises:
            KeywordError: If the keyword is empty.
            ValueError:   If parallelism < 1, oversubscription < 1,
                          min_parallel_size < 0 or the executor is unknown.
        """
        self._matcher = HorspoolMatcher(keyword)
        self.keyword = self._matcher.keyword
        self._inspector = resource_inspector or SystemResourceInspector()

        if parallelism is None:
            parallelism = self._inspector.get_cpu_count()
        if parallelism < 1:
            raise ValueError(f"parallelism ({parallelism}) must be at least 1")

        executor = executor if executor is not None else SCAN_CONFIG['executor']
        if executor not in VALID_EXECUTORS:
            raise ValueError(
                f"executor must be one of {VALID_EXECUTORS}, got {executor!r}"
            )

        oversubscription = (
            oversubscription if oversubscription is not None
            else SCAN_CONFIG['oversubscription']
        )
        if oversubscription < 1:
            raise ValueError(f"oversubscription ({oversubscription}) must be at least 1")

        min_parallel_size = (
            min_parallel_size if min_parallel_size is not None
            else SCAN_CONFIG['min_parallel_size']
        )
        if min_parallel_size < 0:
            raise ValueError(f"min_parallel_size ({min_parallel_size}) must not be negative")

        self.parallelism = parallelism
        self.executor = executor
        self.overlap_boundaries = (
            overlap_boundaries if overlap_boundaries is not None
            else SCAN_CONFIG['overlap_boundaries']
        )
        self.min_parallel_size = min_parallel_size
        self.oversubscription = oversubscription
        self._monitor = PerformanceMonitor()

        logger.debug(
            f"ChunkScanner ready (keyword={self.keyword!r}, parallelism={parallelism}, "
            f"executor={executor}, overlap_boundaries={self.overlap_boundaries})"
        )

    # ------------------------------------------------------------------
    # PUBLIC API
    # ------------------------------------------------------------------

    def scan(self, buffer: BytesLike) -> bool:
        """
        Return True if the keyword occurs inside any chunk of *buffer*.

        Args:
            buffer: Bytes-like object; never mutated.

        Returns:
            True as soon as one chunk reports a match, False once every chunk
            has been searched without one.
        """
        view = memoryview(validate_buffer(buffer))
        monitor = PerformanceMonitor()
        monitor.start()
        try:
            return self._scan_view(view, monitor)
        finally:
            self._monitor = monitor

    def get_performance_summary(self) -> Dict[str, Any]:
        """Return the performance summary dict from the last completed ``scan()`` call."""
        return self._monitor.get_summary()

    # ------------------------------------------------------------------
    # EXECUTION
    # ------------------------------------------------------------------

    def _scan_view(self, view: memoryview, monitor: PerformanceMonitor) -> bool:
        buffer_length = len(view)
        if buffer_length == 0:
            logger.debug("ChunkScanner: empty buffer – nothing to scan")
            return False

        t_plan = perf_counter()
        if buffer_length < self.min_parallel_size:
            chunks = [{"index": 0, "start": 0, "end": buffer_length, "scan_end": buffer_length}]
        else:
            chunks = plan_chunks(
                buffer_length,
                self.parallelism,
                len(self.keyword),
                overlap_boundaries=self.overlap_boundaries,
                oversubscription=self.oversubscription,
            )
        plan_elapsed = perf_counter() - t_plan
        monitor.record_stage("planning", plan_elapsed)

        t_search = perf_counter()
        if len(chunks) == 1:
            found = self._run_sequential(view, chunks, monitor)
        else:
            kind = self._select_executor(buffer_length)
            try:
                found = self._run_pool(view, chunks, kind, monitor)
            except (BrokenExecutor, OSError) as exc:
                logger.warning(
                    f"ChunkScanner: {kind} pool failed ({exc}); falling back to sequential"
                )
                monitor.start()
                monitor.record_stage("planning", plan_elapsed)
                found = self._run_sequential(view, chunks, monitor)
        monitor.record_stage("search", perf_counter() - t_search)

        logger.info(
            f"ChunkScanner: {buffer_length:,} B in {len(chunks)} chunk(s) → "
            f"{'match' if found else 'no match'}"
        )
        return found

    def _select_executor(self, buffer_length: int) -> str:
        """Swap the process pool for threads when chunk copies would not fit in RAM."""
        if self.executor == "process":
            budget = self._inspector.get_memory_budget()
            if buffer_length > budget:
                logger.info(
                    f"ChunkScanner: buffer {buffer_length:,} B exceeds memory budget "
                    f"{budget:,} B – using thread pool"
                )
                return "thread"
        return self.executor

    def _run_pool(
        self,
        view: memoryview,
        chunks: List[Dict[str, Any]],
        kind: str,
        monitor: PerformanceMonitor,
    ) -> bool:
        """Fan out one task per chunk and OR the results as they complete."""
        pool_cls = ProcessPoolExecutor if kind == "process" else ThreadPoolExecutor
        max_workers = min(self.parallelism, len(chunks))
        executor = pool_cls(max_workers=max_workers)

        found = False
        try:
            futures = {
                executor.submit(
                    _chunk_worker,
                    (self._slice(view, chunk, kind), self._matcher, chunk["index"]),
                ): chunk["index"]
                for chunk in chunks
            }
            logger.debug(f"ChunkScanner: {len(futures)} tasks → {max_workers} {kind} workers")

            for future in as_completed(futures):
                result = future.result()
                self._record(monitor, result)
                if result["found"]:
                    found = True
                    break
        finally:
            # Stragglers keep running after an early match; only queued tasks are dropped.
            executor.shutdown(wait=not found, cancel_futures=found)

        return found

    def _run_sequential(
        self,
        view: memoryview,
        chunks: List[Dict[str, Any]],
        monitor: PerformanceMonitor,
    ) -> bool:
        """Search chunks in order in the calling thread."""
        for chunk in chunks:
            result = _chunk_worker((self._slice(view, chunk, "thread"), self._matcher, chunk["index"]))
            self._record(monitor, result)
            if result["found"]:
                return True
        return False

    @staticmethod
    def _slice(view: memoryview, chunk: Dict[str, Any], kind: str) -> BytesLike:
        part = view[chunk["start"]:chunk["scan_end"]]
        return part.tobytes() if kind == "process" else part

    @staticmethod
    def _record(monitor: PerformanceMonitor, result: Dict[str, Any]) -> None:
        monitor.record_chunk(
            chunk_id=result["chunk_index"],
            elapsed=result["elapsed"],
            found=result["found"],
            byte_count=result["byte_count"],
        )
        logger.debug(
            f"ChunkScanner: chunk {result['chunk_index']} done "
            f"({result['byte_count']:,} B, found={result['found']}, {result['elapsed']:.4f}s)"
        )
