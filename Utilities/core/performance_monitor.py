"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ PerformanceMonitor - Scan Telemetry                                          │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Thread-safe performance monitor that tracks per-chunk and per-stage
    timings of a keyword scan.

    Tracks:
        - Per-chunk runtime, byte count and match flag
        - Named stage durations (planning, search)
        - Peak RSS memory via psutil

    Usage::

        from Utilities.core.performance_monitor import PerformanceMonitor

        monitor = PerformanceMonitor()
        monitor.start()
        monitor.record_chunk(chunk_id=0, elapsed=0.01, found=False, byte_count=65_536)
        monitor.record_stage("search", elapsed=0.02)

        summary = monitor.get_summary()
        print(summary["throughput_bps"])
"""

from __future__ import annotations

import logging
import os
import threading
from time import perf_counter
from typing import Any, Dict, List, Optional

import psutil

logger = logging.getLogger(__name__)


class PerformanceMonitor:
    """
    Thread-safe real-time performance monitor for chunked scans.

    All ``record_*`` methods are safe to call from multiple threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._start_time: Optional[float] = None
        self._stage_records: Dict[str, float] = {}
        self._chunk_records: List[Dict[str, Any]] = []
        self._peak_memory_mb: float = 0.0

    # ------------------------------------------------------------------
    # LIFECYCLE
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Reset all records and start the global timer."""
        with self._lock:
            self._stage_records = {}
            self._chunk_records = []
            self._peak_memory_mb = 0.0
            self._start_time = perf_counter()
        self.snapshot_memory()

    # ------------------------------------------------------------------
    # RECORDING
    # ------------------------------------------------------------------

    def record_stage(self, stage_name: str, elapsed: float) -> None:
        """
        Record the wall-clock duration of a named scan stage.

        Args:
            stage_name: Stage name (e.g. ``"planning"``, ``"search"``).
            elapsed:    Duration in seconds.
        """
        with self._lock:
            self._stage_records[stage_name] = elapsed

    def record_chunk(
        self,
        chunk_id: int,
        elapsed: float,
        found: bool,
        byte_count: int,
    ) -> None:
        """
        Record the search of a single chunk.

        Args:
            chunk_id:   Zero-based chunk index.
            elapsed:    Wall-clock time spent in the matcher (seconds).
            found:      Whether the keyword was found in this chunk.
            byte_count: Number of bytes searched.
        """
        with self._lock:
            self._chunk_records.append(
                {
                    "chunk_id": chunk_id,
                    "elapsed": elapsed,
                    "found": found,
                    "byte_count": byte_count,
                }
            )

    # ------------------------------------------------------------------
    # MEMORY
    # ------------------------------------------------------------------

    def snapshot_memory(self) -> float:
        """
        Capture current RSS memory and update peak.

        Returns:
            Current RSS memory in MB, or 0.0 if the process cannot be read.
        """
        try:
            mb = psutil.Process(os.getpid()).memory_info().rss / 1_048_576
        except (OSError, psutil.Error) as exc:
            logger.debug(f"PerformanceMonitor: memory snapshot failed: {exc}")
            return 0.0
        with self._lock:
            if mb > self._peak_memory_mb:
                self._peak_memory_mb = mb
        return mb

    # ------------------------------------------------------------------
    # SUMMARY
    # ------------------------------------------------------------------

    def get_summary(self) -> Dict[str, Any]:
        """
        Return a snapshot of all collected metrics.

        Returns:
            Dict with keys::

                {
                    "total_elapsed":       float,   # seconds since start()
                    "total_bytes_scanned": int,
                    "throughput_bps":      float,   # bytes / second
                    "peak_memory_mb":      float,
                    "chunk_count":         int,     # chunks that reported back
                    "avg_chunk_time":      float,
                    "chunk_records":       list,
                    "stage_times":         dict,
                    "match_chunk":         int | None,
                }
        """
        with self._lock:
            elapsed_since_start = (
                perf_counter() - self._start_time if self._start_time else 0.0
            )
            total_bytes = sum(c["byte_count"] for c in self._chunk_records)
            chunk_times = [c["elapsed"] for c in self._chunk_records]
            match_chunk = next(
                (c["chunk_id"] for c in self._chunk_records if c["found"]), None
            )

            return {
                "total_elapsed": elapsed_since_start,
                "total_bytes_scanned": total_bytes,
                "throughput_bps": (
                    total_bytes / elapsed_since_start if elapsed_since_start > 0 else 0.0
                ),
                "peak_memory_mb": self._peak_memory_mb,
                "chunk_count": len(self._chunk_records),
                "avg_chunk_time": (
                    sum(chunk_times) / len(chunk_times) if chunk_times else 0.0
                ),
                "chunk_records": list(self._chunk_records),
                "stage_times": dict(self._stage_records),
                "match_chunk": match_chunk,
            }

    def format_summary(self) -> str:
        """Return a human-readable performance summary table."""
        s = self.get_summary()

        lines: List[str] = [
            "══════════════════════════════════════════════════",
            "  Scan Summary",
            "══════════════════════════════════════════════════",
            f"  Total runtime      : {s['total_elapsed']:.3f} s",
            f"  Bytes scanned      : {s['total_bytes_scanned']:,}",
            f"  Throughput         : {s['throughput_bps']:,.0f} B/s",
            f"  Peak memory        : {s['peak_memory_mb']:.1f} MB",
            f"  Chunks reported    : {s['chunk_count']}",
            f"  Avg chunk time     : {s['avg_chunk_time']:.4f} s",
            f"  Match chunk        : {s['match_chunk'] if s['match_chunk'] is not None else '-'}",
        ]

        if s.get("stage_times"):
            lines.append("")
            lines.append("  Stage Times:")
            for stage, t in sorted(s["stage_times"].items()):
                lines.append(f"    {stage:<20} {t:.3f} s")

        lines.append("══════════════════════════════════════════════════")
        return "\n".join(lines)
