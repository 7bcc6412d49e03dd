"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ System Resource Inspector - CPU / RAM Availability Detection                 │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

DESCRIPTION:
    Detects logical CPU count and available RAM.  Used by ChunkScanner to
    derive the default parallelism hint and to decide whether per-chunk byte
    copies for a process pool fit in memory.

USAGE::

    inspector = SystemResourceInspector()
    cpus   = inspector.get_cpu_count()
    budget = inspector.get_memory_budget()   # 60% of available RAM in bytes
"""

from __future__ import annotations

import logging
import os

import psutil

logger = logging.getLogger(__name__)

# Fraction of available RAM exposed as the safe memory budget
_MEMORY_BUDGET_FRACTION: float = 0.60

# Used when psutil cannot read memory statistics (restricted containers)
_FALLBACK_RAM: int = 512 * 1024 * 1024


class SystemResourceInspector:
    """
    Inspect system resources and compute safe operating limits.

    All values are in bytes unless otherwise stated.
    """

    def get_cpu_count(self) -> int:
        """
        Return the number of logical CPU cores available.

        Uses ``psutil.cpu_count(logical=True)``; falls back to
        ``os.cpu_count()`` and finally to 1.
        """
        count = psutil.cpu_count(logical=True) or os.cpu_count()
        if count is None or count < 1:
            logger.warning("CPU count unavailable – defaulting to 1")
            return 1
        return count

    def get_available_ram(self) -> int:
        """Return currently available (free + reclaimable) RAM in bytes."""
        try:
            return psutil.virtual_memory().available
        except (OSError, psutil.Error) as exc:
            logger.warning(f"Could not read available RAM – defaulting to 512 MB: {exc}")
            return _FALLBACK_RAM

    def get_memory_budget(self) -> int:
        """
        Return the safe usable RAM budget in bytes.

        Defined as ``_MEMORY_BUDGET_FRACTION`` (60 %) of currently available
        RAM.

        Returns:
            Safe memory budget in bytes (≥ 1 byte).
        """
        budget = int(self.get_available_ram() * _MEMORY_BUDGET_FRACTION)
        return max(budget, 1)
