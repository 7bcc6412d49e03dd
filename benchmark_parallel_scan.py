#!/usr/bin/env python3
"""
Benchmark chunk-parallel keyword scanning vs the single-pass scan.

Random (keyword-free) buffers are the worst case for both paths: every byte
range has to be examined before the answer is known.
"""

import argparse
import logging
import time
from typing import Any, Dict

import numpy as np
import pandas as pd

from Utilities.config.scan import ENCRYPT_KEYWORD
from Utilities.core.chunk_scanner import ChunkScanner
from Utilities.pdfscanner import scan_simple


def format_time(seconds: float) -> str:
    """Format seconds as human-readable string."""
    if seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def random_buffer(size: int, seed: int = 0) -> bytes:
    """Return *size* random bytes with every '/' replaced so the keyword cannot occur."""
    rng = np.random.default_rng(seed)
    data = rng.integers(0, 256, size=size, dtype=np.uint8)
    data[data == ord('/')] = ord('x')
    return data.tobytes()


def benchmark_buffer(buffer: bytes, name: str, scanner: ChunkScanner) -> Dict[str, Any]:
    """Time one simple and one parallel scan of *buffer*."""
    start = time.perf_counter()
    simple_found = scan_simple(buffer, ENCRYPT_KEYWORD)
    simple_elapsed = time.perf_counter() - start

    start = time.perf_counter()
    parallel_found = scanner.scan(buffer)
    parallel_elapsed = time.perf_counter() - start

    summary = scanner.get_performance_summary()
    return {
        'name': name,
        'bytes': len(buffer),
        'simple_s': simple_elapsed,
        'parallel_s': parallel_elapsed,
        'speedup': simple_elapsed / parallel_elapsed if parallel_elapsed > 0 else 0.0,
        'chunks': summary['chunk_count'],
        'peak_mb': summary['peak_memory_mb'],
        'agree': simple_found == parallel_found,
    }


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark chunk-parallel /Encrypt scanning"
    )
    parser.add_argument('--executor', choices=('process', 'thread'), default='process')
    parser.add_argument('--workers', type=int, default=None, help='Parallelism hint')
    parser.add_argument('--large', action='store_true', help='Include a 64 MB buffer')
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)

    sizes = [("1 MB", 1 << 20), ("8 MB", 8 << 20), ("16 MB", 16 << 20)]
    if args.large:
        sizes.append(("64 MB", 64 << 20))

    scanner = ChunkScanner(ENCRYPT_KEYWORD, parallelism=args.workers, executor=args.executor)

    print("=" * 80)
    print(f"PARALLEL SCAN BENCHMARK ({args.executor} pool, parallelism={scanner.parallelism})")
    print("=" * 80)

    rows = []
    for name, size in sizes:
        print(f"  {name}...", end=" ", flush=True)
        row = benchmark_buffer(random_buffer(size), name, scanner)
        rows.append(row)
        print(f"simple {format_time(row['simple_s'])}, parallel {format_time(row['parallel_s'])}")

    df = pd.DataFrame(rows)
    print()
    print(df.to_string(index=False, float_format=lambda v: f"{v:.3f}"))
    print()
    print(f"Mean speedup: {df['speedup'].mean():.2f}x")
    if not df['agree'].all():
        print("WARNING: simple and parallel scans disagreed")


if __name__ == "__main__":
    main()
