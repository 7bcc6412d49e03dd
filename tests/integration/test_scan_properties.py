#!/usr/bin/env python3
"""
Randomized agreement checks between the chunked and the single-pass scan.

Buffers are drawn from a seeded numpy generator with '/' removed so the
keyword only appears where it is injected.
"""

import logging
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from Utilities.chunk_generator import plan_chunks
from Utilities.pdfscanner import scan_parallel, scan_simple

KEYWORD = b"/Encrypt"
TRIALS = 40


def brute_force_contains(buffer: bytes, keyword: bytes) -> bool:
    m = len(keyword)
    return any(buffer[i:i + m] == keyword for i in range(len(buffer) - m + 1))


def random_buffer(rng: np.random.Generator, size: int) -> bytearray:
    data = rng.integers(0, 256, size=size, dtype=np.uint8)
    data[data == ord('/')] = ord('x')
    return bytearray(data.tobytes())


@pytest.fixture(autouse=True)
def quiet_planning_logs():
    logging.disable(logging.INFO)
    yield
    logging.disable(logging.NOTSET)


def test_parallel_matches_simple_for_injected_keyword():
    rng = np.random.default_rng(20240601)
    for _ in range(TRIALS):
        size = int(rng.integers(1024, 8192))
        parallelism = int(rng.integers(1, 5))
        buffer = random_buffer(rng, size)

        chunks = plan_chunks(size, parallelism, len(KEYWORD))
        chunk = chunks[int(rng.integers(0, len(chunks)))]
        if chunk["end"] - chunk["start"] < len(KEYWORD):
            chunk = chunks[0]
        offset = int(rng.integers(chunk["start"], chunk["end"] - len(KEYWORD) + 1))
        buffer[offset:offset + len(KEYWORD)] = KEYWORD
        data = bytes(buffer)

        parallel = scan_parallel(data, parallelism=parallelism, executor="thread", min_parallel_size=0)
        assert parallel == scan_simple(data) is True


def test_parallel_matches_simple_without_keyword():
    rng = np.random.default_rng(7)
    for _ in range(TRIALS):
        size = int(rng.integers(0, 4096))
        parallelism = int(rng.integers(1, 9))
        data = bytes(random_buffer(rng, size))
        parallel = scan_parallel(data, parallelism=parallelism, executor="thread", min_parallel_size=0)
        assert parallel == scan_simple(data) is False


def test_simple_matches_brute_force():
    rng = np.random.default_rng(99)
    # Small alphabet drawn from the keyword bytes produces many near-misses
    alphabet = np.frombuffer(KEYWORD + b"x", dtype=np.uint8)
    for _ in range(200):
        size = int(rng.integers(0, 64))
        data = rng.choice(alphabet, size=size).astype(np.uint8).tobytes()
        if rng.random() < 0.3 and size >= len(KEYWORD):
            offset = int(rng.integers(0, size - len(KEYWORD) + 1))
            data = data[:offset] + KEYWORD + data[offset + len(KEYWORD):]
        assert scan_simple(data) == brute_force_contains(data, KEYWORD)


def test_overlap_matches_simple_everywhere():
    rng = np.random.default_rng(314)
    size = 2048
    parallelism = 4
    base = random_buffer(rng, size)
    # Every offset, including ones straddling a boundary
    for offset in range(0, size - len(KEYWORD) + 1, 37):
        buffer = bytearray(base)
        buffer[offset:offset + len(KEYWORD)] = KEYWORD
        data = bytes(buffer)
        assert scan_parallel(
            data, parallelism=parallelism, executor="thread",
            min_parallel_size=0, overlap_boundaries=True,
        ) is True


def test_boundary_straddle_missed_without_overlap():
    rng = np.random.default_rng(2718)
    size = 4096
    parallelism = 2
    chunks = plan_chunks(size, parallelism, len(KEYWORD))
    boundary = chunks[1]["start"]

    for shift in range(1, len(KEYWORD)):
        buffer = random_buffer(rng, size)
        offset = boundary - shift
        buffer[offset:offset + len(KEYWORD)] = KEYWORD
        data = bytes(buffer)
        assert scan_simple(data) is True
        assert scan_parallel(data, parallelism=parallelism, executor="thread", min_parallel_size=0) is False
