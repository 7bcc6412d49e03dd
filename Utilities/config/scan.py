"""
Scan configuration for PDFEncryptScanner.

This module contains the keyword and the chunking / concurrency parameters
used by the chunked scanner:

- ENCRYPT_KEYWORD: marker of a password-protected PDF
- Oversubscription factor for chunk planning
- Minimum buffer size worth a parallel scan
- Executor kind and boundary overlap policy

CHUNK PLANNING
--------------
    target_tasks = cpu_count * oversubscription
    chunk_size   = max(1, buffer_length // target_tasks)

BOUNDARY OVERLAP
----------------
With overlap_boundaries=False (default) chunks are strictly disjoint, so a
keyword straddling two chunks is not seen by the parallel path while the
simple path still finds it.  Set it to True to extend every chunk by
len(keyword) - 1 bytes.
"""

# ==================== KEYWORD ====================
ENCRYPT_KEYWORD = b"/Encrypt"

# ==================== SCAN PARAMETERS ====================
SCAN_CONFIG = {
    # Tasks per logical CPU; keeps every core busy when chunks finish unevenly
    'oversubscription': 2,

    # Buffers below this size (bytes) are searched as a single chunk
    'min_parallel_size': 64 * 1024,

    # 'process' (true parallelism) or 'thread' (zero-copy memoryview slices)
    'executor': 'process',

    # Extend chunks by len(keyword) - 1 bytes so boundary-straddling matches are seen
    'overlap_boundaries': False,
}

VALID_EXECUTORS = ('process', 'thread')
