"""
Utilities package for PDFEncryptScanner.

Contains utility modules for:
- Configuration (config/)
- Core functionality (core/)
- Main scanner API (pdfscanner.py)

Chunk-parallel keyword scanning:
- SystemResourceInspector  – CPU count / RAM budget
- ChunkGenerator           – Contiguous buffer range partitioning
- ChunkScanner             – Fan-out / fan-in keyword search over chunks
- PerformanceMonitor       – Per-chunk and per-stage scan telemetry
"""
