"""Core modules for PDFEncryptScanner"""

from .performance_monitor import PerformanceMonitor
from .chunk_scanner import ChunkScanner

__all__ = [
    'PerformanceMonitor',
    'ChunkScanner',
]
