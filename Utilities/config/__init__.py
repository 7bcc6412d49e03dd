"""
Configuration modules for PDFEncryptScanner.

- scan: keyword, chunk planning and executor settings
"""

from .scan import ENCRYPT_KEYWORD, SCAN_CONFIG, VALID_EXECUTORS

__all__ = [
    'ENCRYPT_KEYWORD',
    'SCAN_CONFIG',
    'VALID_EXECUTORS',
]
