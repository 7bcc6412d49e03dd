#!/usr/bin/env python3
"""
┌──────────────────────────────────────────────────────────────────────────────┐
│ scan_pdf - Command-Line Password-Protection Check                            │
├──────────────────────────────────────────────────────────────────────────────┤
│ Author: Dr. Venkata Rajesh Yella | License: MIT | Version: 2025.1            │
└──────────────────────────────────────────────────────────────────────────────┘

Usage:
    python scan_pdf.py report.pdf scans/*.pdf
    python scan_pdf.py --simple report.pdf
    python scan_pdf.py --executor thread --workers 4 --overlap big.pdf

Exit status is 0 when every file was read, 2 when at least one could not be.
"""

import argparse
import logging
import sys
from typing import List, Optional

from Utilities.config.scan import ENCRYPT_KEYWORD, VALID_EXECUTORS
from Utilities.pdfscanner import scan_file

logger = logging.getLogger("scan_pdf")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Report which PDF files carry the /Encrypt marker"
    )
    parser.add_argument('paths', nargs='+', help='Files to scan')
    parser.add_argument(
        '--simple',
        action='store_true',
        help='Single-pass scan without chunking'
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=None,
        help='Parallelism hint (default: logical CPU count)'
    )
    parser.add_argument(
        '--executor',
        choices=VALID_EXECUTORS,
        default=None,
        help='Pool used for chunk tasks'
    )
    parser.add_argument(
        '--overlap',
        action='store_true',
        help='Overlap chunks so markers on chunk boundaries are found'
    )
    parser.add_argument(
        '--keyword',
        default=ENCRYPT_KEYWORD.decode('ascii'),
        help='Marker to search for (default: /Encrypt)'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    options = {}
    if not args.simple:
        options = {
            'parallelism': args.workers,
            'executor': args.executor,
            'overlap_boundaries': args.overlap or None,
        }

    status = 0
    for path in args.paths:
        try:
            protected = scan_file(path, parallel=not args.simple, keyword=args.keyword, **options)
        except OSError as exc:
            logger.error(f"{path}: cannot read ({exc})")
            status = 2
            continue
        except ValueError as exc:
            logger.error(f"invalid scan settings: {exc}")
            return 2
        print(f"{path}: {'password-protected' if protected else 'not protected'}")

    return status


if __name__ == "__main__":
    sys.exit(main())
