"""
Setup script for PDFEncryptScanner.

Installs the ``Matchers`` and ``Utilities`` packages and provides optional
Cython compilation of the keyword-matching hot path:
- Horspool skip-table search loop in Matchers/horspool/matcher.py

Usage:
    pip install -e .[test]
    python setup.py build_ext --inplace

If Cython is not available, the pure Python matcher is used unchanged.
"""

from setuptools import setup, Extension, find_packages
from setuptools.command.build_ext import build_ext
import sys

# Try to import Cython
try:
    from Cython.Build import cythonize
    USE_CYTHON = True
except ImportError:
    USE_CYTHON = False
    print("Cython not available - skipping Cython compilation")
    print("Install with: pip install cython")


class BuildExtWithFallback(build_ext):
    """Custom build_ext that gracefully handles Cython compilation failures."""

    def run(self):
        try:
            super().run()
        except Exception as e:
            print(f"Warning: Cython compilation failed: {e}")
            print("Falling back to pure Python implementation")

    def build_extension(self, ext):
        try:
            super().build_extension(ext)
        except Exception as e:
            print(f"Warning: Failed to build extension {ext.name}: {e}")
            print("Pure Python matcher will be used")


def get_extensions():
    """Get list of extensions to compile with Cython."""
    if not USE_CYTHON:
        return []

    return [
        Extension(
            "Matchers.horspool.matcher",
            ["Matchers/horspool/matcher.py"],
            include_dirs=[],
            language="c"
        ),
    ]


# Only run Cython compilation if requested
if USE_CYTHON and len(sys.argv) > 1 and 'build_ext' in sys.argv:
    extensions = get_extensions()
    if extensions:
        extensions = cythonize(
            extensions,
            compiler_directives={
                'language_level': "3",
                'embedsignature': True,
                'boundscheck': False,
                'wraparound': False,
                'cdivision': True,
                'nonecheck': False,
            }
        )
else:
    extensions = []

setup(
    name='PDFEncryptScanner',
    version='2025.1',
    description='Chunk-parallel detection of password-protected PDF documents',
    author='Dr. Venkata Rajesh Yella',
    license='MIT',
    python_requires='>=3.9',
    packages=find_packages(include=['Matchers', 'Matchers.*', 'Utilities', 'Utilities.*']),
    py_modules=['scan_pdf'],
    install_requires=[
        'psutil>=5.9',
    ],
    extras_require={
        'bench': ['numpy>=1.24', 'pandas>=2.0'],
        'test': ['pytest>=7.0', 'numpy>=1.24'],
    },
    entry_points={
        'console_scripts': ['scan-pdf=scan_pdf:main'],
    },
    ext_modules=extensions,
    cmdclass={'build_ext': BuildExtWithFallback},
    zip_safe=False,
)
