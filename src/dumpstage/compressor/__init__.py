"""Compressors for staged dumps.

Usage:
    from dumpstage.compressor import create_compressor

    compressor = create_compressor("gzip", level=6)
    command, ext = compressor.compress_with("Redis")
"""

from dumpstage.compressor.base import Bzip2, Compressor, Custom, Gzip, Xz, create_compressor

__all__ = [
    "Compressor",
    "Gzip",
    "Bzip2",
    "Xz",
    "Custom",
    "create_compressor",
]
