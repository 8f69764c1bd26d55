"""
Version of the class_hash package.

Override at build time with CLASS_HASH_VERSION.
"""

from __future__ import annotations

import os

__version__ = os.getenv("CLASS_HASH_VERSION", "0.1.0")


def runtime_banner() -> str:
    """Short banner for logs and `--version`."""
    return f"class-hash {__version__}"


__all__ = ["__version__", "runtime_banner"]
