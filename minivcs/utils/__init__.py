"""Utility modules for minivcs.

This module contains utility functions:
- Atomic file writes
- Working tree listing
"""

from minivcs.utils.fs import atomic_write, atomic_write_text, list_working_files

__all__ = [
    'atomic_write',
    'atomic_write_text',
    'list_working_files',
]
