"""
Shared utilities for QUIRE.

Common functionality used across contexts:
- Logger setup with provenance
- PDF read-back
- Timestamps for output directories
"""

from quire.utils.timestamp import now, today

__all__ = ["now", "today"]
