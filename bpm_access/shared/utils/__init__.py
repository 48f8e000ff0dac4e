"""Shared utilities: datetime, generators, serialization."""

from bpm_access.shared.utils.datetime import isoformat_utc, utc_now
from bpm_access.shared.utils.generators import generate_cuid, stamp_new_document
from bpm_access.shared.utils.serialization import escape_special_chars, safe_stringify

__all__ = [
    "escape_special_chars",
    "generate_cuid",
    "isoformat_utc",
    "safe_stringify",
    "stamp_new_document",
    "utc_now",
]
