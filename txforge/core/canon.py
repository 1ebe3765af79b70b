# txforge/core/canon.py
"""
Byte-stable JSON (RFC 8785). Equal envelopes and instructions always
serialize to equal bytes, so CLI output can be hashed or diffed.
"""

from typing import Any

import jcs


def canonical_json(obj: Any) -> bytes:
    """Sorted keys, no insignificant whitespace, UTF-8."""
    return jcs.canonicalize(obj)
