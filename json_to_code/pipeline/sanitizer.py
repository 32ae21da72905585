"""
Removal of control characters from raw clipboard text.
"""

from __future__ import annotations

import unicodedata

# Cc: C0/C1 controls (line breaks and tabs included), Cf: format characters
# such as the byte order mark or zero-width joiners.
_CONTROL_CATEGORIES = frozenset({"Cc", "Cf"})


def remove_control_characters(text: str) -> str:
    """Return ``text`` without control and format code points.

    All other characters are kept in their original order.
    """
    return "".join(ch for ch in text if unicodedata.category(ch) not in _CONTROL_CATEGORIES)
