# topmark:header:start
#
#   project      : SchemaMap
#   file         : identifiers.py
#   file_relpath : src/schemamap/utils/identifiers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Identifier helpers.

Source languages let field names clash with keywords by quoting them
(``'type``) or escaping characters (``first\\-name``). Property names in the
generated schema use the plain spelling.
"""

from __future__ import annotations

import re
from typing import Final

_ESCAPE_RE: Final[re.Pattern[str]] = re.compile(r"\\(.)")


def unescape_identifier(identifier: str) -> str:
    """Return ``identifier`` without its quote prefix and backslash escapes.

    Examples:
        >>> unescape_identifier("'type")
        'type'
        >>> unescape_identifier("first\\\\-name")
        'first-name'
    """
    text: str = identifier.strip()
    if text.startswith("'"):
        text = text[1:]
    return _ESCAPE_RE.sub(r"\1", text)
