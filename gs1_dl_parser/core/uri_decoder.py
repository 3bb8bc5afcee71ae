"""
Percent-decoding for Digital Link path and query components.
"""

from __future__ import annotations

from typing import List, Optional

HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def uri_unescape(
    text: str,
    is_query_component: bool = False,
    max_length: Optional[int] = None
) -> str:
    """
    Decode a percent-encoded URI component.

    A ``%XY`` triplet with two hex digits becomes the character with that
    ordinal (0-255). A ``%`` that is not followed by two hex digits, including
    one truncated by the end of the input, is copied through unchanged. In a
    query component ``+`` means space; in path info it is literal.

    Args:
        text: The encoded component
        is_query_component: Apply ``+`` to space substitution
        max_length: Stop once this many characters have been produced

    Returns:
        The decoded text.

    Examples:
        >>> uri_unescape("ABC%2d123")
        'ABC-123'
        >>> uri_unescape("A+B", is_query_component=True)
        'A B'
    """
    out: List[str] = []
    limit = len(text) if max_length is None else max_length
    i = 0

    while i < len(text) and len(out) < limit:
        char = text[i]
        if (char == '%' and i + 2 < len(text) and
                text[i + 1] in HEX_DIGITS and text[i + 2] in HEX_DIGITS):
            out.append(chr(int(text[i + 1:i + 3], 16)))
            i += 3
            continue
        if is_query_component and char == '+':
            out.append(' ')
        else:
            out.append(char)
        i += 1

    return ''.join(out)
