"""
Element string writers for extracted Digital Link data.

Unbracketed:  ^011231231231233398ABC^99XYZ
Bracketed:    (01)12312312312333(98)ABC(99)XYZ
"""

from __future__ import annotations

from typing import Iterator, List

from ..core.dl_parser import FNC1_CHAR, AIElement, DLParseResult


def iter_ordered_elements(
    result: DLParseResult,
    fixed_first: bool = False
) -> Iterator[AIElement]:
    """
    Yield the extracted elements in output order.

    With ``fixed_first`` the predefined fixed-length AIs are yielded in a
    first pass and the remaining AIs in a second, each pass keeping the
    extraction order.
    """
    if not fixed_first:
        yield from result.elements
        return

    for element in result.elements:
        if not element.separator_required:
            yield element
    for element in result.elements:
        if element.separator_required:
            yield element


def write_unbracketed(
    result: DLParseResult,
    fixed_first: bool = False,
    extra_fnc1: bool = False
) -> str:
    """
    Write the extracted AI elements as an unbracketed AI element string in
    which "^" represents FNC1, e.g. ``^011231231231233398ABC^99XYZ``.

    Args:
        result: Parse result from parse_dl_uri()
        fixed_first: Sort predefined fixed-length AIs ahead of the others
        extra_fnc1: Emit an FNC1 after every AI, even where not required

    Returns:
        The element string, or "" if there are no elements
    """
    parts: List[str] = [FNC1_CHAR]
    trailing_fnc1 = False

    for element in iter_ordered_elements(result, fixed_first):
        parts.append(element.ai)
        parts.append(element.value)
        trailing_fnc1 = extra_fnc1 or element.separator_required
        if trailing_fnc1:
            parts.append(FNC1_CHAR)

    # A leading FNC1 alone, or a final separator, has nothing to delimit
    if len(parts) == 1 or trailing_fnc1:
        parts.pop()

    return ''.join(parts)


def write_bracketed(result: DLParseResult, fixed_first: bool = False) -> str:
    """
    Write the extracted AI elements as a bracketed AI element string, e.g.
    ``(01)12312312312333(98)ABC(99)XYZ``. A "(" in data is escaped as "\\(".

    Args:
        result: Parse result from parse_dl_uri()
        fixed_first: Sort predefined fixed-length AIs ahead of the others

    Returns:
        The element string, or "" if there are no elements
    """
    parts: List[str] = []

    for element in iter_ordered_elements(result, fixed_first):
        parts.append(f"({element.ai})")
        parts.append(element.value.replace('(', '\\('))

    return ''.join(parts)
