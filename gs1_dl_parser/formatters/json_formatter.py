"""
JSON Formatter for GS1 Digital Link data

Writes the extracted AI elements as a flat JSON object keyed by AI, e.g.

    {"01":"12312312312333","98":"ABC","99":"XYZ"}

Only backslash and double-quote are escaped in values; the output is
otherwise the data exactly as extracted.
"""

from __future__ import annotations

from typing import Dict, List

from ..core.dl_parser import DLParseResult, parse_dl_uri
from .element_string import (
    iter_ordered_elements,
    write_bracketed,
    write_unbracketed,
)


def _escape_json_value(value: str) -> str:
    return value.replace('\\', '\\\\').replace('"', '\\"')


def write_json(result: DLParseResult, fixed_first: bool = False) -> str:
    """
    Write the extracted AI elements in a basic JSON format.

    Args:
        result: Parse result from parse_dl_uri()
        fixed_first: Sort predefined fixed-length AIs ahead of the others

    Returns:
        JSON object text; "{}" if there are no elements
    """
    members: List[str] = [
        f'"{element.ai}":"{_escape_json_value(element.value)}"'
        for element in iter_ordered_elements(result, fixed_first)
    ]
    return '{' + ','.join(members) + '}'


def parse_dl_to_json(uri: str, fixed_first: bool = False) -> str:
    """
    Parse a Digital Link URI and return its AI data as JSON text.

    Raises:
        DigitalLinkError: If the URI could not be parsed

    Example:
        >>> parse_dl_to_json("https://id.gs1.org/01/09520123456788/10/ABC123")
        '{"01":"09520123456788","10":"ABC123"}'
    """
    result = parse_dl_uri(uri)
    result.raise_for_error()
    return write_json(result, fixed_first=fixed_first)


def parse_dl_to_dict(uri: str, fixed_first: bool = False) -> Dict[str, str]:
    """
    Parse a Digital Link URI and return a dictionary of AI to value.

    A repeated AI keeps its last value, matching what a JSON reader makes
    of the ``write_json`` output.

    Raises:
        DigitalLinkError: If the URI could not be parsed
    """
    result = parse_dl_uri(uri)
    result.raise_for_error()

    output: Dict[str, str] = {}
    for element in iter_ordered_elements(result, fixed_first):
        output[element.ai] = element.value
    return output


def parse_dl_to_element_string(
    uri: str,
    bracketed: bool = False,
    fixed_first: bool = False,
    extra_fnc1: bool = False
) -> str:
    """
    Parse a Digital Link URI and return its AI data as an element string.

    Args:
        uri: Digital Link URI
        bracketed: Write "(01)..." syntax instead of "^01..."
        fixed_first: Sort predefined fixed-length AIs ahead of the others
        extra_fnc1: Unbracketed only; emit an FNC1 after every AI

    Raises:
        DigitalLinkError: If the URI could not be parsed
    """
    result = parse_dl_uri(uri)
    result.raise_for_error()

    if bracketed:
        return write_bracketed(result, fixed_first=fixed_first)
    return write_unbracketed(result, fixed_first=fixed_first, extra_fnc1=extra_fnc1)
