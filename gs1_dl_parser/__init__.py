"""
GS1 Digital Link URI Parser

Extracts GS1 Application Identifier (AI) element data from uncompressed
GS1 Digital Link URIs and writes it out as unbracketed or bracketed AI
element strings, or as JSON.

Based on the GS1 Digital Link Standard and the GS1 General Specifications.
"""

from .core.dl_parser import (
    parse_dl_uri,
    pad_gtin,
    DigitalLinkParser,
    DLParseResult,
    AIElement,
    ParseError,
    ErrorCode,
    DigitalLinkError,
    MAX_AI_VALUE_LENGTH,
    MAX_AIS,
    FNC1_CHAR,
    MAX_OUT_JSON,
    MAX_OUT_UNBRACKETED,
    MAX_OUT_BRACKETED,
)
from .core.uri_decoder import uri_unescape
from .ai_tables import (
    load_dl_key_table,
    is_dl_primary_key,
    is_fnc1_required,
    DLKeyEntry,
)
from .formatters.element_string import (
    write_unbracketed,
    write_bracketed,
)
from .formatters.json_formatter import (
    write_json,
    parse_dl_to_json,
    parse_dl_to_dict,
    parse_dl_to_element_string,
)

__version__ = "1.0.0"
__all__ = [
    "parse_dl_uri",
    "pad_gtin",
    "DigitalLinkParser",
    "DLParseResult",
    "AIElement",
    "ParseError",
    "ErrorCode",
    "DigitalLinkError",
    "MAX_AI_VALUE_LENGTH",
    "MAX_AIS",
    "FNC1_CHAR",
    "MAX_OUT_JSON",
    "MAX_OUT_UNBRACKETED",
    "MAX_OUT_BRACKETED",
    "uri_unescape",
    "load_dl_key_table",
    "is_dl_primary_key",
    "is_fnc1_required",
    "DLKeyEntry",
    "write_unbracketed",
    "write_bracketed",
    "write_json",
    "parse_dl_to_json",
    "parse_dl_to_dict",
    "parse_dl_to_element_string",
]
