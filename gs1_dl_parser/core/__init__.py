"""
Core parsing modules for the GS1 Digital Link parser.
"""

from .dl_parser import (
    parse_dl_uri,
    DigitalLinkParser,
    DLParseResult,
    AIElement,
    ParseError,
    ErrorCode,
    DigitalLinkError,
)
from .uri_decoder import uri_unescape

__all__ = [
    "parse_dl_uri",
    "DigitalLinkParser",
    "DLParseResult",
    "AIElement",
    "ParseError",
    "ErrorCode",
    "DigitalLinkError",
    "uri_unescape",
]
