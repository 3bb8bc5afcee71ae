"""
GS1 Digital Link URI Parser

Lightweight extraction of AI element data from uncompressed GS1 Digital
Link URIs, e.g.

    https://id.gs1.org/01/09520123456788/10/ABC%2F123/21/12345?17=180426

Features:
- Locates the start of the DL path info behind an arbitrary path stem
- Extracts AI/value pairs from path info and query parameters
- Percent-decodes values
- Pads AI (01) values of length 8, 12 and 13 to GTIN-14

It does not validate the structure of the DL URI, the data relationships
between the extracted AIs, nor the content of the AIs. Convenience strings
for GS1 keys ("gtin", "ser", ...) are not supported.

Based on:
- GS1 Digital Link Standard: URI Syntax
- GS1 General Specifications
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..ai_tables import is_dl_primary_key, is_fnc1_required
from .uri_decoder import uri_unescape

logger = logging.getLogger(__name__)


MAX_AI_VALUE_LENGTH = 90    # Maximum length of an AI value; currently X..90
MAX_AIS = 64                # Maximum number of AIs in a Digital Link URI
FNC1_CHAR = '^'             # Represents FNC1 in unbracketed element strings

# Output ceilings for fixed-size buffers. Writers return ordinary strings so
# these are sizing guidance only.
MAX_AI_BUF = MAX_AIS * (4 + MAX_AI_VALUE_LENGTH)
MAX_OUT_JSON = MAX_AIS * (4 + MAX_AI_VALUE_LENGTH + 6) + 2
MAX_OUT_UNBRACKETED = MAX_AIS * (4 + MAX_AI_VALUE_LENGTH + 1) + 1
MAX_OUT_BRACKETED = MAX_AIS * (4 + MAX_AI_VALUE_LENGTH * 2 + 2) + 1

# Characters that are permissible in URIs, including percent
URI_CHARACTERS = frozenset(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    'abcdefghijklmnopqrstuvwxyz'
    '0123456789'
    "-._~:/?#[]@!$&'()*+,;=%"
)

_DIGITS = frozenset('0123456789')


class ErrorCode(str, Enum):
    """Error codes for a failed parse."""
    ILLEGAL_CHARACTERS = "ILLEGAL_CHARACTERS"
    BAD_SCHEME = "BAD_SCHEME"
    MISSING_DOMAIN_OR_PATH = "MISSING_DOMAIN_OR_PATH"
    NO_PRIMARY_KEY = "NO_PRIMARY_KEY"
    EMPTY_VALUE = "EMPTY_VALUE"
    ILLEGAL_QUERY_PARAMETER = "ILLEGAL_QUERY_PARAMETER"
    VALUE_TOO_LONG = "VALUE_TOO_LONG"
    TOO_MANY_AIS = "TOO_MANY_AIS"


@dataclass
class ParseError:
    """Represents the reason a parse failed."""
    code: str
    message: str


class DigitalLinkError(ValueError):
    """Raised by callers that want a failed parse as an exception."""

    def __init__(self, error: ParseError):
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> str:
        return self.error.code


class _ParseFailure(Exception):
    """Aborts a parse at the point of failure."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass
class AIElement:
    """
    A single AI element extracted from a Digital Link URI, e.g.
    "(01)12312312312333".

    Attributes:
        ai: Application Identifier code (2-4 digits)
        value: Decoded value
        separator_required: Whether an FNC1 separator must follow the value
    """
    ai: str
    value: str
    separator_required: bool = True


@dataclass
class DLParseResult:
    """
    Complete result of parsing a GS1 Digital Link URI.

    Passed as the context to the element string and JSON writers.

    Attributes:
        raw: Original input URI
        elements: Extracted AI elements, in path then query order
        error: Reason for failure, None on success
        scheme: "http" or "https"
        domain: Authority part of the URI
        stem: Path info preceding the DL primary key
        dl_path: Path info from the DL primary key onwards
        query: Query string without the leading "?"
        fragment: Fragment without the leading "#"
    """
    raw: str
    elements: List[AIElement] = field(default_factory=list)
    error: Optional[ParseError] = None
    scheme: Optional[str] = None
    domain: Optional[str] = None
    stem: Optional[str] = None
    dl_path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise DigitalLinkError if the parse failed."""
        if self.error is not None:
            raise DigitalLinkError(self.error)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'raw': self.raw,
            'success': self.success,
            'scheme': self.scheme,
            'domain': self.domain,
            'stem': self.stem,
            'dl_path': self.dl_path,
            'query': self.query,
            'fragment': self.fragment,
            'elements': [
                {
                    'ai': e.ai,
                    'value': e.value,
                    'separator_required': e.separator_required,
                }
                for e in self.elements
            ],
            'error': (
                {'code': self.error.code, 'message': self.error.message}
                if self.error else None
            ),
        }


def _all_digits(text: str) -> bool:
    """True iff every character of text is an ASCII digit (vacuously for "")."""
    return all(c in _DIGITS for c in text)


def _is_ai_shaped(text: str) -> bool:
    return 2 <= len(text) <= 4 and _all_digits(text)


def pad_gtin(ai: str, value: str) -> str:
    """
    Pad a GTIN-8, GTIN-12 or GTIN-13 in AI (01) to GTIN-14.

    Other lengths are returned unmodified so that bad data is preserved for
    reporting.
    """
    if ai == '01' and len(value) in (8, 12, 13):
        return value.rjust(14, '0')
    return value


class DigitalLinkParser:
    """
    Extracts AI elements from a GS1 Digital Link URI.

    Implements:
    - Backward scan of the path info for the rightmost DL primary key
    - Forward pass over the AI/value pairs of the DL path info
    - Query parameter pass
    """

    def _split_uri(self, uri: str, result: DLParseResult) -> Tuple[str, Optional[str]]:
        """
        Check the URI and split it into path info and query.

        Returns:
            (path_info, query) where query is None if there is no "?"
        """
        if not set(uri) <= URI_CHARACTERS:
            raise _ParseFailure(
                ErrorCode.ILLEGAL_CHARACTERS, "URI contains illegal characters"
            )

        if uri.startswith('https://'):
            result.scheme, rest = 'https', uri[8:]
        elif uri.startswith('http://'):
            result.scheme, rest = 'http', uri[7:]
        else:
            raise _ParseFailure(
                ErrorCode.BAD_SCHEME, "Scheme must be http:// or https://"
            )

        logger.debug("Scheme: %s", result.scheme)

        slash = rest.find('/')
        if slash < 1:
            raise _ParseFailure(
                ErrorCode.MISSING_DOMAIN_OR_PATH,
                "URI must contain a domain and path info"
            )

        result.domain = rest[:slash]
        path_info = rest[slash:]
        logger.debug("Domain: %s", result.domain)

        # Fragment character delimits end of data
        path_info, hash_mark, fragment = path_info.partition('#')
        if hash_mark:
            result.fragment = fragment

        # Query parameter marker delimits end of path info
        query: Optional[str] = None
        path_info, question_mark, query_text = path_info.partition('?')
        if question_mark:
            query = result.query = query_text

        logger.debug("Path info: %s", path_info)
        return path_info, query

    def _find_dl_path_start(self, segments: List[str]) -> int:
        """
        Search the path segments backwards for an AI/value pair whose AI is
        a DL primary key.

        Pairs are taken from the right. A pair whose AI is not of the form of
        an AI stops the search since everything to its left is stem.

        Returns:
            Index of the primary key segment.
        """
        i = len(segments) - 2
        while i >= 0:
            ai = segments[i]
            logger.debug("  /%s/%s", ai, segments[i + 1])
            if not _is_ai_shaped(ai):
                logger.debug("  Stopping. (%s) is not a valid form for an AI", ai)
                break
            if is_dl_primary_key(ai):
                return i
            i -= 2

        raise _ParseFailure(
            ErrorCode.NO_PRIMARY_KEY, "No GS1 DL keys found in path info"
        )

    def _append(
        self,
        result: DLParseResult,
        ai: str,
        encoded: str,
        is_query_component: bool
    ) -> None:
        """Decode, normalise and record a single AI value."""
        value = uri_unescape(encoded, is_query_component=is_query_component)

        if len(value) > MAX_AI_VALUE_LENGTH:
            if is_query_component:
                message = f"Decoded AI ({ai}) value from DL query params too long"
            else:
                message = f"Decoded AI ({ai}) from DL path info too long"
            raise _ParseFailure(ErrorCode.VALUE_TOO_LONG, message)

        value = pad_gtin(ai, value)

        if len(result.elements) >= MAX_AIS:
            raise _ParseFailure(ErrorCode.TOO_MANY_AIS, "Too many AIs")

        logger.debug("  Extracted: (%s) %s", ai, value)
        result.elements.append(AIElement(
            ai=ai,
            value=value,
            separator_required=is_fnc1_required(ai),
        ))

    def _parse_dl_path(self, result: DLParseResult, segments: List[str]) -> None:
        """Process each AI/value pair in the DL path info."""
        # AIs are known to be valid since the backward search walked over them
        for i in range(0, len(segments), 2):
            ai, encoded = segments[i], segments[i + 1]
            if not encoded:
                raise _ParseFailure(
                    ErrorCode.EMPTY_VALUE,
                    f"AI ({ai}) value path element is empty"
                )
            self._append(result, ai, encoded, is_query_component=False)

    def _parse_query(self, result: DLParseResult, query: str) -> None:
        """Process the AI/value pairs in the query parameters."""
        logger.debug("Processing query params: %s", query)

        for param in query.split('&'):
            if not param:
                continue

            name, equals, encoded = param.partition('=')
            if not equals:
                logger.debug("  Skipped singleton: %s", param)
                continue

            # Numeric-only query parameters not matching valid form of an AI
            # aren't permitted
            if not _all_digits(name):
                logger.debug("  Skipped: %s", param)
                continue
            if not 2 <= len(name) <= 4:
                raise _ParseFailure(
                    ErrorCode.ILLEGAL_QUERY_PARAMETER,
                    "Numeric query parameter that is not a valid AI is "
                    f"illegal: {name[:10]}..."
                )

            if not encoded:
                raise _ParseFailure(
                    ErrorCode.EMPTY_VALUE,
                    f"AI ({name}) value query element is empty"
                )

            self._append(result, name, encoded, is_query_component=True)

    def parse(self, uri: str) -> DLParseResult:
        """
        Parse a GS1 Digital Link URI.

        Args:
            uri: Candidate Digital Link URI

        Returns:
            DLParseResult with the extracted AI elements, or with ``error``
            set and no elements if parsing failed
        """
        result = DLParseResult(raw=uri)
        logger.debug("Parsing DL data: %s", uri)

        try:
            path_info, query = self._split_uri(uri, result)

            segments = path_info.split('/')[1:]
            logger.debug("Searching path info backwards for DL primary key")
            start = self._find_dl_path_start(segments)

            result.stem = '/'.join([''] + segments[:start])
            result.dl_path = '/'.join([''] + segments[start:])
            logger.debug("Stem: %s", result.stem)
            logger.debug("Processing DL path info: %s", result.dl_path)

            self._parse_dl_path(result, segments[start:])

            if query is not None:
                self._parse_query(result, query)

            if result.fragment is not None:
                logger.debug("Fragment: %s", result.fragment)

        except _ParseFailure as failure:
            logger.debug("Parsing DL data failed: %s", failure.message)
            result.elements = []
            result.error = ParseError(code=failure.code, message=failure.message)
            return result

        logger.debug("Parsing DL data successful")
        return result


def parse_dl_uri(uri: str) -> DLParseResult:
    """
    Extract the AI data from an uncompressed GS1 Digital Link URI.

    Main entry point for the parser.

    Args:
        uri: Candidate Digital Link URI

    Returns:
        DLParseResult; check ``success`` or ``error`` before use

    Examples:
        >>> result = parse_dl_uri("https://id.gs1.org/01/9520123456788?17=201225")
        >>> [(e.ai, e.value) for e in result.elements]
        [('01', '09520123456788'), ('17', '201225')]
    """
    return DigitalLinkParser().parse(uri)
