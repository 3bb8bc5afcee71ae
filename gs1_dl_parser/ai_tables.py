"""
AI tables for the GS1 Digital Link parser

Holds the two fixed lists the extractor and writers need:

- the Digital Link primary keys, which mark the start of the DL part of a
  URI path;
- the AI prefixes defined as predefined fixed-length, which never need an
  FNC1 separator after their data.

Based on the GS1 Barcode Syntax Dictionary (``dlpkey`` attribute) and the
GS1 General Specifications, Figure 7.8.5-2.

Reference: https://ref.gs1.org/tools/gs1-barcode-syntax-resource/syntax-dictionary/
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class DLKeyEntry:
    """
    A GS1 Digital Link primary key.

    Attributes:
        ai: The Application Identifier code (2-4 digits)
        title: Short name of the key
        qualifiers: Key qualifier sequences permitted after the key in a DL
            path, as written in the syntax dictionary (informational only)
    """
    ai: str
    title: str
    qualifiers: Tuple[str, ...] = ()


# Digital Link primary keys in syntax dictionary layout.
# The list is subject to revision as new identifier keys are introduced.
RAW_DL_KEY_TABLE = """
# AI    Attributes                  Title
00      dlpkey                      # SSCC
01      dlpkey=22,10,21|235         # GTIN
253     dlpkey                      # GDTI
255     dlpkey                      # GCN
401     dlpkey                      # GINC
402     dlpkey                      # GSIN
414     dlpkey=254                  # LOC NO.
417     dlpkey=7040                 # PARTY
8003    dlpkey                      # GRAI
8004    dlpkey=7040                 # GIAI
8006    dlpkey=22,10,21             # ITIP
8010    dlpkey=8011                 # CPID
8013    dlpkey                      # GMN
8017    dlpkey=8019                 # GSRN - PROVIDER
8018    dlpkey=8019                 # GSRN - RECIPIENT
"""

# AI prefixes that are defined as not requiring termination by an FNC1.
# Defined by the standards to be immutable, however changes are not
# unprecedented.
FIXED_LENGTH_AI_PREFIXES: Tuple[str, ...] = (
    "00", "01", "02",
    "03", "04",
    "11", "12", "13", "14", "15", "16", "17", "18", "19",
    "20",
    "31", "32", "33", "34", "35", "36",
    "41",
)


def _parse_raw_key_table() -> Dict[str, DLKeyEntry]:
    """Parse the raw key table text into DLKeyEntry objects."""
    entries = {}

    for line in RAW_DL_KEY_TABLE.strip().split('\n'):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        main_part, _, title = line.partition('#')
        tokens = main_part.split()
        if len(tokens) < 2 or not tokens[1].startswith('dlpkey'):
            continue

        ai = tokens[0]
        qualifiers: Tuple[str, ...] = ()
        _, eq, key_list = tokens[1].partition('=')
        if eq:
            qualifiers = tuple(key_list.split('|'))

        entries[ai] = DLKeyEntry(ai=ai, title=title.strip(), qualifiers=qualifiers)

    return entries


# Global cached table instance
_cached_table: Optional[Dict[str, DLKeyEntry]] = None


def load_dl_key_table(force_reload: bool = False) -> Dict[str, DLKeyEntry]:
    """
    Load the Digital Link primary key table, using cache when possible.

    Args:
        force_reload: Re-parse the embedded table even if cached.

    Returns:
        Mapping of AI code to DLKeyEntry.
    """
    global _cached_table

    if _cached_table is None or force_reload:
        _cached_table = _parse_raw_key_table()

    return _cached_table


def is_dl_primary_key(ai: str) -> bool:
    """True if ``ai`` is exactly one of the Digital Link primary keys."""
    return ai in load_dl_key_table()


def is_fnc1_required(ai: str) -> bool:
    """
    True if an FNC1 separator must follow the data of ``ai``.

    Only the first two characters of the AI are considered.
    """
    return ai[:2] not in FIXED_LENGTH_AI_PREFIXES
