"""
Output formatters for the GS1 Digital Link parser.
"""

from .element_string import (
    iter_ordered_elements,
    write_unbracketed,
    write_bracketed,
)
from .json_formatter import (
    write_json,
    parse_dl_to_json,
    parse_dl_to_dict,
    parse_dl_to_element_string,
)

__all__ = [
    "iter_ordered_elements",
    "write_unbracketed",
    "write_bracketed",
    "write_json",
    "parse_dl_to_json",
    "parse_dl_to_dict",
    "parse_dl_to_element_string",
]
