"""Parsing of size and precision out of raw catalog type strings.

The parse_* functions return None when the string does not have the
expected shape; the extract_* functions turn that into ExtractionError.
"""

import re
from typing import Optional, Tuple

from ..errors import ExtractionError

# varchar(255), character varying(50), bit(1)
_SIZE_RE = re.compile(r"^[a-z][a-z ]*\((\d+)\)$", re.IGNORECASE)
# decimal(10,2), numeric(10,2), decimal(10,2) unsigned
_DECIMAL_RE = re.compile(r"^(?:decimal|numeric)\((\d+),\s*(\d+)\)", re.IGNORECASE)
# int(11) unsigned zerofill, int unsigned, bigint
_INT_RE = re.compile(r"^[a-z]+(?:\(\d+\))?(?P<modifiers>(?:\s+[a-z]+)*)\s*$", re.IGNORECASE)


def parse_size(raw_type: str) -> Optional[str]:
    """varchar(255) -> '255'."""
    match = _SIZE_RE.match(raw_type.strip())
    return match.group(1) if match else None


def parse_decimal(raw_type: str) -> Optional[Tuple[str, str]]:
    """decimal(10,2) -> ('10', '2')."""
    match = _DECIMAL_RE.match(raw_type.strip())
    return (match.group(1), match.group(2)) if match else None


def parse_int_unsigned(raw_type: str) -> Optional[bool]:
    """int(10) unsigned -> True, int(11) -> False."""
    match = _INT_RE.match(raw_type.strip())
    if not match:
        return None
    return "unsigned" in match.group("modifiers").lower().split()


def extract_size(column: str, raw_type: str) -> str:
    size = parse_size(raw_type)
    if size is None:
        raise ExtractionError(column, raw_type, expected="name(N)")
    return size


def extract_decimal(column: str, raw_type: str) -> Tuple[str, str]:
    digits = parse_decimal(raw_type)
    if digits is None:
        raise ExtractionError(column, raw_type, expected="decimal(P,S)")
    return digits


def extract_int_unsigned(column: str, raw_type: str) -> bool:
    unsigned = parse_int_unsigned(raw_type)
    if unsigned is None:
        raise ExtractionError(column, raw_type, expected="int[(N)] [unsigned]")
    return unsigned
