"""Shared parsing utilities for CSV lines, numbers, and year labels.

These helpers return ``None`` on unparseable input; parsers decide whether
that is a structural error.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

_YEAR_PATTERN = re.compile(r"^\s*(\d{1,4})\s*$")


def split_line(line: str, delimiter: str = ",") -> list[str]:
    """Split a delimited text line into fields.

    Trailing newline and carriage-return characters are dropped. Quoting is
    not supported: a field containing the delimiter is split.

    Examples
    --------
    - "W06000001,Isle of Anglesey,Ynys Môn\\n" -> ["W06000001", "Isle of Anglesey", "Ynys Môn"]
    """
    return line.rstrip("\r\n").split(delimiter)


def parse_number(value: Any) -> float | None:
    """Parse a JSON number or numeric string as a float.

    Booleans, non-finite values, and strings that are not plain decimal
    numbers yield ``None``.

    Examples
    --------
    - 69123 -> 69123.0
    - "711.6801" -> 711.6801
    - " -3.5 " -> -3.5
    - "n/a" -> None
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, int | float):
        result = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            result = float(text)
        except ValueError:
            logger.debug("Could not parse number: %s", value)
            return None
    else:
        return None

    return result if math.isfinite(result) else None


def parse_year(value: Any) -> int | None:
    """Parse a year label such as ``"1991"`` or ``1991``.

    Returns ``None`` for anything that is not a non-negative integer of at
    most four digits.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 <= value <= 9999 else None
    if isinstance(value, str):
        match = _YEAR_PATTERN.match(value)
        if match:
            return int(match.group(1))
    return None
