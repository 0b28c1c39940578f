"""Source formats, column roles, and typed field extraction.

A column mapping tells a parser which field of the source holds each logical
role. For single-measure files the ``SINGLE_MEASURE_*`` roles carry constant
values (the measure code and label) rather than field names.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from regionstats.errors import InvalidArgument, MissingColumnError, ParseError
from regionstats.utils.parsing import parse_number, parse_year

__all__ = [
    "ColumnMapping",
    "SourceColumn",
    "SourceFormat",
    "extract_number",
    "extract_text",
    "extract_year",
    "mapping_from_config",
    "require_columns",
]


class SourceFormat(Enum):
    """Encodings of the supported source files."""

    NONE = "none"
    AUTHORITY_CODE_CSV = "authority_code_csv"
    AUTHORITY_BY_YEAR_CSV = "authority_by_year_csv"
    WELSH_STATS_JSON = "welsh_stats_json"


class SourceColumn(Enum):
    """Logical column roles a mapping may define."""

    AUTH_CODE = "auth_code"
    AUTH_NAME_ENG = "auth_name_eng"
    AUTH_NAME_CYM = "auth_name_cym"
    MEASURE_CODE = "measure_code"
    MEASURE_NAME = "measure_name"
    SINGLE_MEASURE_CODE = "single_measure_code"
    SINGLE_MEASURE_NAME = "single_measure_name"
    YEAR = "year"
    VALUE = "value"


ColumnMapping = Mapping[SourceColumn, str]


def mapping_from_config(raw: Mapping[str, str]) -> dict[SourceColumn, str]:
    """Convert a JSON column mapping (role name -> field) to enum keys.

    Role names are matched case-insensitively against :class:`SourceColumn`
    values.

    Raises
    ------
    InvalidArgument
        If a role name is unknown.
    """
    mapping: dict[SourceColumn, str] = {}
    for role_name, field_name in raw.items():
        try:
            role = SourceColumn(role_name.lower())
        except ValueError:
            msg = f"Unknown column role: {role_name}"
            raise InvalidArgument(msg) from None
        mapping[role] = field_name
    return mapping


def require_columns(cols: ColumnMapping, *roles: SourceColumn) -> list[str]:
    """Return the mapped values for ``roles``, in order.

    Raises
    ------
    MissingColumnError
        If any role is absent from ``cols``.
    """
    missing = [role.name for role in roles if role not in cols]
    if missing:
        msg = f"Not enough columns in mapping, missing: {', '.join(missing)}"
        raise MissingColumnError(msg)
    return [cols[role] for role in roles]


def _field(row: Mapping[str, Any], field_name: str, role: SourceColumn) -> Any:
    try:
        return row[field_name]
    except KeyError:
        msg = f"Row is missing field {field_name!r} for {role.name}"
        raise ParseError(msg) from None


def extract_text(row: Mapping[str, Any], field_name: str, role: SourceColumn) -> str:
    """Return a string field from a row.

    Raises
    ------
    ParseError
        If the field is absent or not a string.
    """
    value = _field(row, field_name, role)
    if not isinstance(value, str):
        msg = f"Expected text in {field_name!r} for {role.name}, got {type(value).__name__}"
        raise ParseError(msg)
    return value


def extract_number(row: Mapping[str, Any], field_name: str, role: SourceColumn) -> float:
    """Return a numeric field as a float; JSON numbers and numeric strings are accepted.

    Raises
    ------
    ParseError
        If the field is absent or not numeric.
    """
    value = _field(row, field_name, role)
    number = parse_number(value)
    if number is None:
        msg = f"Expected a number in {field_name!r} for {role.name}, got {value!r}"
        raise ParseError(msg)
    return number


def extract_year(row: Mapping[str, Any], field_name: str, role: SourceColumn) -> int:
    """Return a year field as an int; integers and integer strings are accepted.

    Raises
    ------
    ParseError
        If the field is absent or not a year.
    """
    value = _field(row, field_name, role)
    year = parse_year(value)
    if year is None:
        msg = f"Expected a year in {field_name!r} for {role.name}, got {value!r}"
        raise ParseError(msg)
    return year
