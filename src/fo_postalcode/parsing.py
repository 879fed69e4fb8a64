"""Parser for the semicolon-separated postal code dataset format.

Each line holds six fields::

    code;city;street_description;company;province_flag;country_code

Fields are never escaped and trailing fields may be empty. The format is
shared by the Danish, Greenlandic and Faroese datasets, so nothing here
assumes a digit count, and the country is only checked when the caller asks.
"""

from typing import Final

from pydantic import ValidationError

from fo_postalcode.errors import DatasetFormatError
from fo_postalcode.models import Country, PostalRecord

FIELD_SEPARATOR: Final[str] = ";"
FIELD_COUNT: Final[int] = 6

_PROVINCE_TOKENS: Final[dict[str, bool]] = {"True": True, "False": False}


def parse_line(
    line: str, *, line_number: int = 1, country: Country | None = None
) -> PostalRecord:
    """Parse a single dataset line into a PostalRecord.

    Args:
        line: One dataset line without its line terminator.
        line_number: 1-based position of the line, used in error messages.
        country: If given, the country the record must belong to.

    Returns:
        The parsed record.

    Raises:
        DatasetFormatError: If the line does not hold a well-formed record.
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != FIELD_COUNT:
        raise DatasetFormatError(
            f"expected {FIELD_COUNT} fields, got {len(fields)}",
            line_number=line_number,
            line=line,
        )

    code, city, street_description, company, province, country_field = fields

    if province not in _PROVINCE_TOKENS:
        raise DatasetFormatError(
            f"province flag must be True or False, got {province!r}",
            line_number=line_number,
            line=line,
        )

    if not country_field.isascii() or not country_field.isdigit():
        raise DatasetFormatError(
            f"country code must be an integer, got {country_field!r}",
            line_number=line_number,
            line=line,
        )
    try:
        country_code = Country(int(country_field))
    except ValueError as e:
        raise DatasetFormatError(
            f"unknown country code {country_field}", line_number=line_number, line=line
        ) from e
    if country is not None and country_code != country:
        raise DatasetFormatError(
            f"record belongs to {country_code.display_name}, "
            f"expected {Country(country).display_name}",
            line_number=line_number,
            line=line,
        )

    try:
        return PostalRecord(
            code=code,
            city=city,
            street_description=street_description,
            company=company,
            province_flag=_PROVINCE_TOKENS[province],
            country_code=country_code,
        )
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise DatasetFormatError(errors, line_number=line_number, line=line) from e


def parse_dataset(text: str, *, country: Country | None = None) -> list[PostalRecord]:
    """Parse a whole dataset, one record per line, preserving order.

    Blank lines are skipped. Nothing else is stripped, so city names keep any
    trailing whitespace present in the source. When country is given, every
    record must belong to it.

    Raises:
        DatasetFormatError: On the first malformed line.
    """
    records: list[PostalRecord] = []
    for line_number, raw in enumerate(text.split("\n"), start=1):
        line = raw.removesuffix("\r")
        if not line.strip():
            continue
        records.append(parse_line(line, line_number=line_number, country=country))
    return records
