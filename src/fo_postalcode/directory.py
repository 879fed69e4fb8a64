"""In-memory directory of postal codes for one country.

The directory is built once from an embedded dataset and then answers
validation and lookup queries with linear scans over the records. An instance
that is never mutated after construction is safe for concurrent reads;
callers that replace records or change the digit count must serialise those
calls themselves.
"""

import re
from collections.abc import Iterable
from typing import Any

from fo_postalcode.data import get_dataset
from fo_postalcode.errors import InvalidConfigurationError
from fo_postalcode.logging import get_logger
from fo_postalcode.models import Country, PostalRecord
from fo_postalcode.parsing import parse_dataset

logger = get_logger(__name__)


class PostalDirectory:
    """Postal code lookups and validation over a fixed record set."""

    def __init__(self, dataset: str, *, digit_count: int, country: Country) -> None:
        """Parse a dataset into a directory.

        Args:
            dataset: Semicolon-separated dataset text, one record per line.
            digit_count: Number of digits in a syntactically valid postal code.
            country: Country every record in the dataset must belong to.

        Raises:
            DatasetFormatError: If the dataset is malformed or holds records
                for another country.
            InvalidConfigurationError: If digit_count is not a positive integer.
        """
        self._country = Country(country)
        self._digit_count = _check_digit_count(digit_count)
        self._pattern = _code_pattern(self._digit_count)

        self._records: tuple[PostalRecord, ...] = tuple(
            parse_dataset(dataset, country=self._country)
        )

        logger.debug(
            "postal_directory_loaded",
            country=self._country.display_name,
            records=len(self._records),
            digit_count=self._digit_count,
        )

    @classmethod
    def for_country(cls, country: Country) -> "PostalDirectory":
        """Build a directory from the dataset bundled for a country."""
        dataset = get_dataset(country)
        return cls(dataset.text, digit_count=dataset.digit_count, country=dataset.country)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, code: object) -> bool:
        return any(record.code == code for record in self._records)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(country={self._country.display_name!r}, "
            f"records={len(self._records)}, digit_count={self._digit_count})"
        )

    @property
    def country(self) -> Country:
        return self._country

    @property
    def digit_count(self) -> int:
        """Number of digits a postal code must have to pass validate()."""
        return self._digit_count

    @digit_count.setter
    def digit_count(self, value: int) -> None:
        self._digit_count = _check_digit_count(value)
        self._pattern = _code_pattern(self._digit_count)
        logger.info("digit_count_changed", digit_count=self._digit_count)

    @property
    def records(self) -> tuple[PostalRecord, ...]:
        """All records in dataset order."""
        return self._records

    @records.setter
    def records(self, records: Iterable[PostalRecord]) -> None:
        self.replace_records(records)

    def replace_records(self, records: Iterable[PostalRecord]) -> None:
        """Replace the whole record set.

        Raises:
            TypeError: If any item is not a PostalRecord.
            InvalidConfigurationError: If a record belongs to another country.
        """
        new_records = tuple(records)
        for position, record in enumerate(new_records, start=1):
            if not isinstance(record, PostalRecord):
                raise TypeError(f"Expected PostalRecord, got {type(record).__name__}")
            if record.country_code != self._country:
                raise InvalidConfigurationError(
                    f"record {position} ({record.code}) belongs to "
                    f"{record.country_code.display_name}, expected {self._country.display_name}"
                )
        self._records = new_records
        logger.info("postal_records_replaced", records=len(new_records))

    def validate(self, code: Any) -> bool:
        """Check that a string is a known postal code of the right shape.

        Only ``str`` input is accepted; numbers are rejected rather than
        converted, since ``10`` and ``"010"`` are different codes.

        Returns:
            True if the code has exactly digit_count digits and is present
            in the dataset, False otherwise. Never raises.
        """
        if not isinstance(code, str):
            return False
        if self._pattern.fullmatch(code) is None:
            return False
        return code in self

    def get_all_postalcodes(self) -> list[str]:
        return [record.code for record in self._records]

    def get_all_cities(self) -> list[str]:
        return [record.city for record in self._records]

    def get_all_data(self) -> list[str]:
        """All records as raw semicolon-separated dataset lines."""
        return [record.to_line() for record in self._records]

    def get_city_from_postalcode(self, code: str) -> str:
        """Return the city for an exact postal code, or "" if unknown."""
        for record in self._records:
            if record.code == code:
                return record.city
        return ""

    def get_postalcode_from_city(self, city: str) -> list[str]:
        """Return every postal code for an exact, case-sensitive city name.

        City names are not unique, so several codes may be returned. Whitespace
        is significant: ``"Tórshavn"`` and ``"Tórshavn "`` are different cities.
        """
        return [record.code for record in self._records if record.city == city]


def faroe_islands() -> PostalDirectory:
    """Build the directory of Faroe Islands postal codes."""
    return PostalDirectory.for_country(Country.FAROE_ISLANDS)


def _check_digit_count(value: Any) -> int:
    # bool is an int subclass but never a meaningful digit count
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        logger.warning("invalid_digit_count", digit_count=value)
        raise InvalidConfigurationError(
            f"digit_count must be a positive integer, got {value!r}"
        )
    return value


def _code_pattern(digit_count: int) -> re.Pattern[str]:
    return re.compile(rf"[0-9]{{{digit_count}}}")
