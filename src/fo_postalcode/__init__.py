"""Validation and lookup of Faroe Islands postal codes."""

from fo_postalcode.directory import PostalDirectory, faroe_islands
from fo_postalcode.errors import (
    DatasetFormatError,
    InvalidConfigurationError,
    PostalcodeError,
    UnknownCountryError,
)
from fo_postalcode.models import Country, CountryDataset, PostalRecord

__all__ = [
    "Country",
    "CountryDataset",
    "DatasetFormatError",
    "InvalidConfigurationError",
    "PostalDirectory",
    "PostalRecord",
    "PostalcodeError",
    "UnknownCountryError",
    "faroe_islands",
]
