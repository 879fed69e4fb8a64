"""Pydantic models for postal records and bundled datasets."""

from enum import IntEnum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field


class Country(IntEnum):
    """Country codes used by the shared Post Danmark dataset format."""

    DENMARK = 1
    GREENLAND = 2
    FAROE_ISLANDS = 3

    @property
    def display_name(self) -> str:
        """Human-readable country name."""
        return _COUNTRY_NAMES[self.value]


_COUNTRY_NAMES: Final[dict[int, str]] = {
    1: "Denmark",
    2: "Greenland",
    3: "Faroe Islands",
}

# Free-text fields must not contain the field separator or line breaks
_FIELD_TEXT: Final[str] = r"^[^;\r\n]*$"


class PostalRecord(BaseModel):
    """One row of a postal code dataset."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1, pattern=r"^[0-9]+$")
    city: str = Field(
        min_length=1, pattern=_FIELD_TEXT, description="City name, kept verbatim"
    )
    street_description: str = Field(default="", pattern=_FIELD_TEXT)
    company: str = Field(default="", pattern=_FIELD_TEXT)
    province_flag: bool = False
    country_code: Country

    def to_line(self) -> str:
        """Render the record as a semicolon-separated dataset line."""
        return ";".join(
            (
                self.code,
                self.city,
                self.street_description,
                self.company,
                str(self.province_flag),
                str(int(self.country_code)),
            )
        )


class CountryDataset(BaseModel):
    """An embedded dataset together with the rules for its country."""

    model_config = ConfigDict(frozen=True)

    country: Country
    digit_count: int = Field(ge=1, description="Digits in a valid postal code")
    text: str = Field(repr=False)
