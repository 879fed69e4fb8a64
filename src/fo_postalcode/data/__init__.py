"""Embedded postal code datasets, keyed by country."""

from typing import Final

from fo_postalcode.data import faroe_islands
from fo_postalcode.errors import UnknownCountryError
from fo_postalcode.models import Country, CountryDataset

DATASETS: Final[dict[Country, CountryDataset]] = {
    Country.FAROE_ISLANDS: CountryDataset(
        country=Country.FAROE_ISLANDS,
        digit_count=faroe_islands.DIGIT_COUNT,
        text=faroe_islands.DATASET,
    ),
}


def get_dataset(country: Country) -> CountryDataset:
    """Return the bundled dataset for a country.

    Raises:
        UnknownCountryError: If no dataset is bundled for the country.
    """
    try:
        return DATASETS[country]
    except KeyError:
        name = country.display_name if isinstance(country, Country) else repr(country)
        raise UnknownCountryError(f"No postal code dataset bundled for {name}") from None
