"""Shared pytest fixtures."""

import os

import pytest
import structlog
from hypothesis import HealthCheck, settings

from fo_postalcode import Country, PostalDirectory, PostalRecord, faroe_islands
from fo_postalcode.config import Settings

# Hypothesis settings profiles for different environments
settings.register_profile("fast", max_examples=25)
settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


SAMPLE_DATASET = """\
100;Tórshavn;;;False;3
110;Tórshavn ;Postboks;;False;3
510;Gøta;;;False;3
515;Gøta;Postboks;;False;3
"""


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent a local .env file or FO_POSTALCODE_* variables leaking into tests."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )
    for name in list(os.environ):
        if name.startswith("FO_POSTALCODE_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any structlog configuration a test installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def directory() -> PostalDirectory:
    return faroe_islands()


@pytest.fixture
def sample_directory() -> PostalDirectory:
    return PostalDirectory(SAMPLE_DATASET, digit_count=3, country=Country.FAROE_ISLANDS)


@pytest.fixture
def sample_record() -> PostalRecord:
    return PostalRecord(
        code="110",
        city="Tórshavn ",
        street_description="Postboks",
        country_code=Country.FAROE_ISLANDS,
    )
