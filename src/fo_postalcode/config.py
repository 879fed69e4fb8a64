"""Configuration using pydantic-settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fo_postalcode.directory import PostalDirectory
from fo_postalcode.models import Country


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FO_POSTALCODE_",
        extra="ignore",
    )

    country: Country = Field(
        default=Country.FAROE_ISLANDS,
        description="Country code of the bundled dataset to load (1, 2 or 3)",
    )
    digit_count: int | None = Field(
        default=None,
        ge=1,
        description="Override the number of digits in a valid postal code",
    )

    # Logging
    log_json: bool = Field(default=False, description="Emit JSON log lines")
    debug: bool = Field(default=False, description="Enable debug-level logging")

    @field_validator("country", mode="before")
    @classmethod
    def parse_country(cls, v: object) -> object:
        """Accept the numeric country code as it arrives from the environment."""
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return v

    def build_directory(self) -> PostalDirectory:
        """Build the postal directory described by these settings."""
        directory = PostalDirectory.for_country(self.country)
        if self.digit_count is not None:
            directory.digit_count = self.digit_count
        return directory
