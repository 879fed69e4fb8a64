"""Exceptions raised by the postal code directory."""


class PostalcodeError(Exception):
    """Base error for fo-postalcode."""


class DatasetFormatError(PostalcodeError, ValueError):
    """Raised when a dataset line cannot be parsed into a postal record."""

    def __init__(self, message: str, *, line_number: int, line: str) -> None:
        super().__init__(f"line {line_number}: {message} ({line!r})")
        self.line_number = line_number
        self.line = line


class InvalidConfigurationError(PostalcodeError, ValueError):
    """Raised when the directory is configured with an unusable value."""


class UnknownCountryError(PostalcodeError, LookupError):
    """Raised when no dataset is bundled for the requested country."""
