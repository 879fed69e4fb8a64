"""Command line entry point for postal code lookups."""

import argparse
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from fo_postalcode.config import Settings
from fo_postalcode.directory import PostalDirectory
from fo_postalcode.errors import PostalcodeError
from fo_postalcode.logging import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_CONFIG_ERROR = 2


def _emit(value: Any, *, as_json: bool) -> None:
    if as_json:
        print(json.dumps(value, ensure_ascii=False))
    elif isinstance(value, list):
        for item in value:
            print(item)
    else:
        print(value)


def run_validate(directory: PostalDirectory, codes: list[str], *, as_json: bool) -> int:
    """Validate each code, printing one result per code."""
    results = {code: directory.validate(code) for code in codes}
    if as_json:
        _emit(results, as_json=True)
    else:
        for code, valid in results.items():
            print(f"{code}\t{'valid' if valid else 'invalid'}")
    return EXIT_OK if all(results.values()) else EXIT_NOT_FOUND


def run_city(directory: PostalDirectory, code: str, *, as_json: bool) -> int:
    city = directory.get_city_from_postalcode(code)
    if not city:
        logger.info("postal_code_not_found", code=code)
        return EXIT_NOT_FOUND
    _emit(city, as_json=as_json)
    return EXIT_OK


def run_codes(directory: PostalDirectory, city: str, *, as_json: bool) -> int:
    codes = directory.get_postalcode_from_city(city)
    if not codes:
        logger.info("city_not_found", city=city)
        return EXIT_NOT_FOUND
    _emit(codes, as_json=as_json)
    return EXIT_OK


def run_list(directory: PostalDirectory, what: str, *, as_json: bool) -> int:
    if what == "cities":
        values = directory.get_all_cities()
    elif what == "data":
        values = directory.get_all_data()
    else:
        values = directory.get_all_postalcodes()
    _emit(values, as_json=as_json)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fo-postalcode",
        description="Validate and look up Faroe Islands postal codes",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug-level logging for troubleshooting",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Check that postal codes exist")
    validate.add_argument("codes", nargs="+", metavar="CODE")

    city = subparsers.add_parser("city", help="Look up the city for a postal code")
    city.add_argument("code", metavar="CODE")

    codes = subparsers.add_parser("codes", help="Look up the postal codes for a city")
    codes.add_argument("city", metavar="CITY")

    listing = subparsers.add_parser("list", help="List every postal code")
    group = listing.add_mutually_exclusive_group()
    group.add_argument(
        "--cities",
        dest="what",
        action="store_const",
        const="cities",
        help="List every city instead",
    )
    group.add_argument(
        "--data",
        dest="what",
        action="store_const",
        const="data",
        help="List every raw dataset line instead",
    )
    listing.set_defaults(what="codes")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        configure_logging(level=logging.DEBUG if args.debug else logging.INFO)
        logger.error("failed_to_load_settings", error=str(e))
        sys.exit(EXIT_CONFIG_ERROR)

    debug = args.debug or settings.debug
    configure_logging(
        json_output=settings.log_json,
        level=logging.DEBUG if debug else logging.INFO,
    )

    try:
        directory = settings.build_directory()
    except PostalcodeError as e:
        logger.error("failed_to_build_directory", error=str(e))
        sys.exit(EXIT_CONFIG_ERROR)

    if args.command == "validate":
        status = run_validate(directory, args.codes, as_json=args.json)
    elif args.command == "city":
        status = run_city(directory, args.code, as_json=args.json)
    elif args.command == "codes":
        status = run_codes(directory, args.city, as_json=args.json)
    else:
        status = run_list(directory, args.what, as_json=args.json)

    sys.exit(status)


if __name__ == "__main__":
    main()
