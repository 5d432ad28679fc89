"""Loading the location catalog from the bundled seed or a JSON file."""

import json
from pathlib import Path
from typing import Any, Iterable

import logfire
import pydantic

from explora.domain.model.location import Location
from explora.util.error import ConfigurationError

from .seed import VIENNA_LOCATIONS


def parse_locations(records: Iterable[dict[str, Any]]) -> list[Location]:
    """Build locations from raw records.

    Raises:
        pydantic.ValidationError: If a record is malformed
    """
    return [Location.model_validate(record) for record in records]


def load_catalog(path: Path | None = None) -> list[Location]:
    """Load the catalog.

    Args:
        path: JSON file holding a list of location records. When None the
            bundled Vienna catalog is used.

    Returns:
        Catalog locations

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    if path is None:
        return parse_locations(VIENNA_LOCATIONS)

    with logfire.span("catalog.load", path=str(path)):
        try:
            records = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read catalog file {path}: {e}") from e

        if not isinstance(records, list):
            raise ConfigurationError(
                f"Catalog file {path} must contain a list of location records"
            )

        try:
            locations = parse_locations(records)
        except pydantic.ValidationError as e:
            raise ConfigurationError(f"Invalid location record in {path}: {e}") from e

        logfire.info("Catalog loaded", path=str(path), count=len(locations))
        return locations
