"""
lifecycle/store.py - Ship file save and load

A ship file is two JSON records, one per line: a version record
{"version": 1} followed by the ship itself.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Iterator, Union
import json
import logging

from pydantic import BaseModel, ValidationError

from broadside.core.constants import SHIP_FILE_VERSION
from broadside.errors.taxonomy import IncompatibleVersion, ParseError
from broadside.ship import Ship

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ShipFileVersion(BaseModel):
    """Version record heading every ship file."""

    version: int


def _records(text: str) -> Iterator[Any]:
    """Decode JSON values laid end to end."""
    decoder = json.JSONDecoder()
    pos = 0
    index = 0
    while True:
        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos >= len(text):
            return
        index += 1
        try:
            value, pos = decoder.raw_decode(text, pos)
        except json.JSONDecodeError as e:
            raise ParseError(f"Record {index} is not valid JSON: {e}") from e
        yield value


def _next_record(records: Iterator[Any], what: str) -> Any:
    try:
        return next(records)
    except StopIteration:
        raise ParseError(
            f"Ship file has no {what} record",
            recovery_hint="The file may be empty or truncated",
        ) from None


def dumps_ship(ship: Ship) -> str:
    """Serialize a ship to ship file text."""
    version = ShipFileVersion(version=SHIP_FILE_VERSION)
    return json.dumps(version.model_dump()) + "\n" + json.dumps(ship.to_dict()) + "\n"


def loads_ship(text: str) -> Ship:
    """Decode ship file text into a new Ship."""
    records = _records(text)

    header = _next_record(records, "version")
    try:
        version = ShipFileVersion.model_validate(header)
    except ValidationError as e:
        raise ParseError(f"Invalid version record: {e}") from e
    if version.version != SHIP_FILE_VERSION:
        raise IncompatibleVersion(version.version)

    body = _next_record(records, "ship")
    if not isinstance(body, dict):
        raise ParseError("Ship record is not an object")
    try:
        return Ship.from_dict(body)
    except KeyError as e:
        raise ParseError(f"Ship record is missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise ParseError(f"Ship record has an invalid field: {e}") from e


def save_ship(ship: Ship, path: PathLike) -> None:
    """Write a ship file, replacing any existing content."""
    path = Path(path)
    path.write_text(dumps_ship(ship))
    logger.info(f"Saved ship {ship.name!r} to {path}")


def load_ship(path: PathLike) -> Ship:
    """Read a ship file into a new Ship."""
    path = Path(path)
    ship = loads_ship(path.read_text())
    logger.info(f"Loaded ship {ship.name!r} from {path}")
    return ship
