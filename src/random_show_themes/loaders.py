"""Loaders for the catalog and allow-list JSON inputs."""

import json
from pathlib import Path
from typing import Any

from pydantic import StrictInt, TypeAdapter, ValidationError

from .errors import ParseError, SchemaError
from .logging import get_logger
from .models import AllowList, Catalog, Show

logger = get_logger(__name__)

_allow_list_adapter = TypeAdapter(list[StrictInt])


def read_json_source(path: Path) -> bytes:
    """Read a JSON input file as raw bytes.

    Raises:
        ParseError: If the file cannot be read
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise ParseError(f"could not read file ({e.strerror or e})", source=str(path)) from e


def _decode(raw: bytes | str, source: str) -> Any:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"invalid JSON ({e})", source=source) from e


def _first_error(error: ValidationError) -> str:
    """Condense a pydantic ValidationError into one readable line."""
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "value"
    message = f"{location}: {first.get('msg', 'invalid value')}"
    if len(details) > 1:
        message += f" (and {len(details) - 1} more)"
    return message


def _parse_show_key(key: str, source: str) -> int:
    # Keys must be plain decimal digits; int() alone would also take "+1" or " 1".
    if not key.isascii() or not key.isdigit() or int(key) == 0:
        raise SchemaError(f"show key {key!r} is not a positive integer", source=source)
    return int(key)


def load_catalog(raw: bytes | str, source: str = "catalog") -> Catalog:
    """Parse a catalog document into a mapping of show ID to Show.

    The document must be a JSON object whose keys are decimal show IDs and
    whose values are show records.

    Args:
        raw: Raw JSON document
        source: Label used in error messages (usually the file path)

    Returns:
        Catalog in document order

    Raises:
        ParseError: If the document is not JSON or not an object
        SchemaError: If a key or a show record has the wrong shape
    """
    data = _decode(raw, source)
    if not isinstance(data, dict):
        raise ParseError(
            f"expected a JSON object of shows, got {type(data).__name__}", source=source
        )

    catalog: Catalog = {}
    for key, record in data.items():
        show_id = _parse_show_key(key, source)
        if not isinstance(record, dict):
            raise SchemaError(
                f"show {key}: expected an object, got {type(record).__name__}", source=source
            )
        try:
            show = Show.model_validate(record)
        except ValidationError as e:
            raise SchemaError(f"show {key}: {_first_error(e)}", source=source) from e

        if show.id != show_id:
            logger.warning("show_id_mismatch", key=show_id, record_id=show.id, title=show.title)
        catalog[show_id] = show

    logger.debug("catalog_loaded", source=source, shows=len(catalog))
    return catalog


def load_allow_list(raw: bytes | str, source: str = "allow-list") -> AllowList:
    """Parse an allow-list document (a JSON array of show IDs).

    Raises:
        ParseError: If the document is not JSON or not an array of integers
    """
    data = _decode(raw, source)
    try:
        ids = _allow_list_adapter.validate_python(data)
    except ValidationError as e:
        raise ParseError(
            f"expected a JSON array of integers ({_first_error(e)})", source=source
        ) from e

    allow_list = frozenset(ids)
    if len(allow_list) != len(ids):
        logger.info("allow_list_duplicates", source=source, duplicates=len(ids) - len(allow_list))
    logger.debug("allow_list_loaded", source=source, ids=len(allow_list))
    return allow_list
