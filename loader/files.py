"""JSON/YAML record file loading.

Accepted document shapes:
- a top-level list of objects
- an object with a ``records`` list
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TypeVar, cast

import yaml
from pydantic import ValidationError

from .adapter import RecordHandler
from .errors import LoaderError
from .schemas import BaseRecord

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseRecord)

_JSON_SUFFIXES = {".json"}
_YAML_SUFFIXES = {".yaml", ".yml"}


def _parse(path: Path) -> object:
    suffix = path.suffix.lower()
    if suffix not in _JSON_SUFFIXES | _YAML_SUFFIXES:
        raise LoaderError(f"Unsupported data file type: {path.suffix or '<none>'}")
    with open(path, "r", encoding="utf-8") as f:
        if suffix in _JSON_SUFFIXES:
            try:
                return cast(object, json.load(f))
            except json.JSONDecodeError as e:
                raise LoaderError(f"Invalid JSON in {path}: {e}") from e
        try:
            return cast(object, yaml.safe_load(f))
        except yaml.YAMLError as e:
            raise LoaderError(f"Invalid YAML in {path}: {e}") from e


def read_documents(path: str | Path) -> list[Mapping[str, object]]:
    """Read the raw record objects from a data file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        LoaderError: If the file can't be parsed or has the wrong shape
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    data = _parse(path)
    if data is None:
        return []
    if isinstance(data, Mapping):
        data = cast(Mapping[str, object], data).get("records")
    if not isinstance(data, list):
        raise LoaderError(f"Expected a list of records in {path}")

    documents: list[Mapping[str, object]] = []
    for index, item in enumerate(cast(list[object], data)):
        if not isinstance(item, Mapping):
            raise LoaderError(f"Record {index} in {path} is not an object")
        documents.append(cast(Mapping[str, object], item))
    return documents


def load_records(
    path: str | Path,
    record_type: type[M],
    handler: RecordHandler[M],
    skip_invalid: bool = False,
) -> int:
    """Validate each record in ``path`` and pass it to ``handler`` in file order.

    Args:
        path: JSON or YAML data file
        record_type: Record schema each object is validated into
        handler: Receives one ``add_record`` call per valid record
        skip_invalid: Log and skip records that fail validation instead of raising

    Returns:
        Number of records handed to the handler
    """
    loaded = 0
    skipped = 0
    for index, document in enumerate(read_documents(path)):
        try:
            record = record_type.from_dict(document)
        except ValidationError as e:
            if not skip_invalid:
                raise LoaderError(f"Record {index} in {path} is invalid: {e}") from e
            logger.warning(f"Skipping record {index} in {path}: {e.error_count()} validation error(s)")
            skipped += 1
            continue
        handler.add_record(record)
        loaded += 1
    logger.info(f"Loaded {loaded} record(s) from {path} (skipped {skipped})")
    return loaded
