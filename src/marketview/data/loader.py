"""Loader for the static initial asset dataset"""

import json
from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from marketview.domain.models import Asset
from marketview.shared.exceptions import (
    DatasetError,
    DatasetValidationError,
    DuplicateAssetError,
)
from marketview.validation import AssetRecord

BUNDLED_DATASET = "assets.json"


def parse_records(records: Iterable[dict[str, Any]]) -> list[Asset]:
    """Validate raw records and convert them to assets

    Raises:
        DatasetValidationError: If a record is malformed
        DuplicateAssetError: If two records share an id
    """
    assets: list[Asset] = []
    seen: set[int] = set()

    for position, raw in enumerate(records):
        try:
            record = AssetRecord.model_validate(raw)
        except ValidationError as e:
            raise DatasetValidationError(
                f"Invalid asset record at index {position}: {e}"
            ) from e

        if record.id in seen:
            raise DuplicateAssetError(
                f"Duplicate asset id {record.id} at index {position}"
            )
        seen.add(record.id)
        assets.append(record.to_asset())

    return assets


def _read_bundled() -> str:
    return (
        resources.files("marketview.data")
        .joinpath(BUNDLED_DATASET)
        .read_text(encoding="utf-8")
    )


def load_assets(path: str | Path | None = None) -> list[Asset]:
    """Load the initial asset collection

    Args:
        path: JSON file holding an array of asset records. The dataset
            bundled with the package is used when omitted.

    Returns:
        Assets in dataset order

    Raises:
        DatasetError: If the file cannot be read or parsed
    """
    source = str(path) if path else f"<bundled {BUNDLED_DATASET}>"
    try:
        text = Path(path).read_text(encoding="utf-8") if path else _read_bundled()
    except OSError as e:
        raise DatasetError(f"Cannot read dataset {source}: {e}") from e

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise DatasetError(f"Dataset {source} is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise DatasetError(
            f"Dataset {source} must be a JSON array, got {type(payload).__name__}"
        )

    assets = parse_records(payload)
    logger.info(f"Loaded {len(assets)} assets from {source}")
    return assets
