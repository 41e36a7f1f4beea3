"""Loading of the playback dataset"""
import json
from pathlib import Path
from typing import Tuple, Union

from config.logger import logger
from core.exceptions import DatasetLoadError
from models.telemetry import Reading


def load_dataset(path: Union[str, Path]) -> Tuple[Reading, ...]:
    """Read the dataset JSON file; anything but a JSON array is fatal"""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DatasetLoadError(f"Cannot read dataset {path}: {e}") from e

    try:
        records = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"Dataset {path} is not valid JSON: {e}") from e

    if not isinstance(records, list):
        raise DatasetLoadError(f"Dataset {path} must be a JSON array")

    logger.info(f"Loaded {len(records)} dataset records from {path}")
    return tuple(records)
