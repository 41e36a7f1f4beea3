import json
from pathlib import Path
from typing import Any

import pytest
from config.settings import Settings


def make_reading(index: int = 0, **overrides: Any) -> dict[str, Any]:
    reading: dict[str, Any] = {
        "depth": 10.5,
        "pressure": 2.1,
        "temperature": 14.0,
        "direction": 180.0,
        "timestamp": f"2025-06-01T08:00:{index % 60:02d}Z",
        "seq": index,
    }
    reading.update(overrides)
    return reading


@pytest.fixture
def reading() -> dict[str, Any]:
    return make_reading()


@pytest.fixture
def dataset_records() -> list[dict[str, Any]]:
    return [make_reading(i, depth=float(i)) for i in range(3)]


@pytest.fixture
def dataset_file(tmp_path: Path, dataset_records: list[dict[str, Any]]) -> Path:
    path = tmp_path / "sensor_data.json"
    path.write_text(json.dumps(dataset_records), encoding="utf-8")
    return path


@pytest.fixture
def settings(dataset_file: Path) -> Settings:
    # Long interval keeps the timer from firing during a test
    return Settings(dataset_path=dataset_file, sim_interval_ms=600_000, history_capacity=5)
