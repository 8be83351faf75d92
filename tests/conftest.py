"""Shared test fixtures."""

import copy
import json
from pathlib import Path

import pytest

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def _forecast_payload() -> list:
    with open(FIXTURE_DIR / "forecast_130000.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def forecast_payload(_forecast_payload: list) -> list:
    """JMA forecast payload for Tokyo. Each test gets its own copy."""
    return copy.deepcopy(_forecast_payload)
