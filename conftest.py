"""Shared pytest fixtures for aliven-paths."""

import json
import pytest
from pathlib import Path


BASE_DIR = Path(__file__).parent


@pytest.fixture
def stillness_payload():
    fixture_path = BASE_DIR / "aliven_paths" / "tests" / "fixtures" / "stillness_payload.json"
    with open(fixture_path) as f:
        return json.load(f)
