"""Pytest configuration for SightingSearch tests.

Common fixtures: the small worked example, random sighting data, and
helpers for writing input files.
"""

import numpy as np
import pytest


@pytest.fixture
def example_pairs():
    """Three sightings with signatures 5, 3, 7."""
    return [(10, 5), (3, 7), (8, 8)]


@pytest.fixture
def example_queries():
    """Queries that all match example_pairs."""
    return [5, 3, 7]


@pytest.fixture
def example_collection(example_pairs):
    """SightingCollection built from example_pairs."""
    from sightingsearch.sightings import SightingCollection
    return SightingCollection.from_pairs(example_pairs)


@pytest.fixture
def random_data():
    """Random (speed, brightness, queries) with many shared signatures."""
    rng = np.random.default_rng(1234)
    speed = rng.integers(-50, 50, size=500)
    brightness = rng.integers(-50, 50, size=500)
    queries = rng.integers(-260, 260, size=300)
    return speed, brightness, queries


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep configuration environment variables out of every test."""
    from sightingsearch.constants import ENV_METHOD, ENV_WARMUP, ENV_LOG_LEVEL
    for name in (ENV_METHOD, ENV_WARMUP, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)
