"""Pytest configuration and fixtures for horizon tests."""

import tempfile
from pathlib import Path

import pytest

from horizon.terrain.config import ProfileConfig, TerrainConfig
from horizon.terrain.generator import GenerationResult, generate_terrain


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def terrain_config() -> TerrainConfig:
    """Default terrain configuration (1864 columns, smoothing 8)."""
    return TerrainConfig()


@pytest.fixture
def small_profile_config() -> ProfileConfig:
    """Profile settings of the 100-column reference scenario."""
    return ProfileConfig(start_low=100, start_high=200, step_range=2, smoothing_window=8)


@pytest.fixture(scope="session")
def seed_zero_world() -> GenerationResult:
    """Default world for seed 0."""
    return generate_terrain(0, TerrainConfig())


@pytest.fixture
def sample_config_toml():
    """Sample session config as TOML string."""
    return """
[session]
initial_seed = 7
initial_smoothing_window = 8
smoothing_window = 12

[terrain]
width = 600

[terrain.profile]
step_range = 3

[terrain.trees]
frequency = 80

[terrain.clouds]
enabled = false
"""
