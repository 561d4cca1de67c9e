"""Configuration loading from TOML files."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError
from .terrain.config import TerrainConfig

CONFIGS_DIR = Path(__file__).parent.parent.parent / "configs"


class SessionConfig(BaseModel):
    """World session configuration from TOML."""

    initial_seed: int = Field(default=0, ge=0, description="Seed of the first world")
    initial_smoothing_window: int = Field(
        default=8, ge=1, description="Smoothing window of the first generation"
    )
    smoothing_window: int = Field(
        default=12, ge=1, description="Smoothing window of every later regeneration"
    )


class Config(BaseModel):
    """Complete configuration for a world session."""

    session: SessionConfig = SessionConfig()
    terrain: TerrainConfig = TerrainConfig()


def load_config(config_path: Path) -> Config:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed Config object.

    Raises:
        ConfigError: If the file is missing, malformed, or fails validation.
    """
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Malformed TOML in {config_path}: {e}") from e

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator
    2. configs/{name}.toml
    3. configs/{name}

    Args:
        name: Config name or path.

    Returns:
        Path to the config file.

    Raises:
        ConfigError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise ConfigError(f"Config file not found: {name}")

    config_path = CONFIGS_DIR / f"{name}.toml"
    if config_path.exists():
        return config_path

    config_path = CONFIGS_DIR / name
    if config_path.exists():
        return config_path

    raise ConfigError(
        f"Config '{name}' not found in {CONFIGS_DIR}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available config names."""
    if not CONFIGS_DIR.exists():
        return []
    return sorted(p.stem for p in CONFIGS_DIR.glob("*.toml"))
