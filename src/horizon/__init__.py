"""horizon - deterministic 2D terrain, tree and cloud generation."""

from .config import Config, SessionConfig, load_config
from .session import SessionState, WorldSession
from .terrain import GenerationResult, TerrainConfig, regenerate

__all__ = [
    "Config",
    "GenerationResult",
    "SessionConfig",
    "SessionState",
    "TerrainConfig",
    "WorldSession",
    "load_config",
    "regenerate",
]
__version__ = "0.1.0"
