"""Deterministic side-view terrain generation package.

This package implements a seeded height profile (random walk with velocity
plus smoothing), its statistics and water-line, and the placement of trees
and clouds on top of it.
"""

from .config import CloudConfig, ProfileConfig, TerrainConfig, TreeConfig
from .generator import GenerationResult, generate_terrain, regenerate
from .objects import Cloud, CloudParticle, Tree, place_clouds, place_trees
from .profile import HeightProfile, ProfileStatistics, generate_profile
from .rng import Lehmer32
from .validation import ValidationResult, validate_terrain

__all__ = [
    "Cloud",
    "CloudConfig",
    "CloudParticle",
    "GenerationResult",
    "HeightProfile",
    "Lehmer32",
    "ProfileConfig",
    "ProfileStatistics",
    "TerrainConfig",
    "Tree",
    "TreeConfig",
    "ValidationResult",
    "generate_profile",
    "generate_terrain",
    "place_clouds",
    "place_trees",
    "regenerate",
    "validate_terrain",
]
