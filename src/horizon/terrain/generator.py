"""Main terrain generation orchestration."""

import logging
from typing import NamedTuple

from .config import TerrainConfig
from .objects import Cloud, Tree, place_objects
from .profile import HeightProfile, ProfileStatistics, generate_profile
from .rng import MASK_32, Lehmer32

logger = logging.getLogger(__name__)


class GenerationResult(NamedTuple):
    """Everything one generation pass produces."""

    profile: HeightProfile
    statistics: ProfileStatistics
    trees: tuple[Tree, ...]
    clouds: tuple[Cloud, ...]


def generate_terrain(seed: int, config: TerrainConfig) -> GenerationResult:
    """Generate a complete world from a seed.

    A fresh generator is created from the seed, so the result depends only on
    the seed and the configuration.

    Args:
        seed: World seed, reduced to 32 bits.
        config: Terrain generation configuration.

    Returns:
        GenerationResult with profile, statistics, trees and clouds.
    """
    seed &= MASK_32
    rng = Lehmer32(seed)

    logger.debug(
        f"Generating terrain width={config.width} seed={seed} "
        f"smoothing={config.profile.smoothing_window}"
    )

    profile, statistics = generate_profile(config.width, rng, config.profile)

    trees, clouds = place_objects(
        profile,
        statistics,
        rng,
        config.trees,
        config.clouds,
    )

    logger.info(
        f"Seed {seed}: water line {statistics.water_line}, "
        f"{len(trees)} trees, {len(clouds)} clouds"
    )

    return GenerationResult(
        profile=profile,
        statistics=statistics,
        trees=trees,
        clouds=clouds,
    )


def regenerate(seed: int, config: TerrainConfig | None = None) -> GenerationResult:
    """Run the full pipeline for a seed, using default settings when none are given."""
    return generate_terrain(seed, config or TerrainConfig())
