"""Tests for the generation pipeline entry points."""

import numpy as np

from horizon.terrain.config import CloudConfig, ProfileConfig, TerrainConfig, TreeConfig
from horizon.terrain.generator import GenerationResult, generate_terrain, regenerate
from horizon.terrain.objects import place_objects
from horizon.terrain.profile import generate_profile
from horizon.terrain.rng import Lehmer32


class TestGenerateTerrain:
    """Tests for generate_terrain."""

    def test_reference_scenario(self) -> None:
        """Seed 0 over 100 columns reproduces the reference profile."""
        config = TerrainConfig(
            width=100,
            profile=ProfileConfig(start_low=100, start_high=200, step_range=2, smoothing_window=8),
        )
        profile, stats, trees, clouds = generate_terrain(0, config)

        assert len(profile) == 100
        assert profile.heights[:5].tolist() == [
            200.52846875904521,
            201.51870898973135,
            204.2764685676789,
            202.49615824276711,
            202.4175538972878,
        ]
        assert np.all((profile.heights >= 200.0) & (profile.heights <= 800.0))
        assert stats.water_line == 222
        # 100 columns leave no room past the margins
        assert trees == ()
        assert clouds == ()

    def test_deterministic(self) -> None:
        """Two runs with the same seed are identical."""
        config = TerrainConfig(width=1200)
        first = generate_terrain(17, config)
        second = generate_terrain(17, config)
        np.testing.assert_array_equal(first.profile.heights, second.profile.heights)
        assert first.statistics == second.statistics
        assert first.trees == second.trees
        assert first.clouds == second.clouds
        assert first == second

    def test_different_seeds_differ(self) -> None:
        """Neighbouring seeds give different worlds."""
        config = TerrainConfig(width=800)
        assert generate_terrain(1, config).profile != generate_terrain(2, config).profile

    def test_pipeline_order(self) -> None:
        """Profile, then trees, then clouds draw from one generator."""
        config = TerrainConfig(width=900)
        result = generate_terrain(5, config)

        rng = Lehmer32(5)
        profile, stats = generate_profile(900, rng, config.profile)
        trees, clouds = place_objects(profile, stats, rng, config.trees, config.clouds)
        assert result == GenerationResult(profile, stats, trees, clouds)

    def test_display_height_shapes_world(self) -> None:
        """The display height sets the start range, so it changes the world."""
        short = generate_terrain(0, TerrainConfig(width=900, height=600))
        tall = generate_terrain(0, TerrainConfig(width=900, height=920))
        # first draw 321050320 lands at 420 in [100, 500) and at 260 in [100, 820)
        assert short.profile.height_at(0) == 420.0
        assert tall.profile.height_at(0) == 260.0
        assert short != tall

    def test_seed_reduced_to_32_bits(self) -> None:
        """Seeds alias modulo 2**32."""
        config = TerrainConfig(width=500)
        assert generate_terrain(2**32 + 3, config) == generate_terrain(3, config)

    def test_earlier_draft_variant(self) -> None:
        """Without water awareness or clouds, every offset gets a tree."""
        config = TerrainConfig(
            trees=TreeConfig(water_aware=False),
            clouds=CloudConfig(enabled=False),
        )
        result = generate_terrain(0, config)
        assert result.clouds == ()
        xs = np.array([tree.x for tree in result.trees])
        assert xs.size > 0
        assert np.diff(xs).max() < 180


class TestRegenerate:
    """Tests for the regenerate entry point."""

    def test_returns_four_parts(self) -> None:
        """regenerate unpacks into profile, statistics, trees and clouds."""
        profile, stats, trees, clouds = regenerate(0)
        assert len(profile) == 1864
        assert stats.minimum <= stats.average <= stats.maximum
        assert isinstance(trees, tuple)
        assert isinstance(clouds, tuple)

    def test_defaults_match_generate_terrain(self) -> None:
        """Without a config, regenerate uses the default settings."""
        assert regenerate(4) == generate_terrain(4, TerrainConfig())
