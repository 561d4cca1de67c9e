"""Post-generation validation of terrain invariants."""

import logging

import numpy as np

from ..exceptions import ValidationFailedError
from .config import TerrainConfig
from .generator import GenerationResult
from .objects import Cloud, Tree
from .profile import HeightProfile, ProfileStatistics

logger = logging.getLogger(__name__)


class ValidationResult:
    """Result of terrain validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)

    def raise_for_errors(self) -> None:
        """Raise ValidationFailedError if any check failed."""
        if not self.passed:
            raise ValidationFailedError(self.errors)


def validate_terrain(result: GenerationResult, config: TerrainConfig) -> ValidationResult:
    """Validate a generated world against its generation invariants.

    Args:
        result: Output of a generation pass.
        config: Configuration the world was generated with.

    Returns:
        ValidationResult with any errors/warnings.
    """
    validation = ValidationResult()

    # Check 1: Heights within the rails
    _check_bounds(result.profile, config, validation)

    # Check 2: Statistics agree with the profile
    _check_statistics(result.profile, result.statistics, config, validation)

    # Check 3: Trees spaced, inside margins, anchored to the ground
    _check_trees(result.trees, result.profile, result.statistics, config, validation)

    # Check 4: Clouds spaced and inside margins
    _check_clouds(result.clouds, len(result.profile), config, validation)

    if result.statistics.water_line >= result.statistics.maximum:
        validation.add_warning("Water line at or past the lowest column, no water visible")

    if validation.passed:
        logger.info("Terrain validation passed")
    else:
        logger.warning(f"Terrain validation failed with {len(validation.errors)} errors")
        for error in validation.errors:
            logger.error(f"  - {error}")

    for warning in validation.warnings:
        logger.warning(f"  - {warning}")

    return validation


def _check_bounds(profile: HeightProfile, config: TerrainConfig, result: ValidationResult) -> None:
    heights = profile.heights
    lower = config.profile.lower_rail
    upper = config.profile.upper_rail
    below = np.flatnonzero(heights < lower)
    above = np.flatnonzero(heights > upper)
    if below.size:
        result.add_error(f"{below.size} columns below rail {lower}, first at x={below[0]}")
    if above.size:
        result.add_error(f"{above.size} columns above rail {upper}, first at x={above[0]}")


def _check_statistics(
    profile: HeightProfile,
    statistics: ProfileStatistics,
    config: TerrainConfig,
    result: ValidationResult,
) -> None:
    heights = profile.heights
    # the running minimum starts at the extent and the maximum at zero
    expected_min = min(config.profile.extent, float(heights.min()))
    expected_max = max(0.0, float(heights.max()))
    if statistics.minimum != expected_min or statistics.maximum != expected_max:
        result.add_error(
            f"Extrema ({statistics.minimum}, {statistics.maximum}) do not match profile "
            f"({expected_min}, {expected_max})"
        )
    if not statistics.minimum <= statistics.average <= statistics.maximum:
        result.add_error(
            f"Average {statistics.average} outside [{statistics.minimum}, {statistics.maximum}]"
        )
    expected = int((2 * statistics.average + statistics.maximum) / 3)
    if statistics.water_line != expected:
        result.add_error(f"Water line {statistics.water_line} != {expected}")


def _check_trees(
    trees: tuple[Tree, ...],
    profile: HeightProfile,
    statistics: ProfileStatistics,
    config: TerrainConfig,
    result: ValidationResult,
) -> None:
    tree_config = config.trees
    half = tree_config.frequency // 2
    xs = np.array([tree.x for tree in trees], dtype=np.int64)
    _check_positions(
        "Tree",
        xs,
        half,
        half * 3,
        tree_config.margin,
        len(profile),
        result,
        every_step=not tree_config.water_aware,
    )

    for tree in trees:
        if not 0 <= tree.x < len(profile):
            continue
        ground = profile.height_at(tree.x)
        if tree.y != int(ground):
            result.add_error(f"Tree at x={tree.x} anchored at {tree.y}, ground is {ground:.2f}")
        if tree_config.water_aware and ground >= statistics.average:
            result.add_error(f"Tree at x={tree.x} on a column past the average height")


def _check_clouds(
    clouds: tuple[Cloud, ...],
    length: int,
    config: TerrainConfig,
    result: ValidationResult,
) -> None:
    cloud_config = config.clouds
    if not cloud_config.enabled:
        if clouds:
            result.add_error(f"{len(clouds)} clouds generated while clouds are disabled")
        return

    half = cloud_config.frequency // 2
    xs = np.array([cloud.x for cloud in clouds], dtype=np.int64)
    _check_positions(
        "Cloud",
        xs,
        half,
        half * cloud_config.step_multiplier,
        cloud_config.margin,
        length,
        result,
        every_step=True,
    )

    for cloud in clouds:
        count = len(cloud.particles)
        if not cloud_config.particles_min <= count < cloud_config.particles_max:
            result.add_error(f"Cloud at x={cloud.x} has {count} particles")
        if not cloud_config.band_top <= cloud.y < cloud_config.band_bottom:
            result.add_error(f"Cloud at x={cloud.x} outside band at y={cloud.y}")


def _check_positions(
    label: str,
    xs: np.ndarray,
    step_min: int,
    step_max: int,
    margin: int,
    length: int,
    result: ValidationResult,
    every_step: bool,
) -> None:
    """Check margins and consecutive spacing of placed x positions.

    Steps are drawn from [step_min, step_max). When offsets can be skipped
    (every_step is False) only the lower bound applies between placements.
    """
    if xs.size == 0:
        return
    if xs[0] < margin + step_min:
        result.add_error(f"{label} at x={xs[0]} inside left margin")
    if xs[-1] >= length - margin:
        result.add_error(f"{label} at x={xs[-1]} inside right margin")
    gaps = np.diff(xs)
    tight = np.flatnonzero(gaps < step_min)
    if tight.size:
        i = tight[0]
        result.add_error(f"{label}s at x={xs[i]} and x={xs[i + 1]} closer than {step_min}")
    if every_step:
        if xs[0] >= margin + step_max:
            result.add_error(f"First {label.lower()} at x={xs[0]} past the first step")
        wide = np.flatnonzero(gaps >= step_max)
        if wide.size:
            i = wide[0]
            result.add_error(
                f"{label}s at x={xs[i]} and x={xs[i + 1]} further apart than {step_max - 1}"
            )
