"""Height profile synthesis: velocity-biased random walk plus trailing smoothing."""

import logging
from dataclasses import dataclass
from typing import Iterator

import numpy as np
from numpy.typing import NDArray

from ..exceptions import InvalidProfileLengthError
from .config import ProfileConfig
from .rng import Lehmer32

logger = logging.getLogger(__name__)


class HeightProfile:
    """Read-only per-column terrain heights."""

    def __init__(self, heights: NDArray[np.float64]):
        heights = np.array(heights, dtype=np.float64)
        heights.flags.writeable = False
        self._heights = heights

    @property
    def heights(self) -> NDArray[np.float64]:
        """Heights as a read-only array."""
        return self._heights

    def height_at(self, x: int) -> float:
        """Height of column x.

        Raises:
            IndexError: If x is outside [0, len).
        """
        if not 0 <= x < len(self._heights):
            raise IndexError(f"Column {x} outside profile of length {len(self._heights)}")
        return float(self._heights[x])

    def __len__(self) -> int:
        return len(self._heights)

    def __iter__(self) -> Iterator[float]:
        return iter(self._heights.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeightProfile):
            return NotImplemented
        return np.array_equal(self._heights, other._heights)

    def __repr__(self) -> str:
        return f"HeightProfile(length={len(self)})"


@dataclass(frozen=True)
class ProfileStatistics:
    """Aggregate statistics of a smoothed height profile."""

    minimum: float
    maximum: float
    average: float
    water_line: int

    def is_submerged(self, height: float) -> bool:
        """Whether a column of this height lies below the water-line.

        Heights grow downwards, so submerged columns are those past the line.
        """
        return height > self.water_line


def generate_profile(
    length: int,
    rng: Lehmer32,
    config: ProfileConfig,
) -> tuple[HeightProfile, ProfileStatistics]:
    """Generate a smoothed height profile and its statistics.

    Args:
        length: Number of columns.
        rng: Generator, advanced in place.
        config: Profile generation parameters.

    Returns:
        Tuple of (HeightProfile, ProfileStatistics).

    Raises:
        InvalidProfileLengthError: If length is less than 1.
    """
    if length < 1:
        raise InvalidProfileLengthError(f"Profile length must be at least 1, got {length}")

    heights = random_walk(length, rng, config)
    smooth_trailing(heights, config.smoothing_window)
    statistics = compute_statistics(heights, config.extent)

    logger.debug(
        f"Profile of {length} columns: min={statistics.minimum:.2f} "
        f"max={statistics.maximum:.2f} avg={statistics.average:.2f} "
        f"water_line={statistics.water_line}"
    )

    return HeightProfile(np.asarray(heights, dtype=np.float64)), statistics


def random_walk(length: int, rng: Lehmer32, config: ProfileConfig) -> list[float]:
    """Walk heights column by column, biased by a running velocity.

    Args:
        length: Number of columns (at least 1).
        rng: Generator, advanced in place.
        config: Profile generation parameters.

    Returns:
        Unsmoothed heights, all within the clamp rails.
    """
    step = config.step_range
    ratio = config.velocity_ratio
    # ratio is negative by default, so these thresholds flip sign
    velocity_limit = step / (ratio / 2)
    velocity_reset = step / (ratio / 3)

    heights = [0.0] * length
    seed_height = float(rng.next_int(config.start_low, config.start_high))
    heights[0] = _clamp_to_rails(seed_height, rng, config)

    velocity = 0.0
    for i in range(1, length):
        previous = heights[i - 1]
        height = rng.next_float(previous - step - velocity, previous + step + velocity)
        heights[i] = _clamp_to_rails(height, rng, config)

        acceleration = rng.next_float(-velocity * 0.1, velocity * 0.1) + velocity
        velocity += acceleration
        if velocity > velocity_limit:
            velocity = velocity_reset
        if velocity < -velocity_limit:
            velocity = -velocity_reset

    return heights


def _clamp_to_rails(height: float, rng: Lehmer32, config: ProfileConfig) -> float:
    """Redraw a height that left the rails from a band just inside the rail."""
    if height < config.lower_rail:
        return rng.next_float(config.lower_rail, config.lower_rail + config.step_range)
    if height > config.upper_rail:
        return rng.next_float(config.upper_rail - config.step_range, config.upper_rail)
    return height


def smooth_trailing(heights: list[float], window: int) -> None:
    """Apply an in-place trailing moving average.

    Column j becomes the mean of the min(window, j) values ending at j. Earlier
    columns are already smoothed when they are read, and column 0 is never
    averaged nor used as a neighbour.
    """
    for j in range(1, len(heights)):
        count = min(window, j)
        total = 0.0
        for k in range(count):
            total += heights[j - k]
        heights[j] = total / count


def compute_statistics(heights: list[float], extent: float) -> ProfileStatistics:
    """Compute min, max, average and water-line of a profile.

    The minimum starts at the display extent and the maximum at zero.
    """
    total = 0.0
    minimum = extent
    maximum = 0.0
    for height in heights:
        total += height
        if height < minimum:
            minimum = height
        if height > maximum:
            maximum = height

    average = total / len(heights)
    water_line = int((2 * average + maximum) / 3)

    return ProfileStatistics(
        minimum=minimum,
        maximum=maximum,
        average=average,
        water_line=water_line,
    )
