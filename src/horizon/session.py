"""World session: owns the current seed and the last generated world."""

from enum import Enum
from typing import Callable, Iterator

import structlog

from .config import Config
from .terrain.generator import GenerationResult, generate_terrain
from .terrain.objects import Cloud, Tree
from .terrain.profile import HeightProfile, ProfileStatistics
from .terrain.rng import MASK_32

logger = structlog.get_logger()

RegeneratedCallback = Callable[["WorldSession", GenerationResult], None]


class SessionState(str, Enum):
    """Lifecycle state of a session."""

    IDLE = "idle"
    REGENERATING = "regenerating"


class WorldSession:
    """Holds one generated world and replaces it wholesale on every seed change.

    The first world uses the configured initial seed and smoothing window, so a
    fresh start always shows the same world. Later regenerations use the
    regeneration smoothing window. The previous result stays readable until a
    new pass has fully completed.
    """

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self._seed = self.config.session.initial_seed & MASK_32
        self._state = SessionState.IDLE
        self._generation_count = 0
        self._listeners: list[RegeneratedCallback] = []
        self._result = self._generate(self._seed, self.config.session.initial_smoothing_window)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def generation_count(self) -> int:
        """Number of completed generation passes, including the first."""
        return self._generation_count

    @property
    def result(self) -> GenerationResult:
        return self._result

    @property
    def profile(self) -> HeightProfile:
        return self._result.profile

    @property
    def statistics(self) -> ProfileStatistics:
        return self._result.statistics

    @property
    def trees(self) -> tuple[Tree, ...]:
        return self._result.trees

    @property
    def clouds(self) -> tuple[Cloud, ...]:
        return self._result.clouds

    def on_regenerated(self, callback: RegeneratedCallback) -> None:
        """Register a callback invoked after each completed regeneration."""
        self._listeners.append(callback)

    def advance_seed(self) -> GenerationResult:
        """Increment the seed and regenerate the world.

        The seed only moves once the new world is complete, so a failed pass
        leaves both the seed and the world as they were.
        """
        next_seed = (self._seed + 1) & MASK_32
        result = self._generate(next_seed, self.config.session.smoothing_window)
        logger.debug("seed_advanced", previous=self._seed, seed=next_seed)
        return self._replace(next_seed, result)

    def regenerate(self) -> GenerationResult:
        """Regenerate the world for the current seed."""
        result = self._generate(self._seed, self.config.session.smoothing_window)
        return self._replace(self._seed, result)

    def run_continuous(self, steps: int) -> Iterator[GenerationResult]:
        """Advance the seed once per step, yielding each new world.

        Args:
            steps: Number of regenerations to run.

        Yields:
            The GenerationResult of each step.
        """
        for _ in range(steps):
            yield self.advance_seed()

    def _replace(self, seed: int, result: GenerationResult) -> GenerationResult:
        self._seed = seed
        self._result = result
        for callback in self._listeners:
            callback(self, result)
        return result

    def _generate(self, seed: int, smoothing_window: int) -> GenerationResult:
        terrain_config = self.config.terrain.with_smoothing(smoothing_window)
        self._state = SessionState.REGENERATING
        try:
            result = generate_terrain(seed, terrain_config)
        finally:
            self._state = SessionState.IDLE
        self._generation_count += 1
        logger.info(
            "world_regenerated",
            seed=seed,
            generation=self._generation_count,
            water_line=result.statistics.water_line,
            trees=len(result.trees),
            clouds=len(result.clouds),
        )
        return result
