"""Object placement: trees anchored to the terrain and clouds in open sky."""

from dataclasses import dataclass, field

from .config import CloudConfig, TreeConfig
from .profile import HeightProfile, ProfileStatistics
from .rng import Lehmer32


@dataclass(frozen=True)
class Tree:
    """A placed tree. y is the truncated terrain height at x."""

    x: int
    y: int
    width: int
    height: int
    radius: int
    bark_color: int
    leaf_color: int


@dataclass(frozen=True)
class CloudParticle:
    """One filled circle of a cloud."""

    x: int
    y: int
    radius: int
    color: int


@dataclass(frozen=True)
class Cloud:
    """A cloud centre and the particles it owns."""

    x: int
    y: int
    particles: tuple[CloudParticle, ...] = field(default_factory=tuple)


def place_trees(
    profile: HeightProfile,
    statistics: ProfileStatistics,
    rng: Lehmer32,
    config: TreeConfig,
) -> tuple[Tree, ...]:
    """Place trees at spaced offsets along the profile.

    Offsets advance by a draw in [frequency/2, frequency*1.5). With
    water_aware set, only columns above the average height get a tree.

    Args:
        profile: Smoothed height profile.
        statistics: Statistics of the same profile.
        rng: Generator, advanced in place.
        config: Tree placement parameters.

    Returns:
        Placed trees, ordered by x.
    """
    half = config.frequency // 2
    limit = len(profile) - config.margin
    trees: list[Tree] = []

    x = config.margin + rng.next_int(half, half * 3)
    while x < limit:
        ground = profile.height_at(x)
        if not config.water_aware or ground < statistics.average:
            trees.append(_make_tree(x, ground, rng, config))
        x += rng.next_int(half, half * 3)

    return tuple(trees)


def _make_tree(x: int, ground: float, rng: Lehmer32, config: TreeConfig) -> Tree:
    # Draw order is fixed: width, height, radius, leaf
    width = rng.next_int(config.width_min, config.width_max)
    height = rng.next_int(config.height_min, config.height_max) + config.bark_hide_offset
    radius = rng.next_float(config.radius_factor_min, config.radius_factor_max) * width
    leaf = rng.next_int(0, config.leaf_colors)
    return Tree(
        x=x,
        y=int(ground),
        width=width,
        height=height,
        radius=int(radius),
        bark_color=config.bark_color,
        leaf_color=leaf,
    )


def place_clouds(
    length: int,
    rng: Lehmer32,
    config: CloudConfig,
) -> tuple[Cloud, ...]:
    """Place clouds at spaced offsets across the sky band.

    Args:
        length: Terrain width in columns.
        rng: Generator, advanced in place.
        config: Cloud placement parameters.

    Returns:
        Placed clouds, ordered by x.
    """
    half = config.frequency // 2
    upper = half * config.step_multiplier
    limit = length - config.margin
    clouds: list[Cloud] = []

    x = config.margin + rng.next_int(half, upper)
    while x < limit:
        y = rng.next_int(config.band_top, config.band_bottom)
        count = rng.next_int(config.particles_min, config.particles_max)
        clouds.append(make_cloud(x, y, count, rng, config))
        x += rng.next_int(half, upper)

    return tuple(clouds)


def make_cloud(x: int, y: int, count: int, rng: Lehmer32, config: CloudConfig) -> Cloud:
    """Build a cloud of count particles scattered around (x, y)."""
    particles = []
    for _ in range(count):
        dx = rng.next_int(-config.particle_x_range, config.particle_x_range)
        dy = rng.next_int(-config.particle_y_range, config.particle_y_range)
        radius = rng.next_int(config.radius_min, config.radius_max)
        particles.append(CloudParticle(x=x + dx, y=y + dy, radius=radius, color=config.color))
    return Cloud(x=x, y=y, particles=tuple(particles))


def place_objects(
    profile: HeightProfile,
    statistics: ProfileStatistics,
    rng: Lehmer32,
    tree_config: TreeConfig,
    cloud_config: CloudConfig,
) -> tuple[tuple[Tree, ...], tuple[Cloud, ...]]:
    """Place all surface objects.

    Trees draw first; clouds continue from the same generator state.

    Returns:
        Tuple of (trees, clouds). Clouds are empty when disabled.
    """
    trees = place_trees(profile, statistics, rng, tree_config)
    if not cloud_config.enabled:
        return trees, ()
    clouds = place_clouds(len(profile), rng, cloud_config)
    return trees, clouds
