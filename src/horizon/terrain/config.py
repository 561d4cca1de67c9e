"""Terrain generation configuration models."""

from pydantic import BaseModel, Field, model_validator


class ProfileConfig(BaseModel):
    """Height profile random walk and smoothing parameters."""

    start_low: int = Field(default=100, description="Inclusive low end of the first height")
    start_high: int = Field(default=820, description="Exclusive high end of the first height")
    step_range: int = Field(default=2, gt=0, description="Maximum height delta per column")
    smoothing_window: int = Field(
        default=8, ge=1, description="Trailing moving-average window, including the column itself"
    )
    velocity_ratio: float = Field(
        default=-1.0, description="Tuning constant for the velocity clamp thresholds"
    )
    lower_rail: float = Field(default=200.0, description="Lower clamp rail for heights")
    upper_rail: float = Field(default=800.0, description="Upper clamp rail for heights")
    extent: float = Field(
        default=920.0, description="Maximum displayable extent, seeds the minimum statistic"
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "ProfileConfig":
        if self.start_high <= self.start_low:
            raise ValueError("start_high must be greater than start_low")
        if self.upper_rail <= self.lower_rail:
            raise ValueError("upper_rail must be greater than lower_rail")
        if self.velocity_ratio == 0:
            raise ValueError("velocity_ratio must be non-zero")
        return self


class TreeConfig(BaseModel):
    """Tree placement and shape parameters."""

    frequency: int = Field(default=120, ge=2, description="Nominal spacing between trees")
    margin: int = Field(default=40, ge=0, description="Clear columns at each edge")
    width_min: int = Field(default=6, description="Minimum trunk width (inclusive)")
    width_max: int = Field(default=14, description="Maximum trunk width (exclusive)")
    height_min: int = Field(default=36, description="Minimum trunk height (inclusive)")
    height_max: int = Field(default=56, description="Maximum trunk height (exclusive)")
    bark_hide_offset: int = Field(
        default=15, description="Extra trunk height buried below the surface"
    )
    radius_factor_min: float = Field(default=2.1, description="Canopy radius per unit of width")
    radius_factor_max: float = Field(default=2.6, description="Canopy radius per unit of width")
    leaf_colors: int = Field(default=3, ge=1, description="Number of leaf color indices")
    bark_color: int = Field(default=3, ge=0, description="Fixed bark color index")
    water_aware: bool = Field(
        default=True, description="Only place trees on columns above the average height"
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "TreeConfig":
        if self.width_max <= self.width_min:
            raise ValueError("width_max must be greater than width_min")
        if self.height_max <= self.height_min:
            raise ValueError("height_max must be greater than height_min")
        return self


class CloudConfig(BaseModel):
    """Cloud placement and particle parameters."""

    enabled: bool = Field(default=True, description="Generate clouds after trees")
    frequency: int = Field(default=200, ge=2, description="Nominal spacing between clouds")
    step_multiplier: int = Field(
        default=5, ge=2, description="Upper step bound in half-frequency units"
    )
    margin: int = Field(default=60, ge=0, description="Clear columns at each edge")
    band_top: int = Field(default=50, description="Top of the cloud band (inclusive)")
    band_bottom: int = Field(default=145, description="Bottom of the cloud band (exclusive)")
    particles_min: int = Field(default=12, description="Minimum particles per cloud")
    particles_max: int = Field(default=20, description="Maximum particles per cloud (exclusive)")
    particle_x_range: int = Field(default=45, gt=0, description="Horizontal particle spread")
    particle_y_range: int = Field(default=12, gt=0, description="Vertical particle spread")
    radius_min: int = Field(default=10, description="Minimum particle radius")
    radius_max: int = Field(default=28, description="Maximum particle radius (exclusive)")
    color: int = Field(default=0, ge=0, description="Fixed cloud color index")

    @model_validator(mode="after")
    def _check_ranges(self) -> "CloudConfig":
        if self.band_bottom <= self.band_top:
            raise ValueError("band_bottom must be greater than band_top")
        if self.particles_max <= self.particles_min:
            raise ValueError("particles_max must be greater than particles_min")
        if self.radius_max <= self.radius_min:
            raise ValueError("radius_max must be greater than radius_min")
        return self


class TerrainConfig(BaseModel):
    """Complete terrain generation configuration."""

    width: int = Field(default=1864, ge=1, description="Terrain width in columns")
    height: int = Field(
        default=920,
        ge=1,
        description="Display height in pixels, sets profile start_high and extent unless given",
    )

    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    trees: TreeConfig = Field(default_factory=TreeConfig)
    clouds: CloudConfig = Field(default_factory=CloudConfig)

    @model_validator(mode="after")
    def _derive_from_height(self) -> "TerrainConfig":
        update = {}
        if "start_high" not in self.profile.model_fields_set:
            update["start_high"] = self.height - 100
        if "extent" not in self.profile.model_fields_set:
            update["extent"] = float(self.height)
        if update:
            self.profile = self.profile.model_copy(update=update)
        if self.profile.start_high <= self.profile.start_low:
            raise ValueError(
                f"height {self.height} leaves no start range above start_low "
                f"{self.profile.start_low}"
            )
        return self

    def with_smoothing(self, smoothing_window: int) -> "TerrainConfig":
        """Return a copy using a different smoothing window."""
        profile = self.profile.model_copy(update={"smoothing_window": smoothing_window})
        return self.model_copy(update={"profile": profile})
