"""
Core configuration classes.

Configurations describe WHAT domain to build (extents) and how the library
should report (logging). Validation happens at model construction, so a
``DomainConfig`` that exists always yields a valid geometry.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from turbo_grid.geometry.cartesian import CartesianGeometry
from turbo_grid.utils.exceptions import UnknownBoundaryError

if TYPE_CHECKING:
    from turbo_grid.geometry.protocol import Boundary


class LoggingConfig(BaseModel):
    """
    Configuration for logging.

    Attributes
    ----------
    level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
        Logging level (default: INFO)
    use_colors : bool
        Colored console output (default: True)
    log_to_file : bool
        Also write log records to a file (default: False)
    log_file_path : str | None
        Log file location; a timestamped file under ./logs when None
    include_location : bool
        Append ``[file:line]`` to each record (default: False)
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    use_colors: bool = True
    log_to_file: bool = False
    log_file_path: str | None = None
    include_location: bool = False

    def apply(self) -> None:
        """Apply these settings to the global turbo_grid logging manager."""
        from turbo_grid.utils.turbo_logging import configure_logging

        configure_logging(
            level=self.level,
            log_to_file=self.log_to_file,
            log_file_path=self.log_file_path,
            use_colors=self.use_colors,
            include_location=self.include_location,
        )


class DomainConfig(BaseModel):
    """
    Extents of a Cartesian domain.

    Attributes
    ----------
    x_min, x_max, y_min, y_max, z_min, z_max : float
        Finite domain extents; each minimum must be strictly less than its
        maximum.

    Examples
    --------
    >>> config = DomainConfig(x_min=0.0, x_max=1.0, y_min=-1.0, y_max=1.0, z_min=4.0, z_max=5.5)
    >>> config.to_geometry().Lz
    1.5
    """

    x_min: float = Field(0.0, strict=True, allow_inf_nan=False, description="Minimum x-coordinate")
    x_max: float = Field(1.0, strict=True, allow_inf_nan=False, description="Maximum x-coordinate")
    y_min: float = Field(0.0, strict=True, allow_inf_nan=False, description="Minimum y-coordinate")
    y_max: float = Field(1.0, strict=True, allow_inf_nan=False, description="Maximum y-coordinate")
    z_min: float = Field(0.0, strict=True, allow_inf_nan=False, description="Minimum z-coordinate")
    z_max: float = Field(1.0, strict=True, allow_inf_nan=False, description="Maximum z-coordinate")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def validate_extents(self) -> DomainConfig:
        """Validate extent ordering with the same rules as CartesianGeometry."""
        self.to_geometry()
        return self

    def to_geometry(self) -> CartesianGeometry:
        """Build the CartesianGeometry described by this configuration."""
        return CartesianGeometry(self.x_min, self.x_max, self.y_min, self.y_max, self.z_min, self.z_max)

    @classmethod
    def from_geometry(cls, geometry: CartesianGeometry) -> DomainConfig:
        """Create a configuration reproducing an existing geometry."""
        return cls(
            x_min=float(geometry.x_min),
            x_max=float(geometry.x_max),
            y_min=float(geometry.y_min),
            y_max=float(geometry.y_max),
            z_min=float(geometry.z_min),
            z_max=float(geometry.z_max),
        )


class GeometryConfig(BaseModel):
    """
    Top-level configuration: domain extents plus logging settings.

    Attributes
    ----------
    domain : DomainConfig
        Cartesian domain extents
    logging : LoggingConfig
        Logging settings applied by ``load_geometry``
    boundary_labels : dict[str, str]
        Optional user labels keyed by boundary name or alias (e.g.
        ``{"left": "inflow"}``); keys must name a boundary of the domain
    """

    domain: DomainConfig = Field(default_factory=DomainConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    boundary_labels: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_boundary_labels(self) -> GeometryConfig:
        """Check every label key resolves to a distinct boundary of the domain."""
        geometry = self.domain.to_geometry()
        seen: dict[Boundary, str] = {}
        for name in self.boundary_labels:
            try:
                boundary = geometry.resolve_boundary(name)
            except UnknownBoundaryError as e:
                # pydantic only collects ValueError/AssertionError
                raise ValueError(str(e)) from e
            if boundary in seen:
                raise ValueError(
                    f"Boundary labels '{seen[boundary]}' and '{name}' both name boundary '{boundary}'; keep only one"
                )
            seen[boundary] = name
        return self

    def resolved_boundary_labels(self) -> dict[Boundary, str]:
        """Boundary labels keyed by canonical boundary name."""
        geometry = self.domain.to_geometry()
        return {geometry.resolve_boundary(name): label for name, label in self.boundary_labels.items()}

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        from .io import save_geometry_config

        save_geometry_config(self, Path(path))
