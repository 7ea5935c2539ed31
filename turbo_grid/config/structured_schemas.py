"""
Structured Configuration Schemas for turbo_grid using OmegaConf.

The dataclasses below give OmegaConf static type information, so loaded
configs are type-checked on merge and autocomplete in editors.

NAMING CONVENTION
=================
OmegaConf dataclass schemas use the `*Schema` suffix to distinguish them from
the Pydantic `*Config` classes in `core.py`:

- **Pydantic** (`core.py`): `*Config` suffix - Runtime validation, API safety
- **OmegaConf** (`structured_schemas.py`): `*Schema` suffix - YAML composition, overrides

Usage:
    schema = OmegaConf.structured(GeometrySchema)
    file_conf = OmegaConf.load("domain.yaml")
    conf: GeometrySchema = OmegaConf.merge(schema, file_conf)
    print(conf.domain.x_max)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from omegaconf import DictConfig, OmegaConf

from turbo_grid.utils.turbo_logging import get_logger

from .core import GeometryConfig

logger = get_logger(__name__)


@dataclass
class DomainSchema:
    """Cartesian domain extents schema."""

    x_min: float = 0.0
    x_max: float = 1.0
    y_min: float = 0.0
    y_max: float = 1.0
    z_min: float = 0.0
    z_max: float = 1.0


@dataclass
class LoggingSchema:
    """Logging configuration schema."""

    level: str = "INFO"
    use_colors: bool = True
    log_to_file: bool = False
    log_file_path: Optional[str] = None
    include_location: bool = False


@dataclass
class GeometrySchema:
    """Complete geometry configuration schema."""

    domain: DomainSchema = field(default_factory=DomainSchema)
    logging: LoggingSchema = field(default_factory=LoggingSchema)
    boundary_labels: dict[str, str] = field(default_factory=dict)


def load_structured_geometry_config(config_path: str | Path, **overrides: Any) -> DictConfig:
    """
    Load configuration using the structured schema for type safety.

    Values from the file override schema defaults; keyword overrides
    (nested dicts, e.g. ``domain={"x_max": 2.0}``) override the file.

    Args:
        config_path: Path to configuration file. A missing file falls back to
            schema defaults with a warning.
        **overrides: Configuration overrides

    Returns:
        DictConfig typed by GeometrySchema

    Raises:
        omegaconf.errors.ValidationError: If a value has the wrong type
        omegaconf.errors.ConfigKeyError: If a key is not in the schema
    """
    schema = OmegaConf.structured(GeometrySchema)

    config_path = Path(config_path)
    if config_path.exists():
        file_config = OmegaConf.load(config_path)
    else:
        logger.warning(f"Config file not found: {config_path}, using schema defaults")
        file_config = OmegaConf.create({})

    if overrides:
        file_config = OmegaConf.merge(file_config, OmegaConf.create(overrides))

    config = OmegaConf.merge(schema, file_config)
    OmegaConf.resolve(config)
    return config


def schema_to_config(config: DictConfig) -> GeometryConfig:
    """
    Convert an OmegaConf structured config into a validated GeometryConfig.

    Raises:
        pydantic.ValidationError: If the extents are not a valid box
    """
    data = OmegaConf.to_container(config, resolve=True)
    return GeometryConfig.model_validate(data)
