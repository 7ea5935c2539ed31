"""
YAML I/O for geometry configurations.

This module provides functions to load and save geometry configurations
from/to YAML files with schema validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from turbo_grid.utils.turbo_logging import get_logger, log_domain_summary, log_validation_error

from .core import GeometryConfig

if TYPE_CHECKING:
    from turbo_grid.geometry.cartesian import CartesianGeometry

logger = get_logger(__name__)


def load_geometry_config(path: str | Path) -> GeometryConfig:
    """
    Load geometry configuration from YAML file.

    Parameters
    ----------
    path : str | Path
        Path to YAML configuration file

    Returns
    -------
    GeometryConfig
        Validated geometry configuration

    Raises
    ------
    FileNotFoundError
        If configuration file doesn't exist
    ValueError
        If configuration is invalid (bad extents, unknown keys)
    yaml.YAMLError
        If YAML syntax is invalid

    YAML Format
    -----------
    domain:
      x_min: 0.0
      x_max: 1.0
      y_min: -1.0
      y_max: 1.0
      z_min: 4.0
      z_max: 5.5
    logging:
      level: INFO
    boundary_labels:
      left: inflow
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {path}\nPlease create a YAML configuration file or use programmatic config."
        )

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML syntax in {path}: {e}") from e

    if data is None:
        data = {}

    try:
        config = GeometryConfig.model_validate(data)
    except ValidationError as e:
        log_validation_error(logger, "GeometryConfig", f"{path}: {e.error_count()} error(s)")
        raise ValueError(f"Invalid configuration in {path}:\n{e}") from e

    logger.debug(f"Loaded geometry configuration from {path}")
    return config


def save_geometry_config(config: GeometryConfig, path: str | Path) -> None:
    """
    Save geometry configuration to YAML file.

    Parameters
    ----------
    config : GeometryConfig
        Configuration to save
    path : str | Path
        Output file path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(exclude_none=True, mode="json")

    with open(path, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, indent=2, allow_unicode=True)

    logger.debug(f"Saved geometry configuration to {path}")


def validate_yaml_config(path: str | Path) -> tuple[bool, str]:
    """
    Validate YAML configuration without keeping the result.

    Parameters
    ----------
    path : str | Path
        Path to YAML configuration file

    Returns
    -------
    tuple[bool, str]
        (is_valid, message) - True if valid, False with error message otherwise
    """
    try:
        load_geometry_config(path)
        return True, "Configuration is valid"
    except FileNotFoundError as e:
        return False, str(e)
    except yaml.YAMLError as e:
        return False, f"YAML syntax error: {e}"
    except ValueError as e:
        return False, f"Validation error: {e}"


def load_geometry(path: str | Path, apply_logging: bool = True) -> CartesianGeometry:
    """
    Load a configuration file and build its geometry.

    Parameters
    ----------
    path : str | Path
        Path to YAML configuration file
    apply_logging : bool
        Apply the file's logging section before building (default: True)

    Returns
    -------
    CartesianGeometry
        Geometry described by the file's ``domain`` section
    """
    config = load_geometry_config(path)
    if apply_logging:
        config.logging.apply()

    geometry = config.domain.to_geometry()
    log_domain_summary(logger, geometry)
    return geometry
