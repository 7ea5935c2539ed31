"""
Configuration management for turbo_grid.

Quick Start
-----------
>>> from turbo_grid.config import DomainConfig
>>> geometry = DomainConfig(x_min=0.0, x_max=2.0).to_geometry()

>>> # Or load from YAML
>>> from turbo_grid.config import load_geometry
>>> geometry = load_geometry("domains/channel.yaml")
"""

from .core import DomainConfig, GeometryConfig, LoggingConfig
from .io import load_geometry, load_geometry_config, save_geometry_config, validate_yaml_config
from .structured_schemas import (
    DomainSchema,
    GeometrySchema,
    LoggingSchema,
    load_structured_geometry_config,
    schema_to_config,
)

__all__ = [
    "DomainConfig",
    "DomainSchema",
    "GeometryConfig",
    "GeometrySchema",
    "LoggingConfig",
    "LoggingSchema",
    "load_geometry",
    "load_geometry_config",
    "load_structured_geometry_config",
    "save_geometry_config",
    "schema_to_config",
    "validate_yaml_config",
]
