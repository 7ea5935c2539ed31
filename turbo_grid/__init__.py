from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("turbo-grid")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .geometry import (  # noqa: E402
    Boundary,
    CartesianGeometry,
    Geometry,
    GeometryProtocol,
    GeometryType,
)
from .utils.exceptions import GeometryError, InvalidDomainExtentsError, UnknownBoundaryError  # noqa: E402

__all__ = [
    "Boundary",
    "CartesianGeometry",
    "Geometry",
    "GeometryError",
    "GeometryProtocol",
    "GeometryType",
    "InvalidDomainExtentsError",
    "UnknownBoundaryError",
    "__version__",
]
