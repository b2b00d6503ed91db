# -*- coding: utf-8 -*-
"""spaceviz: software-rendered 3D point cloud viewer.

Typical use::

    from spaceviz import FunctionEvaluator, sample, ProjectionState, compose_frame

    cloud = sample(FunctionEvaluator("sin(x) * cos(y)"), -5, 5, -5, 5, 0.2)
    frame = compose_frame(cloud, ProjectionState(), (800, 600))
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("spaceviz")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from .geom import Point, PointCloud, distance, manhattan_distance
from .expr import (
    FunctionEvaluator,
    evaluate,
    ExprError,
    ParseError,
    ArithmeticError,
    DomainError,
    UnsupportedError,
)
from .sampler import sample, sample_cloud, default_cloud
from .projection import ProjectionState, project_to_screen
from .raster import PixelBuffer
from .frame import ViewerState, compose_frame, render
from .io import load_points_csv, save_points_csv, FormatError

__all__ = [
    "__version__",
    "Point",
    "PointCloud",
    "distance",
    "manhattan_distance",
    "FunctionEvaluator",
    "evaluate",
    "ExprError",
    "ParseError",
    "ArithmeticError",
    "DomainError",
    "UnsupportedError",
    "sample",
    "sample_cloud",
    "default_cloud",
    "ProjectionState",
    "project_to_screen",
    "PixelBuffer",
    "ViewerState",
    "compose_frame",
    "render",
    "load_points_csv",
    "save_points_csv",
    "FormatError",
]
