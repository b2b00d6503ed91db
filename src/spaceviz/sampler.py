"""Grid sampling of ``z = f(x, y)`` into point clouds."""

from __future__ import annotations

import logging
import math
from typing import Callable, Union

from spaceviz.expr import ExprError, FunctionEvaluator
from spaceviz.geom import Point, PointCloud

logger = logging.getLogger(__name__)

SampleFunction = Callable[[float, float], float]


def _check_range(name: str, lo: float, hi: float, step: float) -> None:
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise ValueError(f"{name} range must be finite, got [{lo}, {hi}]")
    # a step that vanishes against the coordinate magnitude never advances
    magnitude = max(abs(lo), abs(hi))
    if magnitude + step == magnitude:
        raise ValueError(f"step {step} is too small for {name} range [{lo}, {hi}]")


def sample(evaluator: Union[SampleFunction, str], x_min: float, x_max: float,
           y_min: float, y_max: float, step: float) -> PointCloud:
    """Sample ``evaluator`` over an inclusive grid and return a height field.

    ``evaluator`` is a :class:`FunctionEvaluator`, expression text, or any
    callable ``(x, y) -> float`` that signals failure with
    :class:`~spaceviz.expr.ExprError`.  Each successful cell becomes the
    point ``(x, z, y)``: the sampled value occupies the vertical slot.
    Failed cells are skipped.

    Raises ``ValueError`` for a step that is not a finite positive number or
    for non-finite bounds.
    """

    if isinstance(evaluator, str):
        evaluator = FunctionEvaluator(evaluator)
    if not (isinstance(step, (int, float)) and math.isfinite(step) and step > 0):
        raise ValueError(f"step must be a finite positive number, got {step!r}")
    _check_range("x", x_min, x_max, step)
    _check_range("y", y_min, y_max, step)

    cloud = PointCloud()
    skipped = 0
    first_error = None

    x = x_min
    while x <= x_max:
        y = y_min
        while y <= y_max:
            try:
                z = evaluator(x, y)
            except ExprError as exc:
                skipped += 1
                if first_error is None:
                    first_error = exc
            else:
                cloud.add(Point(x, z, y))
            y += step
        x += step

    if skipped:
        logger.debug("skipped %d of %d cells; first failure: %s",
                     skipped, skipped + len(cloud), first_error.diagnostic.message)
    logger.info("sampled %d points", len(cloud))
    return cloud


def default_cloud() -> PointCloud:
    """The three fallback points shown when no data source is given."""

    return PointCloud([
        Point(0, 0, 0),
        Point(3, 4, 0),
        Point(3, 4, 5),
    ])


def sample_cloud() -> PointCloud:
    """Demo cloud: the unit-cube corners followed by a rising helix."""

    cloud = PointCloud([
        Point(0, 0, 0),
        Point(1, 0, 0),
        Point(0, 1, 0),
        Point(0, 0, 1),
        Point(1, 1, 0),
        Point(1, 0, 1),
        Point(0, 1, 1),
        Point(1, 1, 1),
    ])

    t = 0.0
    while t < 10:
        cloud.add(Point(math.cos(t), math.sin(t), t / 3))
        t += 0.1
    return cloud
