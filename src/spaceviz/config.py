"""
Viewer configuration.

Settings live in two dataclasses: :class:`FrameStyle` holds everything the
frame composer paints with, :class:`ViewerConfig` holds the window and
sampling defaults plus a style.  Both can be loaded from and written to
YAML.  Unknown keys are rejected rather than ignored so that a typo in a
config file is reported instead of silently falling back to a default.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

from spaceviz.projection import DEFAULT_HEIGHT, DEFAULT_SCALE, DEFAULT_WIDTH, MAX_SCALE, MIN_SCALE

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int, int]


@dataclass
class FrameStyle:
    background: Color = (240, 240, 240, 255)
    floor_grid: Color = (180, 180, 180, 160)
    xy_grid: Color = (180, 180, 220, 120)
    yz_grid: Color = (220, 180, 180, 120)
    x_axis: Color = (255, 50, 50, 255)
    y_axis: Color = (50, 255, 50, 255)
    z_axis: Color = (50, 50, 255, 255)
    x_label: Color = (255, 0, 0, 255)
    y_label: Color = (0, 255, 0, 255)
    z_label: Color = (0, 0, 255, 255)
    point_border: Color = (0, 0, 0, 255)
    point_fill: Color = (30, 144, 255, 255)
    hover_label: Color = (50, 50, 50, 255)
    point_size: int = 10
    grid_size: int = 5
    grid_step: float = 1.0
    axis_length: float = 2.0
    axis_thickness: int = 3

    def __post_init__(self):
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.type == 'Color':
                setattr(self, f.name, _color(f.name, value))
        self.point_size = _int_at_least('point_size', self.point_size, 0)
        self.grid_size = _int_at_least('grid_size', self.grid_size, 0)
        self.axis_thickness = _int_at_least('axis_thickness', self.axis_thickness, 1)
        self.grid_step = _positive('grid_step', self.grid_step)
        self.axis_length = _positive('axis_length', self.axis_length)


@dataclass
class ViewerConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    scale: float = DEFAULT_SCALE
    x_min: float = -5.0
    x_max: float = 5.0
    y_min: float = -5.0
    y_max: float = 5.0
    step: float = 0.2
    style: FrameStyle = field(default_factory=FrameStyle)

    def __post_init__(self):
        self.width = _int_at_least('width', self.width, 1)
        self.height = _int_at_least('height', self.height, 1)
        self.scale = _number('scale', self.scale)
        if not MIN_SCALE <= self.scale <= MAX_SCALE:
            raise ValueError(f"scale must be within [{MIN_SCALE}, {MAX_SCALE}], got {self.scale}")
        for name in ('x_min', 'x_max', 'y_min', 'y_max'):
            setattr(self, name, _number(name, getattr(self, name)))
        self.step = _positive('step', self.step)
        if isinstance(self.style, dict):
            self.style = _build(FrameStyle, self.style, 'style')
        elif not isinstance(self.style, FrameStyle):
            raise ValueError(f"style must be a mapping, got {type(self.style).__name__}")

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form suitable for ``yaml.safe_dump``."""
        data = dataclasses.asdict(self)
        for key, value in data['style'].items():
            if isinstance(value, tuple):
                data['style'][key] = list(value)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ViewerConfig":
        return _build(cls, data, None)


def _number(name, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return float(value)


def _positive(name, value) -> float:
    value = _number(name, value)
    if not value > 0 or value == float('inf'):
        raise ValueError(f"{name} must be a finite positive number, got {value!r}")
    return value


def _int_at_least(name, value, minimum) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


def _color(name, value) -> Color:
    if not isinstance(value, (list, tuple)) or len(value) not in (3, 4):
        raise ValueError(f"{name} must be an RGB or RGBA list, got {value!r}")
    channels = list(value) + ([255] if len(value) == 3 else [])
    for c in channels:
        if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
            raise ValueError(f"{name} channels must be integers in [0, 255], got {value!r}")
    return tuple(channels)


def _build(cls, data, section):
    if data is None:
        data = {}
    where = f" in [{section}]" if section else ""
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping{where}, got {type(data).__name__}")
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"unknown configuration key(s){where}: {', '.join(map(str, unknown))}")
    return cls(**data)


def load_config(path: Union[str, Path, None] = None) -> ViewerConfig:
    """Read a YAML config file and merge it onto the defaults.

    ``None`` returns the defaults.  An empty file is the same as no file.
    """
    if path is None:
        return ViewerConfig()

    with open(path, 'r', encoding='utf-8') as fp:
        try:
            data = yaml.safe_load(fp)
        except yaml.YAMLError as exc:
            raise ValueError(f"{path}: invalid YAML: {exc}") from exc

    config = ViewerConfig.from_dict(data)
    logger.debug("loaded config from %s", path)
    return config


def save_config(config: ViewerConfig, path: Union[str, Path]) -> None:
    text = yaml.safe_dump(config.to_dict(), sort_keys=False)
    Path(path).write_text(text, encoding='utf-8')
