"""Tests for YAML viewer configuration."""

import pytest
import yaml

from spaceviz.config import FrameStyle, ViewerConfig, load_config, save_config


def write(tmp_path, text):
    path = tmp_path / "spaceviz.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    config = load_config(None)
    assert (config.width, config.height) == (800, 600)
    assert config.scale == 50.0
    assert config.step == 0.2
    assert config.style == FrameStyle()
    assert config.style.point_size == 10


def test_empty_file_gives_defaults(tmp_path):
    assert load_config(write(tmp_path, "")) == ViewerConfig()


def test_partial_override_merges(tmp_path):
    path = write(tmp_path, "width: 1024\nstyle:\n  point_size: 4\n  point_fill: [10, 20, 30]\n")
    config = load_config(path)
    assert config.width == 1024
    assert config.height == 600
    assert config.style.point_size == 4
    assert config.style.point_fill == (10, 20, 30, 255)
    assert config.style.point_border == (0, 0, 0, 255)


def test_unknown_top_level_key(tmp_path):
    with pytest.raises(ValueError, match="colour"):
        load_config(write(tmp_path, "colour: red\n"))


def test_unknown_style_key(tmp_path):
    with pytest.raises(ValueError, match=r"\[style\]"):
        load_config(write(tmp_path, "style:\n  dot_size: 3\n"))


@pytest.mark.parametrize("text", [
    "width: 0\n",
    "width: wide\n",
    "scale: 1000\n",
    "step: 0\n",
    "step: -0.5\n",
    "x_min: [1]\n",
    "style:\n  point_size: -1\n",
    "style:\n  point_fill: [1, 2]\n",
    "style:\n  point_fill: [1, 2, 300]\n",
    "style:\n  grid_step: 0\n",
    "style: 5\n",
    "- just\n- a list\n",
])
def test_bad_values(tmp_path, text):
    with pytest.raises(ValueError):
        load_config(write(tmp_path, text))


def test_invalid_yaml(tmp_path):
    with pytest.raises(ValueError, match="invalid YAML"):
        load_config(write(tmp_path, "width: [1, 2\n"))


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_config(tmp_path / "absent.yaml")


def test_save_and_reload(tmp_path):
    config = ViewerConfig(width=640, style=FrameStyle(point_size=6))
    path = tmp_path / "saved.yaml"
    save_config(config, path)
    assert load_config(path) == config


def test_to_dict_is_plain_yaml():
    data = ViewerConfig().to_dict()
    assert list(data)[:3] == ["width", "height", "scale"]
    assert data["style"]["background"] == [240, 240, 240, 255]
    assert yaml.safe_load(yaml.safe_dump(data)) == data
