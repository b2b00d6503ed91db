"""Tests for the command-line entry point (window never opened)."""

import logging

import pytest

from spaceviz.__main__ import build_parser, main
from spaceviz.io import load_points_csv
from spaceviz.sampler import sample_cloud


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("spaceviz")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_generate_writes_sample(tmp_path, capsys):
    path = tmp_path / "sample.csv"
    assert main(["--generate", str(path)]) == 0
    assert load_points_csv(path) == sample_cloud()
    assert "generated successfully" in capsys.readouterr().out


def test_default_points_print_distances(capsys):
    assert main(["--no-window"]) == 0
    out = capsys.readouterr().out
    assert "Distance p1 to p2: 5.00" in out
    assert "Distance p2 to p3: 5.00" in out
    assert "Manhattan distance p1 to p3: 12.00" in out


def test_csv_mode(tmp_path, capsys):
    path = tmp_path / "pts.csv"
    path.write_text("X,Y,Z\n1,2,3\n4,5,6\n", encoding="utf-8")
    assert main(["--csv", str(path), "--no-window"]) == 0
    assert "Loaded 2 points" in capsys.readouterr().out


def test_function_mode(capsys):
    assert main(["--function", "x + y", "--xmin", "0", "--xmax", "1",
                 "--ymin", "0", "--ymax", "1", "--step", "1", "--no-window"]) == 0
    out = capsys.readouterr().out
    assert "Range: x=[0.00, 1.00], y=[0.00, 1.00], step=1.00" in out
    assert "Generated 4 points" in out


def test_function_ranges_default_from_config(tmp_path, capsys):
    config = tmp_path / "cfg.yaml"
    config.write_text("x_min: 0\nx_max: 2\ny_min: 0\ny_max: 2\nstep: 1\n", encoding="utf-8")
    assert main(["--function", "x", "--config", str(config), "--no-window"]) == 0
    assert "Generated 9 points" in capsys.readouterr().out


def test_bad_csv_exits_1(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text("X,Y,Z\n1,2\n", encoding="utf-8")
    assert main(["--csv", str(path), "--no-window"]) == 1
    assert "row 2" in capsys.readouterr().err


def test_missing_csv_exits_1(tmp_path, capsys):
    assert main(["--csv", str(tmp_path / "none.csv"), "--no-window"]) == 1
    assert capsys.readouterr().err.startswith("spaceviz: error:")


def test_bad_expression_exits_1(capsys):
    assert main(["--function", "x +", "--no-window"]) == 1
    assert "E102" in capsys.readouterr().err


def test_bad_step_exits_1(capsys):
    assert main(["--function", "x", "--step", "0", "--no-window"]) == 1
    assert "step" in capsys.readouterr().err


def test_bad_config_exits_1(tmp_path, capsys):
    config = tmp_path / "cfg.yaml"
    config.write_text("bogus: 1\n", encoding="utf-8")
    assert main(["--config", str(config), "--no-window"]) == 1
    assert "bogus" in capsys.readouterr().err


def test_modes_are_mutually_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--csv", "a.csv", "--function", "x"])


def test_log_file(tmp_path):
    log = tmp_path / "run.log"
    assert main(["--no-window", "--log-level", "debug", "--log-file", str(log)]) == 0
    assert "spaceviz" in log.read_text(encoding="utf-8")
