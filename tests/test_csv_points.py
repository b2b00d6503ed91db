"""Tests for CSV point import and export."""

import io

import pytest

from spaceviz.geom import Point, PointCloud
from spaceviz.io import FormatError, load_points_csv, save_points_csv
from spaceviz.sampler import sample_cloud


def write(tmp_path, text, name="points.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_basic(tmp_path):
    path = write(tmp_path, "X,Y,Z\n0,0,0\n1.5,2,-3.25\n")
    cloud = load_points_csv(path)
    assert list(cloud) == [Point(0, 0, 0), Point(1.5, 2, -3.25)]


def test_header_is_always_skipped(tmp_path):
    path = write(tmp_path, "1,2,3\n4,5,6\n")
    assert list(load_points_csv(path)) == [Point(4, 5, 6)]


def test_header_only(tmp_path):
    assert len(load_points_csv(write(tmp_path, "X,Y,Z\n"))) == 0


def test_empty_file_is_an_error(tmp_path):
    with pytest.raises(FormatError) as exc_info:
        load_points_csv(write(tmp_path, ""))
    assert exc_info.value.row == 1


def test_blank_rows_are_ignored(tmp_path):
    path = write(tmp_path, "X,Y,Z\n\n1,2,3\n   \n4,5,6\n")
    assert len(load_points_csv(path)) == 2


def test_extra_fields_are_ignored(tmp_path):
    path = write(tmp_path, "X,Y,Z,label\n1,2,3,first\n")
    assert list(load_points_csv(path)) == [Point(1, 2, 3)]


def test_whitespace_around_numbers(tmp_path):
    path = write(tmp_path, "X,Y,Z\n 1 , 2 ,3\n")
    assert list(load_points_csv(path)) == [Point(1, 2, 3)]


def test_short_row_reports_row_number(tmp_path):
    path = write(tmp_path, "X,Y,Z\n1,2,3\n4,5\n")
    with pytest.raises(FormatError) as exc_info:
        load_points_csv(path)
    assert exc_info.value.row == 3
    assert "row 3" in str(exc_info.value)


def test_non_numeric_field(tmp_path):
    path = write(tmp_path, "X,Y,Z\n1,two,3\n")
    with pytest.raises(FormatError) as exc_info:
        load_points_csv(path)
    assert exc_info.value.row == 2
    assert "'two'" in str(exc_info.value)


@pytest.mark.parametrize("field", ["1_000", "1_0.5", "1e1_0"])
def test_digit_group_underscores_are_rejected(tmp_path, field):
    path = write(tmp_path, f"X,Y,Z\n0,0,0\n1,{field},3\n")
    with pytest.raises(FormatError) as exc_info:
        load_points_csv(path)
    assert exc_info.value.row == 3
    assert f"invalid y value {field!r}" in str(exc_info.value)


def test_format_error_is_a_value_error():
    assert issubclass(FormatError, ValueError)


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_points_csv(tmp_path / "nope.csv")


def test_load_from_stream():
    cloud = load_points_csv(io.StringIO("X,Y,Z\n7,8,9\n"))
    assert list(cloud) == [Point(7, 8, 9)]


def test_save_format(tmp_path):
    path = tmp_path / "out.csv"
    save_points_csv(PointCloud([Point(0, 0.5, -1), Point(0.1, 1e-20, 3)]), path)
    assert path.read_text(encoding="utf-8") == "X,Y,Z\n0.0,0.5,-1.0\n0.1,1e-20,3.0\n"


def test_save_to_stream():
    stream = io.StringIO()
    save_points_csv(PointCloud([Point(1, 2, 3)]), stream)
    assert stream.getvalue() == "X,Y,Z\n1.0,2.0,3.0\n"


def test_save_then_load_is_exact(tmp_path):
    path = tmp_path / "sample.csv"
    cloud = sample_cloud()
    save_points_csv(cloud, path)
    assert load_points_csv(path) == cloud


def test_nothing_written_when_serialization_fails(tmp_path):
    class Broken(PointCloud):
        def __iter__(self):
            yield Point(1, 2, 3)
            raise RuntimeError("boom")

    path = tmp_path / "partial.csv"
    with pytest.raises(RuntimeError):
        save_points_csv(Broken(), path)
    assert not path.exists()
