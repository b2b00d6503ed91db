"""CSV import and export of point clouds.

The format is a header row followed by one ``x,y,z`` row per point::

    X,Y,Z
    0.0,0.0,0.0
    1.5,2.0,-3.25

The header is always skipped on load and its contents are not checked.
Fields are plain decimal or scientific numbers; digit-group underscores
(``1_000``) are rejected.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import List

from spaceviz.geom import Point, PointCloud

logger = logging.getLogger(__name__)

HEADER = ('X', 'Y', 'Z')


class FormatError(ValueError):
    """A CSV row that cannot be read as a point.  ``row`` is 1-based."""

    def __init__(self, message: str, row: int):
        super().__init__(f"row {row}: {message}")
        self.row = row


def _parse_rows(stream) -> PointCloud:
    reader = csv.reader(stream)
    try:
        next(reader)
    except StopIteration:
        raise FormatError("missing header row", 1) from None

    points: List[Point] = []
    for record in reader:
        row = reader.line_num
        if not record or all(not field.strip() for field in record):
            continue
        if len(record) < 3:
            raise FormatError(f"expected 3 fields, found {len(record)}", row)
        coords = []
        for axis, field in zip('xyz', record[:3]):
            try:
                if '_' in field:
                    raise ValueError(field)
                coords.append(float(field))
            except ValueError:
                raise FormatError(f"invalid {axis} value {field.strip()!r}", row) from None
        points.append(Point(*coords))

    return PointCloud(points)


def load_points_csv(path_or_file) -> PointCloud:
    """Read a point cloud from ``path_or_file``, a filesystem path or an open text stream.

    Raises :class:`FormatError` for a row that is short or holds a
    non-numeric coordinate; nothing is returned in that case.
    """

    if hasattr(path_or_file, 'read'):
        cloud = _parse_rows(path_or_file)
    else:
        with open(path_or_file, 'r', newline='', encoding='utf-8') as stream:
            cloud = _parse_rows(stream)

    logger.info("loaded %d points", len(cloud))
    return cloud


def save_points_csv(cloud: PointCloud, path_or_file) -> None:
    """Write ``cloud`` as CSV to a filesystem path or an open text stream."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(HEADER)
    for p in cloud:
        writer.writerow((repr(float(p.x)), repr(float(p.y)), repr(float(p.z))))
    text = buffer.getvalue()

    if hasattr(path_or_file, 'write'):
        path_or_file.write(text)
    else:
        with open(path_or_file, 'w', newline='', encoding='utf-8') as stream:
            stream.write(text)

    logger.info("saved %d points", len(cloud))
