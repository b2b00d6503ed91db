"""I/O utilities for spaceviz."""

from .csv_points import FormatError, load_points_csv, save_points_csv

__all__ = ['FormatError', 'load_points_csv', 'save_points_csv']
