"""Contour extraction (meandering triangles) and segment stitching."""
from contours.extractor import calc_contour, contour_line
from contours.polygons import extend_open_polyline, fill_polygons, should_fill
from contours.stitcher import Polyline, stitch
from contours.thresholds import contour_thresholds

__all__ = [
    'Polyline',
    'calc_contour',
    'contour_line',
    'contour_thresholds',
    'extend_open_polyline',
    'fill_polygons',
    'should_fill',
    'stitch',
]
