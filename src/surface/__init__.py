"""Point cloud, elevation function and triangulated surface."""
from surface.builder import build, build_surface
from surface.geometry import Bounds, Point2, Point3, Segment, Triangle3D
from surface.point_cloud import expand_bounds, sample, sample_bounds
from surface.scalar_field import ScalarField, elevation, elevation_fn
from surface.triangulation import triangulate

__all__ = [
    'Bounds',
    'Point2',
    'Point3',
    'ScalarField',
    'Segment',
    'Triangle3D',
    'build',
    'build_surface',
    'elevation',
    'elevation_fn',
    'expand_bounds',
    'sample',
    'sample_bounds',
    'triangulate',
]
