from __future__ import annotations

from shared.errors import InvalidArgumentError


def contour_thresholds(
    n_contours: int,
    z_scale: float,
    min_contour: float,
    max_contour: float,
    *,
    descending: bool = False,
) -> list[float]:
    """
    Evenly spaced contour levels between z_scale*min_contour and z_scale*max_contour.

    Order only affects draw layering: ascending paints low levels first,
    descending paints from the top level down.
    """
    if n_contours < 1:
        msg = f'n_contours must be at least 1, got {n_contours}'
        raise InvalidArgumentError(msg)
    if not (0.0 <= min_contour <= max_contour <= 1.0):
        msg = (
            'Contour fractions must satisfy 0 <= min <= max <= 1, '
            f'got min={min_contour}, max={max_contour}'
        )
        raise InvalidArgumentError(msg)

    lo = z_scale * min_contour
    hi = z_scale * max_contour
    if n_contours == 1:
        levels = [lo]
    else:
        step = (hi - lo) / (n_contours - 1)
        levels = [lo + n * step for n in range(n_contours - 1)] + [hi]
    if descending:
        levels.reverse()
    return levels
