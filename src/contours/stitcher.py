"""
Сшивка сегментов изолинии в полилинии.

Сегменты одного уровня приходят неупорядоченным набором (по одному на
треугольник). Цепочка начинается с последнего свободного сегмента и
наращивается с обоих концов: на каждом шаге ищется свободный сегмент, у
которого один из концов ближе `tolerance` к концу (head) или началу (tail)
цепочки; в цепочку добавляется только *другой* конец сегмента, поэтому
точки стыков не дублируются. Цепочка закрывается, когда за один шаг не
нашлось ни head-, ни tail-совпадения.

Вместо линейного просмотра пула на каждом шаге концы сегментов разложены
по корзинам пространственного хеша (размер ячейки = tolerance), так что
поиск смотрит только 3x3 соседних ячейки. Результат совпадает с линейным
просмотром при той же политике выбора (TieBreak).
"""

from __future__ import annotations

import logging
import math
import time
from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shared.constants import DEFAULT_TIE_BREAK, MIN_POINTS_FOR_POLYLINE, TieBreak
from shared.errors import InvalidArgumentError
from surface.geometry import Point2, distance

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

logger = logging.getLogger(__name__)


@dataclass
class Polyline:
    """Chained contour points plus the input segments that formed them."""

    points: list[Point2]
    segment_ids: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point2]:
        return iter(self.points)

    def is_closed(self, tolerance: float) -> bool:
        """First and last points coincide within `tolerance`."""
        if len(self.points) <= MIN_POINTS_FOR_POLYLINE:
            return False
        return distance(self.points[0], self.points[-1]) < tolerance


class _EndpointIndex:
    """Spatial hash of segment endpoints: cell -> [(segment idx, endpoint pos)]."""

    def __init__(self, segments: Sequence[Sequence[Point2]], cell: float) -> None:
        self._cell = cell
        self._buckets: dict[tuple[int, int], list[tuple[int, int]]] = defaultdict(list)
        for idx, seg in enumerate(segments):
            for pos in (0, 1):
                self._buckets[self._key(seg[pos])].append((idx, pos))

    def _key(self, p: Sequence[float]) -> tuple[int, int]:
        return math.floor(p[0] / self._cell), math.floor(p[1] / self._cell)

    def candidates(self, p: Sequence[float]) -> Iterator[tuple[int, int]]:
        kx, ky = self._key(p)
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                yield from self._buckets.get((kx + dx, ky + dy), ())


class _SegmentPool:
    """Arena of input segments with consumed flags."""

    def __init__(
        self,
        segments: Sequence[Sequence[Point2]],
        tolerance: float,
        tie_break: TieBreak,
    ) -> None:
        self.segments = [(Point2(*a), Point2(*b)) for a, b in segments]
        self.tolerance = tolerance
        self.tie_break = tie_break
        self.consumed = [False] * len(self.segments)
        self._index = _EndpointIndex(self.segments, tolerance)
        self._next_seed = len(self.segments) - 1

    def pop_seed(self) -> int | None:
        """Index of the last unconsumed segment (marked consumed), or None."""
        while self._next_seed >= 0:
            idx = self._next_seed
            self._next_seed -= 1
            if not self.consumed[idx]:
                self.consumed[idx] = True
                return idx
        return None

    def take_match(self, anchor: Point2) -> tuple[int, Point2] | None:
        """
        Consume a segment touching `anchor` and return (idx, its other endpoint).

        POOL_ORDER keeps the latest matching segment in input order; NEAREST
        keeps the closest matching endpoint and falls back to input order on
        equal distances. Within one segment the start point is tried first.
        """
        best_idx = -1
        best_pos = -1
        best_d = math.inf
        nearest = self.tie_break is TieBreak.NEAREST
        for idx, pos in self._index.candidates(anchor):
            if self.consumed[idx]:
                continue
            d = distance(anchor, self.segments[idx][pos])
            if d >= self.tolerance:
                continue
            later = idx > best_idx or (idx == best_idx and pos < best_pos)
            if nearest:
                better = d < best_d or (d == best_d and later)
            else:
                better = later
            if better:
                best_idx, best_pos, best_d = idx, pos, d
        if best_idx < 0:
            return None
        self.consumed[best_idx] = True
        return best_idx, self.segments[best_idx][1 - best_pos]


def stitch(
    segments: Sequence[Sequence[Point2]],
    tolerance: float,
    tie_break: TieBreak = DEFAULT_TIE_BREAK,
) -> list[Polyline]:
    """
    Chain an unordered segment bag into maximal polylines.

    Every input segment ends up in exactly one polyline (see
    Polyline.segment_ids). The input sequence is not modified.

    Args:
        segments: 2-point segments of one contour level.
        tolerance: Max distance (exclusive) for two endpoints to be joined.
        tie_break: Which segment to take when several match.

    Raises:
        InvalidArgumentError: tolerance is not positive.

    """
    if not tolerance > 0.0:
        msg = f'Stitch tolerance must be positive, got {tolerance}'
        raise InvalidArgumentError(msg)

    tie_break = TieBreak(tie_break)
    start = time.monotonic()
    pool = _SegmentPool(segments, tolerance, tie_break)
    polylines: list[Polyline] = []

    while True:
        seed = pool.pop_seed()
        if seed is None:
            break
        first, last = pool.segments[seed]
        points = deque([first, last])
        ids = [seed]
        while True:
            head = pool.take_match(points[-1])
            if head is not None:
                ids.append(head[0])
                points.append(head[1])

            tail = pool.take_match(points[0])
            if tail is not None:
                ids.append(tail[0])
                points.appendleft(tail[1])

            if head is None and tail is None:
                break
        polylines.append(Polyline(list(points), ids))

    logger.debug(
        'Stitched %d segments into %d polylines in %.3fs (tolerance=%s, %s)',
        len(pool.segments),
        len(polylines),
        time.monotonic() - start,
        tolerance,
        tie_break.value,
    )
    return polylines
