"""
Square Counter — подсчёт различных квадратов в снапшоте точек

Конвейер (данные идут строго вперёд):
    normalize_points → MembershipIndex → iter_candidates → is_square → SquareResultSet

Алгоритм — чистая синхронная CPU-bound функция снапшота, O(n²) по парам.
Перебор пар параллелится без блокировок: индекс только читается, а шарды
результатов объединяются. Разбиение — по диапазонам первого индекса пары
с примерно равным числом пар в каждом; воркеры — процессы
(ProcessPoolExecutor), так как GIL исключает ускорение на потоках.
Результат не зависит от числа воркеров.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, List, Optional, Sequence, Tuple

from src.core.domain.point import Coord, Point

from .candidates import iter_candidates
from .canonical import SquareResultSet
from .membership import MembershipIndex
from .normalizer import InvalidPointError, has_enough_points, normalize_points
from .validator import is_square

logger = logging.getLogger(__name__)


# =============================================================================
# SHARDING
# =============================================================================


def partition_pair_space(n: int, workers: int) -> List[Tuple[int, int]]:
    """
    Разбиение диапазона первого индекса пары [0, n) на шарды.

    Строка i содержит n - 1 - i пар, поэтому границы подбираются по
    накопленному числу пар, а не по числу строк.

    Args:
        n: Количество точек
        workers: Желаемое количество шардов

    Returns:
        Непересекающиеся диапазоны (start, stop), покрывающие [0, n)

    Raises:
        ValueError: Если workers < 1
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if n <= 0:
        return []

    total_pairs = n * (n - 1) // 2
    target = total_pairs / workers if total_pairs else 0

    bounds: List[Tuple[int, int]] = []
    start = 0
    accumulated = 0
    for i in range(n):
        accumulated += n - 1 - i
        if len(bounds) < workers - 1 and accumulated >= target * (len(bounds) + 1):
            bounds.append((start, i + 1))
            start = i + 1
    if start < n:
        bounds.append((start, n))
    return bounds


def find_squares_in_range(
    coords: Sequence[Coord],
    start: int = 0,
    stop: Optional[int] = None,
    index: Optional[MembershipIndex] = None,
) -> SquareResultSet:
    """
    Квадраты, найденные через пары с первым индексом в [start, stop).

    Args:
        coords: Нормализованные точки (x, y)
        start: Начало шарда
        stop: Конец шарда (не включительно)
        index: Готовый индекс; строится из coords, если не передан

    Returns:
        Шард множества результатов
    """
    if index is None:
        index = MembershipIndex(coords)

    result = SquareResultSet()
    for candidate in iter_candidates(coords, index, start, stop):
        if is_square(candidate):
            result.add(candidate)
    return result


def _find_squares_shard(coords: List[Coord], start: int, stop: int) -> SquareResultSet:
    # Точка входа воркера: индекс строится заново в процессе воркера
    return find_squares_in_range(coords, start, stop)


# =============================================================================
# AGGREGATOR
# =============================================================================


def count_squares(points: Iterable[Point], workers: int = 1) -> SquareResultSet:
    """
    Поиск всех различных квадратов с вершинами в снапшоте.

    Args:
        points: Снапшот точек (дубликаты и порядок не важны)
        workers: Количество процессов для перебора пар (1 — в текущем процессе)

    Returns:
        SquareResultSet: len() — количество квадратов, keys()/squares() — детали

    Raises:
        InvalidPointError: Если в снапшоте есть None или не-Point элемент
        ValueError: Если workers < 1
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if points is None:
        raise InvalidPointError("points snapshot must not be None")

    snapshot = list(points)
    unique = normalize_points(snapshot)
    if not has_enough_points(unique):
        logger.debug(
            "Square count skipped: %d distinct points of %d", len(unique), len(snapshot)
        )
        return SquareResultSet()

    coords = [p.as_tuple() for p in unique]
    shards = partition_pair_space(len(coords), workers)

    if len(shards) <= 1:
        result = find_squares_in_range(coords, index=MembershipIndex(coords))
    else:
        result = SquareResultSet()
        with ProcessPoolExecutor(max_workers=len(shards)) as executor:
            futures = [
                executor.submit(_find_squares_shard, coords, start, stop)
                for start, stop in shards
            ]
            for future in futures:
                result.merge(future.result())

    logger.debug(
        "Square count: %d points, %d distinct, %d squares, %d shard(s)",
        len(snapshot),
        len(coords),
        len(result),
        max(len(shards), 1),
    )
    return result


class SquareCounter:
    """
    Подсчёт квадратов с фиксированной конфигурацией воркеров.

    Stateless между вызовами: каждый вызов работает со своим снапшотом.
    """

    def __init__(self, workers: int = 1):
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.workers = workers

    def find(self, points: Iterable[Point]) -> SquareResultSet:
        """Множество различных квадратов снапшота"""
        return count_squares(points, workers=self.workers)

    def count(self, points: Iterable[Point]) -> int:
        """Количество различных квадратов снапшота"""
        return len(self.find(points))
