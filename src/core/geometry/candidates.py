"""
Candidate Generator — перебор пар точек как сторон квадрата

Для каждой неупорядоченной пары {p1, p2} (i < j) пара считается стороной
квадрата, и вычисляются две вершины, замыкающие квадрат с одной стороны
от ребра:

    dx = p2.x - p1.x, dy = p2.y - p1.y
    p3 = (p1.x + dy, p1.y - dx)
    p4 = (p2.x + dy, p2.y - dx)

Исследуется только один из двух поворотов; каждый квадрат всё равно
находится (до четырёх раз — по разу на сторону), поэтому дедупликация
в canonical обязательна.
"""

from typing import Iterator, Optional, Sequence, Tuple

from src.core.domain.point import Coord

from .membership import MembershipIndex


Candidate = Tuple[Coord, Coord, Coord, Coord]


def complete_square(p1: Coord, p2: Coord) -> Tuple[Coord, Coord]:
    """
    Две вершины, замыкающие квадрат на ребре p1–p2.

    Args:
        p1: Первая вершина ребра
        p2: Вторая вершина ребра

    Returns:
        (p3, p4): p3 смежна с p1, p4 смежна с p2

    Examples:
        >>> complete_square((0, 0), (0, 1))
        ((1, 0), (1, 1))
    """
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    return (p1[0] + dy, p1[1] - dx), (p2[0] + dy, p2[1] - dx)


def iter_pair_indices(
    n: int, start: int = 0, stop: Optional[int] = None
) -> Iterator[Tuple[int, int]]:
    """
    Перебор пар индексов (i, j), i < j < n, с i в диапазоне [start, stop).

    Диапазон первого индекса задаёт шард пространства пар: объединение
    непересекающихся шардов покрывает все пары ровно один раз.
    """
    if stop is None or stop > n:
        stop = n
    for i in range(max(start, 0), stop):
        for j in range(i + 1, n):
            yield i, j


def iter_candidates(
    coords: Sequence[Coord],
    index: MembershipIndex,
    start: int = 0,
    stop: Optional[int] = None,
) -> Iterator[Candidate]:
    """
    Кандидаты в квадраты, у которых обе замыкающие вершины есть в индексе.

    Args:
        coords: Нормализованные точки (x, y) в фиксированном порядке
        index: Membership Index, построенный из тех же точек
        start: Начало диапазона первого индекса пары
        stop: Конец диапазона первого индекса пары (не включительно)

    Yields:
        (p1, p2, p3, p4) — четвёрки для Square Validator
    """
    n = len(coords)
    if stop is None or stop > n:
        stop = n

    # Горячий цикл: complete_square развёрнут вручную
    for i in range(max(start, 0), stop):
        x1, y1 = coords[i]
        for j in range(i + 1, n):
            x2, y2 = coords[j]
            dx = x2 - x1
            dy = y2 - y1
            p3 = (x1 + dy, y1 - dx)
            if p3 not in index:
                continue
            p4 = (x2 + dy, y2 - dx)
            if p4 not in index:
                continue
            yield (x1, y1), (x2, y2), p3, p4
