"""
Square Validator — проверка четырёх точек на квадрат

Только точная целочисленная арифметика на квадратах расстояний
(никакого float): результат воспроизводим на любой платформе.

Условия квадрата для отсортированных 6 попарных квадратов расстояний d:
1. d[0] > 0 (вершины различны)
2. d[0] == d[1] == d[2] == d[3] (четыре стороны)
3. d[4] == d[5] (две диагонали)
4. d[4] == 2 * d[0] (диагональ² = 2 · сторона²)
"""

from itertools import combinations
from typing import Sequence

from src.core.domain.point import Coord


def squared_distance(a: Coord, b: Coord) -> int:
    """
    Квадрат евклидова расстояния между точками.

    Args:
        a: Первая точка (x, y)
        b: Вторая точка (x, y)

    Returns:
        (ax - bx)² + (ay - by)², целое число

    Examples:
        >>> squared_distance((0, 0), (3, 4))
        25
    """
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def is_square(points: Sequence[Coord]) -> bool:
    """
    Проверка, образуют ли четыре точки квадрат.

    Отсекает ромбы, прямоугольники, трапеции и вырожденные
    четвёрки с совпадающими точками.

    Args:
        points: Ровно четыре точки (x, y) в любом порядке

    Returns:
        True если точки — вершины квадрата; False для любого
        другого числа точек или формы
    """
    if len(points) != 4:
        return False

    d = sorted(squared_distance(a, b) for a, b in combinations(points, 2))

    return (
        d[0] > 0
        and d[0] == d[1] == d[2] == d[3]
        and d[4] == d[5]
        and d[4] == 2 * d[0]
    )
