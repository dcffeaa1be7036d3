"""
Point Normalizer — подготовка снапшота точек

Снапшот точек рассматривается как множество:
- Дубликаты координат схлопываются (порядок первого вхождения сохраняется)
- Порядок входа не влияет на результат подсчёта
- Менее MIN_POINTS_FOR_SQUARE различных точек → квадратов нет

Невалидные элементы (None, не Point) не пропускаются молча: пропуск
исказил бы дедупликацию, поэтому сразу поднимается InvalidPointError.
"""

from typing import Final, Iterable, List

from src.core.domain.point import Point


# Квадрату нужны четыре различные вершины
MIN_POINTS_FOR_SQUARE: Final[int] = 4


class InvalidPointError(TypeError):
    """Элемент снапшота не является Point (нарушение предусловия)."""


def normalize_points(points: Iterable[Point]) -> List[Point]:
    """
    Удаление дубликатов координат из снапшота.

    Args:
        points: Произвольная последовательность точек (дубликаты, любой порядок)

    Returns:
        Список различных точек в порядке первого вхождения

    Raises:
        InvalidPointError: Если элемент равен None или не является Point
    """
    if points is None:
        raise InvalidPointError("points snapshot must not be None")

    unique: dict = {}
    for position, point in enumerate(points):
        if not isinstance(point, Point):
            raise InvalidPointError(
                f"element #{position} is {type(point).__name__}, expected Point"
            )
        unique.setdefault(point.as_tuple(), point)

    return list(unique.values())


def has_enough_points(points: List[Point]) -> bool:
    """Достаточно ли различных точек для хотя бы одного квадрата"""
    return len(points) >= MIN_POINTS_FOR_SQUARE
