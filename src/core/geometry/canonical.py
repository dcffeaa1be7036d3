"""
Canonicalizer / Deduplicator — канонический ключ квадрата и множество результатов

Канонический ключ: четыре вершины, отсортированные по x, затем по y,
в виде кортежа пар (x, y). Кортеж hashable и сравним, поэтому:
- один и тот же квадрат, найденный через любую сторону, даёт один ключ
- множество ключей само выполняет дедупликацию
- ключ без потерь декодируется обратно в вершины

SquareResultSet живёт в пределах одного вызова подсчёта; шарды разных
воркеров объединяются через merge (обычное объединение множеств).
"""

from typing import Iterable, Iterator, List, Sequence, Set, Tuple

from src.core.domain.point import Coord, Point
from src.core.domain.square import Square


CanonicalKey = Tuple[Coord, Coord, Coord, Coord]


def canonical_key(points: Sequence[Coord]) -> CanonicalKey:
    """
    Канонический ключ квадрата.

    Args:
        points: Четыре вершины в любом порядке

    Returns:
        Вершины по возрастанию (x, y)

    Raises:
        ValueError: Если вершин не четыре
    """
    if len(points) != 4:
        raise ValueError(f"canonical key requires exactly 4 points, got {len(points)}")
    return tuple(sorted(points))


def decode_key(key: CanonicalKey) -> Tuple[Point, Point, Point, Point]:
    """Вершины квадрата из канонического ключа"""
    return tuple(Point.from_tuple(c) for c in key)


class SquareResultSet:
    """
    Множество канонических ключей различных квадратов.

    Заполняется монотонно: повторная вставка ключа — no-op.
    """

    __slots__ = ("_keys",)

    def __init__(self, keys: Iterable[CanonicalKey] = ()):
        self._keys: Set[CanonicalKey] = set(keys)

    def add(self, points: Sequence[Coord]) -> bool:
        """
        Вставка подтверждённого квадрата.

        Args:
            points: Четыре вершины квадрата в порядке обнаружения

        Returns:
            True если квадрат новый, False если уже был найден через другую сторону
        """
        key = canonical_key(points)
        if key in self._keys:
            return False
        self._keys.add(key)
        return True

    def merge(self, other: "SquareResultSet") -> "SquareResultSet":
        """Объединение с шардом другого воркера (in-place, возвращает self)"""
        self._keys |= other._keys
        return self

    def keys(self) -> List[CanonicalKey]:
        """Канонические ключи в детерминированном (отсортированном) порядке"""
        return sorted(self._keys)

    def squares(self) -> List[Square]:
        """Найденные квадраты в порядке канонических ключей"""
        return [Square(points=decode_key(key)) for key in self.keys()]

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[CanonicalKey]:
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareResultSet):
            return NotImplemented
        return self._keys == other._keys

    def __repr__(self) -> str:
        return f"SquareResultSet(count={len(self._keys)})"
