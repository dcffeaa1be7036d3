"""
Membership Index — индекс существования точки по точным координатам

Строится один раз на вызов из нормализованных точек, до генерации
кандидатов. После построения только читается, поэтому один экземпляр
можно разделять между воркерами параллельного перебора пар.
"""

from typing import FrozenSet, Iterable

from src.core.domain.point import Coord


class MembershipIndex:
    """
    Множество координат (x, y) с проверкой существования за O(1).

    Пример:
        >>> index = MembershipIndex([(0, 0), (1, 0)])
        >>> index.contains(1, 0)
        True
        >>> (2, 2) in index
        False
    """

    __slots__ = ("_coords",)

    def __init__(self, coords: Iterable[Coord]):
        self._coords: FrozenSet[Coord] = frozenset(coords)

    def contains(self, x: int, y: int) -> bool:
        """
        Проверка существования точки с координатами (x, y).

        Args:
            x: Координата X
            y: Координата Y

        Returns:
            True если точка есть в снапшоте
        """
        return (x, y) in self._coords

    def __contains__(self, coord: object) -> bool:
        return coord in self._coords

    def __len__(self) -> int:
        return len(self._coords)

    def __repr__(self) -> str:
        return f"MembershipIndex(size={len(self._coords)})"
