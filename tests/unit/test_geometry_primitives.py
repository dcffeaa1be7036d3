"""
Тесты для примитивов геометрии: Normalizer, Membership Index,
Candidate Generator, Square Validator, Canonicalizer

Проверяет:
1. Схлопывание дубликатов и fail-fast на невалидных элементах
2. Точные запросы существования в индексе
3. Замыкающие вершины квадрата и перебор пар
4. Точную целочисленную проверку квадрата (ромбы, прямоугольники, вырожденные)
5. Канонический ключ и дедупликацию повторных обнаружений
"""

from itertools import permutations

import pytest

from src.core.domain import Point, Square
from src.core.geometry import (
    MIN_POINTS_FOR_SQUARE,
    InvalidPointError,
    MembershipIndex,
    SquareResultSet,
    canonical_key,
    complete_square,
    decode_key,
    has_enough_points,
    is_square,
    iter_candidates,
    iter_pair_indices,
    normalize_points,
    squared_distance,
)


def _points(*coords):
    return [Point.from_tuple(c) for c in coords]


UNIT_SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


# =============================================================================
# NORMALIZER
# =============================================================================


class TestNormalizePoints:
    """Тесты для normalize_points"""

    def test_duplicates_collapsed(self) -> None:
        pts = _points((0, 0), (1, 1), (0, 0), (1, 1), (2, 2))
        assert normalize_points(pts) == _points((0, 0), (1, 1), (2, 2))

    def test_first_occurrence_order_kept(self) -> None:
        pts = _points((3, 3), (1, 1), (3, 3), (2, 2))
        assert [p.as_tuple() for p in normalize_points(pts)] == [(3, 3), (1, 1), (2, 2)]

    def test_accepts_any_iterable(self) -> None:
        pts = (p for p in _points((0, 0), (0, 0)))
        assert normalize_points(pts) == _points((0, 0))

    def test_empty_input(self) -> None:
        assert normalize_points([]) == []

    def test_none_element_fails_fast(self) -> None:
        """None не пропускается молча"""
        with pytest.raises(InvalidPointError, match="element #1"):
            normalize_points([Point(x=0, y=0), None, Point(x=1, y=1)])

    def test_tuple_element_fails_fast(self) -> None:
        with pytest.raises(InvalidPointError, match="tuple"):
            normalize_points([(0, 0)])

    def test_none_snapshot_fails_fast(self) -> None:
        with pytest.raises(InvalidPointError):
            normalize_points(None)

    def test_invalid_point_error_is_type_error(self) -> None:
        assert issubclass(InvalidPointError, TypeError)

    def test_has_enough_points(self) -> None:
        assert MIN_POINTS_FOR_SQUARE == 4
        assert not has_enough_points(_points((0, 0), (1, 0), (0, 1)))
        assert has_enough_points(_points(*UNIT_SQUARE))


# =============================================================================
# MEMBERSHIP INDEX
# =============================================================================


class TestMembershipIndex:
    """Тесты для MembershipIndex"""

    @pytest.fixture
    def index(self) -> MembershipIndex:
        return MembershipIndex([(0, 0), (-1, 5), (3, -2)])

    def test_contains_exact_coordinates(self, index: MembershipIndex) -> None:
        assert index.contains(0, 0)
        assert index.contains(-1, 5)
        assert index.contains(3, -2)

    def test_missing_coordinates(self, index: MembershipIndex) -> None:
        assert not index.contains(5, -1)
        assert not index.contains(0, 1)
        assert (2, 3) not in index

    def test_in_operator(self, index: MembershipIndex) -> None:
        assert (-1, 5) in index

    def test_len_collapses_duplicates(self) -> None:
        assert len(MembershipIndex([(0, 0), (0, 0), (1, 1)])) == 2

    def test_repr(self, index: MembershipIndex) -> None:
        assert repr(index) == "MembershipIndex(size=3)"


# =============================================================================
# CANDIDATE GENERATOR
# =============================================================================


class TestCandidateGenerator:
    """Тесты для complete_square, iter_pair_indices, iter_candidates"""

    def test_complete_square_vertical_edge(self) -> None:
        assert complete_square((0, 0), (0, 1)) == ((1, 0), (1, 1))

    def test_complete_square_horizontal_edge(self) -> None:
        assert complete_square((0, 0), (1, 0)) == ((0, -1), (1, -1))

    def test_complete_square_rotated_edge(self) -> None:
        p3, p4 = complete_square((0, 0), (2, 1))
        assert (p3, p4) == ((1, -2), (3, -1))
        assert is_square([(0, 0), (2, 1), p3, p4])

    def test_complete_square_always_yields_square(self) -> None:
        """Для любого ребра ненулевой длины замыкание — квадрат"""
        for p1, p2 in [((0, 0), (3, 4)), ((-2, 5), (1, -1)), ((7, 7), (7, -3))]:
            p3, p4 = complete_square(p1, p2)
            assert is_square([p1, p2, p3, p4])

    def test_pair_indices_all_pairs_once(self) -> None:
        pairs = list(iter_pair_indices(5))
        assert len(pairs) == 10
        assert len(set(pairs)) == 10
        assert all(i < j for i, j in pairs)

    def test_pair_indices_shards_cover_space(self) -> None:
        """Непересекающиеся шарды покрывают все пары ровно один раз"""
        n = 7
        shards = [(0, 2), (2, 5), (5, 7)]
        pairs = [p for start, stop in shards for p in iter_pair_indices(n, start, stop)]
        assert sorted(pairs) == sorted(iter_pair_indices(n))

    def test_unit_square_discovered(self) -> None:
        index = MembershipIndex(UNIT_SQUARE)
        found = list(iter_candidates(UNIT_SQUARE, index))
        assert found
        for candidate in found:
            assert sorted(candidate) == sorted(UNIT_SQUARE)

    def test_every_order_discovers_square(self) -> None:
        """Квадрат находится при любом порядке вершин, но не более чем 3 раза"""
        for order in permutations(UNIT_SQUARE):
            found = list(iter_candidates(list(order), MembershipIndex(order)))
            assert 1 <= len(found) <= 3

    def test_no_candidates_without_closing_points(self) -> None:
        coords = [(0, 0), (1, 0), (5, 5)]
        assert list(iter_candidates(coords, MembershipIndex(coords))) == []

    def test_range_restricts_first_index(self) -> None:
        coords = [(0, 0), (0, 1), (1, 0), (1, 1)]
        index = MembershipIndex(coords)
        # (0, 0)-(0, 1) замыкается справа в (1, 0), (1, 1)
        assert len(list(iter_candidates(coords, index, start=0, stop=1))) == 1
        # (0, 1)-(1, 1) замыкается снизу в (0, 0), (1, 0)
        assert len(list(iter_candidates(coords, index, start=1, stop=2))) == 1
        assert list(iter_candidates(coords, index, start=2)) == []


# =============================================================================
# SQUARE VALIDATOR
# =============================================================================


class TestSquareValidator:
    """Тесты для squared_distance и is_square"""

    def test_squared_distance(self) -> None:
        assert squared_distance((0, 0), (3, 4)) == 25
        assert squared_distance((-1, -1), (1, 1)) == 8
        assert squared_distance((2, 2), (2, 2)) == 0

    def test_squared_distance_is_int(self) -> None:
        assert isinstance(squared_distance((0, 0), (1, 2)), int)

    def test_axis_aligned_square(self) -> None:
        assert is_square(UNIT_SQUARE)

    def test_rotated_square(self) -> None:
        assert is_square([(-1, -1), (1, -1), (0, 0), (0, -2)])

    def test_square_any_vertex_order(self) -> None:
        for order in permutations([(0, 0), (2, 1), (1, 3), (-1, 2)]):
            assert is_square(list(order))

    def test_rhombus_rejected(self) -> None:
        """Ромб: четыре равные стороны, но разные диагонали"""
        assert not is_square([(0, 0), (2, 1), (3, 3), (1, 2)])

    def test_rectangle_rejected(self) -> None:
        assert not is_square([(0, 1), (2, 0), (0, 0), (2, 1)])

    def test_trapezoid_rejected(self) -> None:
        assert not is_square([(2, 0), (1, 1), (1, 3), (2, 2)])

    def test_degenerate_duplicates_rejected(self) -> None:
        assert not is_square([(0, 0), (0, 0), (1, 1), (1, 1)])
        assert not is_square([(0, 0), (0, 0), (0, 0), (0, 0)])

    def test_wrong_number_of_points_rejected(self) -> None:
        assert not is_square([(0, 0), (1, 0), (1, 1)])
        assert not is_square(UNIT_SQUARE + [(2, 2)])

    def test_large_coordinates_exact(self) -> None:
        """Целочисленная арифметика без потери точности на больших координатах"""
        big = 10 ** 12
        assert is_square([(big, big), (big + 1, big), (big + 1, big + 1), (big, big + 1)])
        assert not is_square([(big, big), (big + 1, big), (big + 1, big + 2), (big, big + 1)])


# =============================================================================
# CANONICALIZER
# =============================================================================


class TestCanonicalizer:
    """Тесты для canonical_key, decode_key, SquareResultSet"""

    def test_canonical_key_sorted_by_x_then_y(self) -> None:
        assert canonical_key([(1, 1), (0, 0), (1, 0), (0, 1)]) == (
            (0, 0),
            (0, 1),
            (1, 0),
            (1, 1),
        )

    def test_canonical_key_negative_coordinates(self) -> None:
        assert canonical_key([(-1, -1), (-2, -2), (-2, -1), (-1, -2)]) == (
            (-2, -2),
            (-2, -1),
            (-1, -2),
            (-1, -1),
        )

    def test_canonical_key_order_independent(self) -> None:
        keys = {canonical_key(list(order)) for order in permutations(UNIT_SQUARE)}
        assert len(keys) == 1

    def test_canonical_key_requires_four_points(self) -> None:
        with pytest.raises(ValueError, match="exactly 4 points"):
            canonical_key([(0, 0), (1, 1)])

    def test_decode_key(self) -> None:
        key = canonical_key(UNIT_SQUARE)
        assert decode_key(key) == tuple(_points((0, 0), (0, 1), (1, 0), (1, 1)))

    def test_reinsertion_is_noop(self) -> None:
        """Повторное обнаружение того же квадрата через другую сторону"""
        result = SquareResultSet()
        assert result.add(UNIT_SQUARE) is True
        assert result.add(list(reversed(UNIT_SQUARE))) is False
        assert result.add([(1, 1), (0, 1), (0, 0), (1, 0)]) is False
        assert len(result) == 1

    def test_contains_key(self) -> None:
        result = SquareResultSet()
        result.add(UNIT_SQUARE)
        assert canonical_key(UNIT_SQUARE) in result

    def test_merge_is_union(self) -> None:
        a = SquareResultSet()
        a.add(UNIT_SQUARE)
        b = SquareResultSet()
        b.add(UNIT_SQUARE)
        b.add([(5, 5), (6, 5), (6, 6), (5, 6)])
        assert len(a.merge(b)) == 2

    def test_keys_sorted(self) -> None:
        result = SquareResultSet()
        result.add([(5, 5), (6, 5), (6, 6), (5, 6)])
        result.add(UNIT_SQUARE)
        assert result.keys() == sorted(result.keys())
        assert list(result) == result.keys()

    def test_squares_models(self) -> None:
        result = SquareResultSet()
        result.add([(0, 0), (0, -2), (1, -1), (-1, -1)])
        assert result.squares() == [Square.from_coords([(-1, -1), (1, -1), (0, 0), (0, -2)])]

    def test_equality(self) -> None:
        assert SquareResultSet([canonical_key(UNIT_SQUARE)]) == SquareResultSet(
            [canonical_key(list(reversed(UNIT_SQUARE)))]
        )
        assert SquareResultSet() != SquareResultSet([canonical_key(UNIT_SQUARE)])
