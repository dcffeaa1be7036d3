"""
Geometry — поиск различных квадратов в наборе целочисленных точек

Конвейер: Normalizer → Membership Index → Candidate Generator →
Square Validator → Canonicalizer → Aggregator.
"""

from src.core.geometry.candidates import (
    Candidate,
    complete_square,
    iter_candidates,
    iter_pair_indices,
)
from src.core.geometry.canonical import (
    CanonicalKey,
    SquareResultSet,
    canonical_key,
    decode_key,
)
from src.core.geometry.counter import (
    SquareCounter,
    count_squares,
    find_squares_in_range,
    partition_pair_space,
)
from src.core.geometry.membership import MembershipIndex
from src.core.geometry.normalizer import (
    MIN_POINTS_FOR_SQUARE,
    InvalidPointError,
    has_enough_points,
    normalize_points,
)
from src.core.geometry.validator import is_square, squared_distance

__all__ = [
    # Normalizer
    "MIN_POINTS_FOR_SQUARE",
    "InvalidPointError",
    "normalize_points",
    "has_enough_points",
    # Membership Index
    "MembershipIndex",
    # Candidate Generator
    "Candidate",
    "complete_square",
    "iter_pair_indices",
    "iter_candidates",
    # Validator
    "squared_distance",
    "is_square",
    # Canonicalizer
    "CanonicalKey",
    "canonical_key",
    "decode_key",
    "SquareResultSet",
    # Aggregator
    "partition_pair_space",
    "find_squares_in_range",
    "count_squares",
    "SquareCounter",
]
