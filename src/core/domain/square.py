"""
Square — Модель найденного квадрата и отчётов подсчёта

Immutable Pydantic модели:
- Square: четыре вершины квадрата в каноническом порядке (по x, затем по y)
- SquareCountReport: количество различных квадратов
- SquareDetailReport: количество и вершины каждого квадрата

Структурированное представление вершин (список объектов {x, y}) заменяет
текстовую склейку координат: отчёт сериализуется через model_dump()
и проверяется JSON Schema контрактами (contracts/schema/).
"""

from typing import List, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from .point import Coord, Point


# =============================================================================
# SQUARE MODEL
# =============================================================================


class Square(BaseModel):
    """
    Квадрат, заданный четырьмя различными вершинами.

    Вершины хранятся в каноническом порядке: по возрастанию x,
    при равенстве x — по возрастанию y. Два квадрата с одинаковым
    набором вершин всегда равны независимо от порядка обнаружения.
    """

    points: Tuple[Point, Point, Point, Point] = Field(
        ..., description="Вершины квадрата в каноническом порядке"
    )

    model_config = {"frozen": True}

    @field_validator("points")
    @classmethod
    def validate_canonical_order(
        cls, v: Tuple[Point, Point, Point, Point]
    ) -> Tuple[Point, Point, Point, Point]:
        """Вершины попарно различны и упорядочены по (x, y)"""
        coords = [p.as_tuple() for p in v]
        if len(set(coords)) != 4:
            raise ValueError(f"square vertices must be pairwise distinct, got {coords}")
        if coords != sorted(coords):
            raise ValueError(f"square vertices must be in canonical (x, y) order, got {coords}")
        return v

    @classmethod
    def from_coords(cls, coords: Sequence[Coord]) -> "Square":
        """
        Создание квадрата из четырёх пар координат в любом порядке.

        Args:
            coords: Четыре пары (x, y)

        Returns:
            Square с вершинами в каноническом порядке
        """
        return cls(points=tuple(Point.from_tuple(c) for c in sorted(coords)))

    def as_coords(self) -> Tuple[Coord, ...]:
        """Вершины как кортеж пар (x, y) — совпадает с каноническим ключом"""
        return tuple(p.as_tuple() for p in self.points)


# =============================================================================
# REPORTS
# =============================================================================


class SquareCountReport(BaseModel):
    """Отчёт: количество различных квадратов."""

    count: int = Field(..., ge=0, description="Количество различных квадратов")

    model_config = {"frozen": True}


class SquareDetailReport(BaseModel):
    """
    Детальный отчёт: количество и вершины каждого квадрата.

    Инвариант: count == len(squares).
    """

    count: int = Field(..., ge=0, description="Количество различных квадратов")
    squares: List[Square] = Field(default_factory=list, description="Найденные квадраты")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_count_matches(self) -> "SquareDetailReport":
        if self.count != len(self.squares):
            raise ValueError(
                f"count {self.count} does not match number of squares {len(self.squares)}"
            )
        return self
