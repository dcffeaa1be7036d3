"""
Point — Модель точки на целочисленной плоскости

Immutable Pydantic модели точки:
- Point: геометрическая точка (x, y), идентичность определяется только координатами
- StoredPoint: точка из хранилища с внешним идентификатором

Идентификатор StoredPoint не участвует в геометрии: для алгоритма подсчёта
квадратов используется только Point (равенство и hash по координатам).
"""

from typing import Final, Tuple

from pydantic import BaseModel, Field, StrictInt


# Формат идентификатора точки в хранилище (24 hex символа, как ObjectId)
POINT_ID_PATTERN: Final[str] = r"^[0-9a-f]{24}$"

# Координатная пара (x, y) — внутреннее представление для горячих циклов
Coord = Tuple[int, int]


# =============================================================================
# POINT MODEL
# =============================================================================


class Point(BaseModel):
    """
    Точка с целочисленными координатами.

    Immutable модель (frozen=True): hashable, равенство по (x, y).
    Координаты строго int: bool и float отвергаются (StrictInt).
    """

    x: StrictInt = Field(..., description="Координата X")
    y: StrictInt = Field(..., description="Координата Y")

    model_config = {"frozen": True}

    @classmethod
    def from_tuple(cls, coord: Coord) -> "Point":
        """
        Создание точки из пары (x, y).

        Args:
            coord: Пара координат

        Returns:
            Новый экземпляр Point
        """
        x, y = coord
        return cls(x=x, y=y)

    def as_tuple(self) -> Coord:
        """Координаты точки как (x, y)"""
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"X:{self.x}, Y:{self.y}"


# =============================================================================
# STORED POINT MODEL
# =============================================================================


class StoredPoint(BaseModel):
    """
    Точка, сохранённая в репозитории.

    Идентификатор назначается репозиторием при вставке. Для геометрии
    используется только свойство point.
    """

    id: str = Field(..., pattern=POINT_ID_PATTERN, description="Идентификатор точки")
    x: StrictInt = Field(..., description="Координата X")
    y: StrictInt = Field(..., description="Координата Y")

    model_config = {"frozen": True}

    @property
    def point(self) -> Point:
        """Геометрическая точка без идентификатора"""
        return Point(x=self.x, y=self.y)

    @classmethod
    def from_point(cls, point_id: str, point: Point) -> "StoredPoint":
        return cls(id=point_id, x=point.x, y=point.y)
