"""In-memory репозиторий точек.

Хранилище точек сервиса с идентификаторами в формате ObjectId
(24 hex символа). Долговечность хранения не требуется: репозиторий
живёт в памяти процесса. snapshot() отдаёт неизменяемую копию для
подсчёта квадратов, поэтому последующие изменения не влияют на
уже идущий подсчёт.
"""

import secrets
import threading
from typing import Dict, List, Optional, Sequence, Tuple

from src.core.domain.point import Point, StoredPoint


def new_point_id() -> str:
    """Новый идентификатор точки (24 hex символа)"""
    return secrets.token_hex(12)


class InMemoryPointRepository:
    """Потокобезопасный репозиторий точек в памяти.

    Порядок вставки сохраняется. Дубликаты координат допускаются
    (как и в исходном хранилище): нормализация — задача алгоритма.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._points: Dict[str, StoredPoint] = {}

    def list_all(self) -> List[StoredPoint]:
        """Все точки в порядке вставки"""
        with self._lock:
            return list(self._points.values())

    def get(self, point_id: str) -> Optional[StoredPoint]:
        """Точка по идентификатору или None"""
        with self._lock:
            return self._points.get(point_id)

    def find_by_coordinates(self, point: Point) -> Optional[StoredPoint]:
        """Первая (по порядку вставки) точка с такими координатами или None"""
        with self._lock:
            for stored in self._points.values():
                if stored.x == point.x and stored.y == point.y:
                    return stored
        return None

    def insert_many(self, points: Sequence[Point]) -> List[StoredPoint]:
        """Вставка точек, каждой назначается новый идентификатор"""
        stored = [StoredPoint.from_point(new_point_id(), p) for p in points]
        with self._lock:
            for item in stored:
                self._points[item.id] = item
        return stored

    def replace(self, point_id: str, point: Point) -> bool:
        """Замена координат точки; False если идентификатор не найден"""
        with self._lock:
            if point_id not in self._points:
                return False
            self._points[point_id] = StoredPoint.from_point(point_id, point)
            return True

    def delete(self, point_id: str) -> bool:
        """Удаление точки; False если идентификатор не найден"""
        with self._lock:
            return self._points.pop(point_id, None) is not None

    def snapshot(self) -> Tuple[Point, ...]:
        """Неизменяемый снапшот геометрических точек"""
        with self._lock:
            return tuple(p.point for p in self._points.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
