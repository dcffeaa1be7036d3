"""Points — in-process сервис точек и подсчёта квадратов.

- Репозиторий точек в памяти с идентификаторами
- Подсчёт квадратов под дедлайном запроса
- Отчёты с проверкой JSON Schema контрактами
"""

from .config import ServiceConfig
from .errors import (
    NoPointsError,
    PointNotFoundError,
    PointsServiceError,
    SquareCountTimeoutError,
)
from .repository import InMemoryPointRepository, new_point_id
from .service import PointsService

__all__ = [
    "ServiceConfig",
    "PointsServiceError",
    "PointNotFoundError",
    "NoPointsError",
    "SquareCountTimeoutError",
    "InMemoryPointRepository",
    "new_point_id",
    "PointsService",
]
