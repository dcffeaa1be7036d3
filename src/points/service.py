"""Points Service — операции над точками и подсчёт квадратов.

Обёртка вокруг алгоритма подсчёта:
- CRUD над репозиторием точек (список, по id, вставка, замена, удаление)
- Подсчёт квадратов по снапшоту репозитория под дедлайном запроса
- Отчёты SquareCountReport / SquareDetailReport со структурированными вершинами

Дедлайн — внешняя по отношению к алгоритму политика: подсчёт запускается
в отдельном потоке, и по истечении request_timeout_sec вызывающий
получает SquareCountTimeoutError.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, List, Optional, Sequence

from src.core.contracts import (
    validate_points_payload,
    validate_square_count_report,
    validate_square_detail_report,
)
from src.core.domain.point import Point, StoredPoint
from src.core.domain.square import SquareCountReport, SquareDetailReport
from src.core.geometry import SquareCounter, SquareResultSet

from .config import ServiceConfig
from .errors import NoPointsError, PointNotFoundError, SquareCountTimeoutError
from .repository import InMemoryPointRepository

logger = logging.getLogger(__name__)


class PointsService:
    """Сервис точек и подсчёта квадратов.

    Каждый подсчёт работает с неизменяемым снапшотом репозитория,
    поэтому изменения точек во время подсчёта на результат не влияют.
    """

    def __init__(
        self,
        repository: Optional[InMemoryPointRepository] = None,
        config: Optional[ServiceConfig] = None,
    ):
        self.repository = repository if repository is not None else InMemoryPointRepository()
        self.config = config if config is not None else ServiceConfig()
        self._counter = SquareCounter(workers=self.config.workers)

    # -------------------------------------------------------------------------
    # CRUD
    # -------------------------------------------------------------------------

    def get_points(self) -> List[StoredPoint]:
        logger.info("Retrieving all points from the repository")
        points = self.repository.list_all()
        logger.info("Successfully retrieved %d points", len(points))
        return points

    def get_point(self, point_id: str) -> StoredPoint:
        """Точка по идентификатору.

        Raises:
            PointNotFoundError: Если точки с таким id нет
        """
        logger.info("Retrieving point with ID %s", point_id)
        point = self.repository.get(point_id)
        if point is None:
            raise PointNotFoundError(f"Point with ID {point_id} not found")
        logger.info("Successfully retrieved point: %s", point.point)
        return point

    def create_points(self, points: Sequence[Point]) -> List[StoredPoint]:
        """Вставка списка точек.

        Returns:
            Сохранённые точки с назначенными идентификаторами
        """
        logger.info("Inserting %d points", len(points))
        stored = self.repository.insert_many(points)
        logger.info("Successfully inserted %d points", len(stored))
        return stored

    def create_points_from_payload(self, payload: Any) -> List[StoredPoint]:
        """Вставка точек из JSON payload ([{"x": int, "y": int}, ...]).

        Raises:
            ValidationError: Если payload не соответствует контракту points_payload
        """
        validate_points_payload(payload)
        return self.create_points([Point(**item) for item in payload])

    def update_point(self, point_id: str, point: Point) -> StoredPoint:
        """Замена координат точки.

        Raises:
            PointNotFoundError: Если точки с таким id нет
        """
        logger.info("Updating point with ID %s to new coordinates: %s", point_id, point)
        if not self.repository.replace(point_id, point):
            raise PointNotFoundError(f"Point with ID {point_id} not found")
        logger.info("Successfully updated point %s", point_id)
        return self.repository.get(point_id)

    def delete_point(self, point_id: str) -> None:
        """Удаление точки по идентификатору.

        Raises:
            PointNotFoundError: Если точки с таким id нет
        """
        logger.info("Deleting point with ID %s", point_id)
        if not self.repository.delete(point_id):
            raise PointNotFoundError(f"Point with ID {point_id} not found")

    def delete_point_at(self, point: Point) -> StoredPoint:
        """Удаление первой точки с указанными координатами.

        Returns:
            Удалённая точка

        Raises:
            PointNotFoundError: Если точки с такими координатами нет
        """
        stored = self.repository.find_by_coordinates(point)
        if stored is None:
            raise PointNotFoundError(f"Point {point} not found")
        self.delete_point(stored.id)
        return stored

    # -------------------------------------------------------------------------
    # SQUARES
    # -------------------------------------------------------------------------

    def count_squares(self) -> SquareCountReport:
        """Количество различных квадратов по текущим точкам.

        Raises:
            NoPointsError: Если репозиторий пуст
            SquareCountTimeoutError: Если подсчёт не уложился в дедлайн
        """
        result = self._find_squares()
        report = SquareCountReport(count=len(result))
        if self.config.validate_contracts:
            validate_square_count_report(report.model_dump(mode="json"))
        return report

    def squares_detailed(self) -> SquareDetailReport:
        """Количество и вершины всех различных квадратов.

        Raises:
            NoPointsError: Если репозиторий пуст
            SquareCountTimeoutError: Если подсчёт не уложился в дедлайн
        """
        result = self._find_squares()
        squares = result.squares()
        report = SquareDetailReport(count=len(squares), squares=squares)
        if self.config.validate_contracts:
            validate_square_detail_report(report.model_dump(mode="json"))
        return report

    def _find_squares(self) -> SquareResultSet:
        snapshot = self.repository.snapshot()
        if not snapshot:
            raise NoPointsError()

        timeout = self.config.request_timeout_sec
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="square-count")
        try:
            future = executor.submit(self._counter.find, snapshot)
            try:
                result = future.result(timeout=timeout)
            except FutureTimeoutError:
                future.cancel()
                logger.warning("Square count timed out after %.3fs", timeout)
                raise SquareCountTimeoutError(timeout)
        finally:
            # Зависший подсчёт не дожидаемся
            executor.shutdown(wait=False)

        logger.info("Found %d squares among %d points", len(result), len(snapshot))
        return result
