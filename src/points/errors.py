"""Ошибки сервиса points."""


class PointsServiceError(Exception):
    """Базовая ошибка сервиса points."""


class PointNotFoundError(PointsServiceError, LookupError):
    """Точка с указанным идентификатором или координатами не найдена."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoPointsError(PointsServiceError):
    """В репозитории нет точек для подсчёта квадратов."""

    def __init__(self, message: str = "No points found to calculate squares."):
        super().__init__(message)
        self.message = message


class SquareCountTimeoutError(PointsServiceError, TimeoutError):
    """Подсчёт квадратов не уложился в дедлайн запроса."""

    def __init__(self, timeout_sec: float):
        super().__init__(f"Square count timed out after {timeout_sec:.3f}s")
        self.timeout_sec = timeout_sec
