"""Конфигурация сервиса points.

Параметры окружения сервиса, не относящиеся к алгоритму подсчёта:
- request_timeout_sec — дедлайн на подсчёт квадратов (5 секунд по умолчанию)
- workers — количество процессов для перебора пар
- validate_contracts — проверка отчётов JSON Schema контрактами
"""

import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional


DEFAULT_REQUEST_TIMEOUT_SEC: Final[float] = 5.0

ENV_REQUEST_TIMEOUT_SEC: Final[str] = "SQUARES_REQUEST_TIMEOUT_SEC"
ENV_WORKERS: Final[str] = "SQUARES_WORKERS"
ENV_VALIDATE_CONTRACTS: Final[str] = "SQUARES_VALIDATE_CONTRACTS"

_TRUE_VALUES: Final[frozenset] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset] = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class ServiceConfig:
    """Конфигурация PointsService.

    Immutable: изменение конфигурации требует нового экземпляра.
    """
    request_timeout_sec: float = DEFAULT_REQUEST_TIMEOUT_SEC
    workers: int = 1
    validate_contracts: bool = True

    def __post_init__(self):
        if not self.request_timeout_sec > 0:
            raise ValueError(
                f"request_timeout_sec must be positive, got {self.request_timeout_sec}"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        """Загрузка конфигурации из переменных окружения.

        Отсутствующие переменные берутся из значений по умолчанию.

        Args:
            environ: Источник переменных (по умолчанию os.environ)

        Returns:
            ServiceConfig

        Raises:
            ValueError: Если значение переменной не разбирается
        """
        if environ is None:
            environ = os.environ

        kwargs = {}
        if ENV_REQUEST_TIMEOUT_SEC in environ:
            kwargs["request_timeout_sec"] = float(environ[ENV_REQUEST_TIMEOUT_SEC])
        if ENV_WORKERS in environ:
            kwargs["workers"] = int(environ[ENV_WORKERS])
        if ENV_VALIDATE_CONTRACTS in environ:
            kwargs["validate_contracts"] = _parse_bool(
                ENV_VALIDATE_CONTRACTS, environ[ENV_VALIDATE_CONTRACTS]
            )
        return cls(**kwargs)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")
