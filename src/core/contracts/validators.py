"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- points_payload.json (список точек на вставку)
- square_count_report.json (количество квадратов)
- square_detail_report.json (количество и вершины квадратов)
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        # Корень проекта — 4 уровня вверх от этого файла
        if schema_dir is None:
            schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'points_payload')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Инициализация валидатора.

        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации (ValidationError объекты)"""
        return self.validator.iter_errors(data)


class PointsPayloadValidator(ContractValidator):
    """Валидатор для списка точек на вставку."""

    def __init__(self):
        super().__init__("points_payload")


class SquareCountReportValidator(ContractValidator):
    """Валидатор для отчёта о количестве квадратов."""

    def __init__(self):
        super().__init__("square_count_report")


class SquareDetailReportValidator(ContractValidator):
    """Валидатор для детального отчёта о квадратах."""

    def __init__(self):
        super().__init__("square_detail_report")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_points_payload(data: Any) -> None:
    """
    Валидация списка точек на вставку.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PointsPayloadValidator().validate(data)


def validate_square_count_report(data: Dict[str, Any]) -> None:
    """
    Валидация отчёта о количестве квадратов.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SquareCountReportValidator().validate(data)


def validate_square_detail_report(data: Dict[str, Any]) -> None:
    """
    Валидация детального отчёта о квадратах.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SquareDetailReportValidator().validate(data)
