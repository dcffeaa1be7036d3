"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе сервиса points.
"""

from .validators import (
    ContractValidator,
    PointsPayloadValidator,
    SchemaLoader,
    SquareCountReportValidator,
    SquareDetailReportValidator,
    validate_points_payload,
    validate_square_count_report,
    validate_square_detail_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PointsPayloadValidator",
    "SquareCountReportValidator",
    "SquareDetailReportValidator",
    # Functions
    "validate_points_payload",
    "validate_square_count_report",
    "validate_square_detail_report",
]
