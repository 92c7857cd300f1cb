"""
Calculation — Запись выполненного вычисления

Immutable Pydantic модель, описывающая одну выполненную операцию:
операцию, операнды в исходном порядке, результат и (опционально)
исходное выражение. Сериализуется в контракт `calculation`
(src/core/contracts/schema/calculation.json).

Нечисловые значения IEEE-754 (inf, -inf, nan) в контракте кодируются
строками "Infinity", "-Infinity", "NaN", т.к. JSON их не поддерживает.
"""

import math
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.domain.operation import Operation


# =============================================================================
# JSON ENCODING
# =============================================================================


def encode_float(value: float) -> float | str:
    """
    Кодирование float для JSON-контракта.

    Examples:
        >>> encode_float(1.5)
        1.5
        >>> encode_float(float("inf"))
        'Infinity'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return value


# =============================================================================
# CALCULATION MODEL
# =============================================================================


class Calculation(BaseModel):
    """
    Модель выполненного вычисления.

    Immutable модель (frozen=True).
    Variadic-операции содержат минимум два операнда, sqrt ровно один.
    """

    operation: Operation = Field(..., description="Выполненная операция")
    operands: tuple[float, ...] = Field(
        ..., min_length=1, description="Операнды в порядке свёртки"
    )
    result: float = Field(..., description="Результат операции")
    expression: str | None = Field(None, description="Исходное выражение (для eval)")

    model_config = {"frozen": True}

    @field_validator("operands")
    @classmethod
    def validate_operand_count(cls, v: tuple[float, ...], info) -> tuple[float, ...]:
        """Проверка арности относительно операции"""
        if "operation" not in info.data:
            return v

        operation = info.data["operation"]
        if operation.is_variadic and len(v) < 2:
            raise ValueError(f"{operation.value} requires at least 2 operands, got {len(v)}")
        if not operation.is_variadic and len(v) != 1:
            raise ValueError(f"{operation.value} requires exactly 1 operand, got {len(v)}")
        return v

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализация в JSON-совместимый dict по контракту `calculation`.

        Returns:
            dict с ключами operation, operands, result, expression
        """
        return {
            "operation": self.operation.value,
            "operands": [encode_float(v) for v in self.operands],
            "result": encode_float(self.result),
            "expression": self.expression,
        }
