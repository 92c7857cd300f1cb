"""
Operation — Операции, операторы и разобранное бинарное выражение

Immutable Pydantic модель BinaryExpression — результат разбора строки
вида "a <op> b" до вычисления.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Арифметическая операция"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    SQRT = "sqrt"

    @property
    def is_variadic(self) -> bool:
        """True для операций-свёрток (два и более операнда)."""
        return self is not Operation.SQRT


class Operator(str, Enum):
    """Инфиксный оператор выражения"""

    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDED_BY = "/"

    @property
    def operation(self) -> Operation:
        """Операция, соответствующая оператору."""
        return _OPERATOR_OPERATIONS[self]


_OPERATOR_OPERATIONS: dict[Operator, Operation] = {
    Operator.PLUS: Operation.ADD,
    Operator.MINUS: Operation.SUBTRACT,
    Operator.TIMES: Operation.MULTIPLY,
    Operator.DIVIDED_BY: Operation.DIVIDE,
}


# =============================================================================
# BINARY EXPRESSION
# =============================================================================


class BinaryExpression(BaseModel):
    """
    Разобранное выражение "left <operator> right".

    Immutable модель (frozen=True). Операнды уже приведены к float,
    source хранит исходную строку без изменений.
    """

    left: float = Field(..., description="Левый операнд")
    operator: Operator = Field(..., description="Оператор (+, -, *, /)")
    right: float = Field(..., description="Правый операнд")
    source: str = Field(..., description="Исходная строка выражения")

    model_config = {"frozen": True}

    @property
    def operands(self) -> tuple[float, float]:
        return (self.left, self.right)
