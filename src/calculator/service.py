"""Calculator — фасад над арифметическим ядром.

Выполняет операцию или вычисляет выражение и возвращает неизменяемую
запись Calculation, при необходимости проверенную по контракту
`calculation` (JSON Schema).
"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from src.core.contracts import CalculationValidator
from src.core.domain.calculation import Calculation
from src.core.domain.operation import Operation
from src.core.math.arithmetic import add, divide, multiply, sqrt, subtract
from src.core.math.errors import InsufficientOperands
from src.core.math.numerical_safeguards import coerce_operand
from src.core.math.expression import EvaluatorConfig, ExpressionEvaluator, apply_operator

logger = logging.getLogger(__name__)


_VARIADIC_FUNCTIONS: dict[Operation, Callable[..., float]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
}


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация Calculator.

    evaluator: конфигурация разбора выражений
    validate_records: проверять каждую запись по контракту `calculation`
    """
    evaluator: EvaluatorConfig = field(default_factory=EvaluatorConfig)
    validate_records: bool = True


class Calculator:
    """Stateless фасад: операции и выражения → Calculation."""

    def __init__(self, config: CalculatorConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or CalculatorConfig()
        self._evaluator = ExpressionEvaluator(self.config.evaluator)
        self._validator = CalculationValidator() if self.config.validate_records else None

    def calculate(self, operation: Operation | str, *operands: float) -> Calculation:
        """Выполнение операции над операндами.

        Args:
            operation: Operation или её строковое значение ("add", "sqrt", ...)
            *operands: операнды в порядке свёртки (для sqrt ровно один)

        Returns:
            Calculation с результатом

        Raises:
            ValueError: неизвестная операция
            TypeError: sqrt с более чем одним операндом
            CalculatorError: ошибки арифметического ядра
        """
        operation = Operation(operation)

        if operation is Operation.SQRT:
            if not operands:
                raise InsufficientOperands(operation.value, 0, required=1)
            if len(operands) > 1:
                raise TypeError(f"sqrt takes exactly 1 operand, got {len(operands)}")
            result = sqrt(operands[0])
        else:
            result = _VARIADIC_FUNCTIONS[operation](*operands)

        return self._record(
            Calculation(
                operation=operation,
                operands=tuple(coerce_operand(v) for v in operands),
                result=result,
            )
        )

    def evaluate(self, expression: str) -> Calculation:
        """Разбор и вычисление выражения "a <op> b".

        Raises:
            MalformedExpression, MalformedOperand, UnknownOperator, DivisionByZero
        """
        parsed = self._evaluator.parse(expression)
        result = apply_operator(parsed.operator.value, parsed.left, parsed.right)

        return self._record(
            Calculation(
                operation=parsed.operator.operation,
                operands=parsed.operands,
                result=result,
                expression=expression,
            )
        )

    def _record(self, calculation: Calculation) -> Calculation:
        if self._validator is not None:
            self._validator.validate(calculation.to_contract())

        logger.debug(
            "%s%r = %r", calculation.operation.value, calculation.operands, calculation.result
        )
        return calculation
