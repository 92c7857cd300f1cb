"""
Numerical Safeguards — Operand Coercion & Zero Checks

Модуль обеспечивает общие проверки для всех арифметических операций:
- Приведение операндов к float (int → float, bool и нечисловые → TypeError)
- Проверка арности variadic-операций (минимум два операнда)
- Точная проверка на ноль для делителей (0.0 и -0.0)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок операндов никогда не меняется
2. NaN/Inf допустимы как операнды (IEEE-754), санитизация не выполняется
3. Проверка делителя на ноль точная, без epsilon
4. Целые, не представимые в float, дают ±inf (переполнение по IEEE-754)
"""

import logging
import math
from numbers import Real
from typing import Final, Iterable

from src.core.math.errors import InsufficientOperands

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Минимальное число операндов для variadic-операций
MIN_OPERANDS: Final[int] = 2


# =============================================================================
# ПРИВЕДЕНИЕ ОПЕРАНДОВ
# =============================================================================


def coerce_operand(value: object) -> float:
    """
    Приведение одного операнда к float.

    Args:
        value: Число (int или float)

    Returns:
        float(value); ±inf если целое не помещается в float

    Raises:
        TypeError: Если value не является вещественным числом или является bool

    Examples:
        >>> coerce_operand(3)
        3.0
        >>> coerce_operand(-0.5)
        -0.5
        >>> coerce_operand(10**400)
        inf
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"operand must be a real number, got {type(value).__name__}")

    try:
        return float(value)
    except OverflowError:
        # int/Fraction вне диапазона float
        return math.inf if value > 0 else -math.inf


def coerce_operands(
    operation: str,
    operands: Iterable[object],
    required: int = MIN_OPERANDS,
) -> tuple[float, ...]:
    """
    Приведение последовательности операндов к кортежу float с проверкой арности.

    Args:
        operation: Имя операции (для сообщения об ошибке)
        operands: Упорядоченные операнды
        required: Минимальное число операндов (default: MIN_OPERANDS)

    Returns:
        Кортеж float в исходном порядке

    Raises:
        InsufficientOperands: Если операндов меньше required
        TypeError: Если какой-либо операнд не число
    """
    values = tuple(coerce_operand(v) for v in operands)

    if len(values) < required:
        logger.debug(
            "%s rejected: %d operand(s), %d required", operation, len(values), required
        )
        raise InsufficientOperands(operation, len(values), required)

    return values


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_exact_zero(value: float) -> bool:
    """
    Точная проверка на ноль.

    -0.0 == 0.0 в IEEE-754, поэтому оба значения считаются нулём.
    NaN нулём не является.
    """
    return value == 0.0

