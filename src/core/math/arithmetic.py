"""
Arithmetic — Variadic Reducers & Square Root

Модуль реализует базовые арифметические операции над float:
- add / subtract / multiply / divide: свёртка слева направо
  result = ((op1 • op2) • op3) • ...
- sqrt: квадратный корень неотрицательного числа

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды никогда не переупорядочиваются (subtract/divide некоммутативны)
2. Variadic-операции требуют минимум два операнда
3. Деление проверяет каждый делитель на ноль ДО деления на него,
   по ходу свёртки, а не только последний операнд
4. Переполнение даёт inf по IEEE-754, а не ошибку
"""

import logging
import math
import operator
from typing import Callable

from src.core.math.errors import DivisionByZero, NegativeRadicand
from src.core.math.numerical_safeguards import (
    coerce_operand,
    coerce_operands,
    is_exact_zero,
)

logger = logging.getLogger(__name__)


# =============================================================================
# REDUCTION
# =============================================================================


def _fold(
    operation: str,
    fn: Callable[[float, float], float],
    operands: tuple[object, ...],
) -> float:
    """Левая свёртка операндов бинарной функцией fn."""
    values = coerce_operands(operation, operands)

    result = values[0]
    for value in values[1:]:
        result = fn(result, value)
    return result


# =============================================================================
# VARIADIC REDUCERS
# =============================================================================


def add(*operands: float) -> float:
    """
    Сумма двух и более чисел.

    Raises:
        InsufficientOperands: Если передано меньше двух операндов

    Examples:
        >>> add(1, 2)
        3.0
        >>> add(-1, 2, -3, 4, -5)
        -3.0
    """
    return _fold("add", operator.add, operands)


def subtract(*operands: float) -> float:
    """
    Последовательное вычитание: op1 - op2 - op3 - ...

    Examples:
        >>> subtract(1, 2, 3, 4)
        -8.0
    """
    return _fold("subtract", operator.sub, operands)


def multiply(*operands: float) -> float:
    """Произведение двух и более чисел."""
    return _fold("multiply", operator.mul, operands)


def divide(*operands: float) -> float:
    """
    Последовательное деление: ((op1 / op2) / op3) / ...

    Каждый делитель проверяется на точный ноль непосредственно перед
    делением на него.

    Args:
        *operands: Делимое и один или более делителей

    Returns:
        Частное

    Raises:
        InsufficientOperands: Если передано меньше двух операндов
        DivisionByZero: Если любой операнд с позиции 1 равен нулю

    Examples:
        >>> divide(12, 4, 3)
        1.0
        >>> divide(1, 2, 0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DivisionByZero: can't divide by zero (operand at position 2)
    """
    values = coerce_operands("divide", operands)

    result = values[0]
    for position, divisor in enumerate(values[1:], start=1):
        if is_exact_zero(divisor):
            logger.debug("divide rejected: zero divisor at position %d", position)
            raise DivisionByZero(position)
        result /= divisor
    return result


# =============================================================================
# SQUARE ROOT
# =============================================================================


def sqrt(x: float) -> float:
    """
    Квадратный корень неотрицательного числа.

    Args:
        x: Radicand (>= 0)

    Returns:
        Неотрицательный квадратный корень

    Raises:
        NegativeRadicand: Если x < 0

    Examples:
        >>> sqrt(9)
        3.0
    """
    radicand = coerce_operand(x)

    if radicand < 0:
        logger.debug("sqrt rejected: negative radicand %r", radicand)
        raise NegativeRadicand(radicand)

    return math.sqrt(radicand)
