"""
Errors — Таксономия ошибок арифметического ядра

Все ошибки наследуются от CalculatorError и дополнительно от встроенного
исключения с близкой семантикой (ValueError / ZeroDivisionError), чтобы
вызывающий код мог ловить их как стандартные Python-исключения.

Иерархия:
    CalculatorError
    ├── InsufficientOperands   (ValueError)
    ├── DivisionByZero         (ZeroDivisionError)
    ├── NegativeRadicand       (ValueError)
    ├── MalformedExpression    (ValueError)
    ├── MalformedOperand       (ValueError)
    └── UnknownOperator        (ValueError)
"""


class CalculatorError(Exception):
    """Базовый класс всех ошибок арифметического ядра."""

    pass


class InsufficientOperands(CalculatorError, ValueError):
    """
    Variadic-операции передано меньше операндов, чем требуется.

    Attributes:
        operation: Имя операции (add, subtract, ...)
        received: Фактическое число операндов
        required: Минимально допустимое число операндов
    """

    def __init__(self, operation: str, received: int, required: int = 2):
        self.operation = operation
        self.received = received
        self.required = required
        super().__init__(
            f"{operation} requires at least {required} operands, got {received}"
        )


class DivisionByZero(CalculatorError, ZeroDivisionError):
    """
    Делитель равен нулю (0.0 или -0.0).

    Attributes:
        position: Индекс нулевого операнда в последовательности (>= 1)
    """

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"can't divide by zero (operand at position {position})")


class NegativeRadicand(CalculatorError, ValueError):
    """Попытка извлечь квадратный корень из отрицательного числа."""

    def __init__(self, radicand: float):
        self.radicand = radicand
        super().__init__(
            f"can't take the square root of a negative number: {radicand:f}"
        )


class MalformedExpression(CalculatorError, ValueError):
    """Строка не соответствует грамматике `a <op> b`."""

    def __init__(self, expression: str):
        self.expression = expression
        super().__init__(f"expression does not match 'a <op> b': {expression!r}")


class MalformedOperand(CalculatorError, ValueError):
    """
    Операнд выражения не разбирается как float-литерал.

    Attributes:
        side: "left" или "right"
        text: Исходный текст операнда (после trim)
    """

    def __init__(self, side: str, text: str):
        self.side = side
        self.text = text
        super().__init__(f"{side} operand is not a number: {text!r}")


class UnknownOperator(CalculatorError, ValueError):
    """Оператор не входит в {+, -, *, /}."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"Could not match the given operator: {operator!r}")
