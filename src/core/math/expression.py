"""
Expression — Evaluator для выражений "a <op> b"

Модуль разбирает и вычисляет инфиксное выражение из ровно двух операндов
и одного оператора из {+, -, *, /}.

Порядок обработки:
1. Проверка грамматики сканированием: последний символ-оператор,
   затем fullmatch частей \\s*\\d*(\\.\\d)?\\s* до и после него (линейное время)
2. Поиск ПЕРВОГО символа-оператора, split по нему
3. Trim каждой части, разбор float-литерала
4. Применение оператора через reducers из arithmetic (общая проверка деления на ноль)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Оператором всегда считается первый найденный символ из {+, -, *, /}:
   "3--2" → 3 - (-2); "-3+2" → левый операнд пуст → MalformedOperand
2. Цепочки не поддерживаются: "1+2+3" → MalformedOperand (правая часть "2+3")
3. Неподдерживаемый оператор ("2^2") отсекается на этапе грамматики
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Final

from src.core.domain.operation import BinaryExpression, Operator
from src.core.math.arithmetic import add, divide, multiply, subtract
from src.core.math.errors import MalformedExpression, MalformedOperand, UnknownOperator

logger = logging.getLogger(__name__)

# =============================================================================
# ГРАММАТИКА
# =============================================================================

# Часть выражения по одну сторону оператора (литерал с одной цифрой после точки)
OPERAND_FORM_RE: Final[re.Pattern[str]] = re.compile(r"\s*\d*(?:\.\d)?\s*", re.ASCII)

OPERATOR_CHARS: Final[str] = "+-*/"

OPERATOR_RE: Final[re.Pattern[str]] = re.compile(r"[-+/*]")

# Десятичный float-литерал (без inf/nan/подчёркиваний)
FLOAT_LITERAL_RE: Final[re.Pattern[str]] = re.compile(
    r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?", re.ASCII
)


_OPERATOR_FUNCTIONS: dict[Operator, Callable[..., float]] = {
    Operator.PLUS: add,
    Operator.MINUS: subtract,
    Operator.TIMES: multiply,
    Operator.DIVIDED_BY: divide,
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EvaluatorConfig:
    """Конфигурация ExpressionEvaluator.

    strict_grammar:
        False: проверяется только часть после последнего оператора
                ("3.14+2" допустимо, т.к. совпадает хвост "4+2").
        True:  обе части вокруг единственного оператора должны
                соответствовать грамматике
                ("3.14+2" → MalformedExpression).
    """

    strict_grammar: bool = False


# =============================================================================
# HELPERS
# =============================================================================


def parse_operand(side: str, text: str) -> float:
    """
    Разбор одного операнда (после trim).

    Raises:
        MalformedOperand: Если text не является float-литералом
    """
    if not FLOAT_LITERAL_RE.fullmatch(text):
        logger.debug("%s operand rejected: %r", side, text)
        raise MalformedOperand(side, text)
    return float(text)


def apply_operator(symbol: str, left: float, right: float) -> float:
    """
    Применение инфиксного оператора к двум операндам.

    Raises:
        UnknownOperator: Если symbol не из {+, -, *, /}
        DivisionByZero: Если symbol == "/" и right == 0
    """
    try:
        op = Operator(symbol)
    except ValueError:
        logger.debug("operator rejected: %r", symbol)
        raise UnknownOperator(symbol) from None

    return _OPERATOR_FUNCTIONS[op](left, right)


# =============================================================================
# EVALUATOR
# =============================================================================


class ExpressionEvaluator:
    """Evaluator для выражений из двух операндов.

    Не хранит состояния кроме неизменяемой конфигурации,
    безопасен для одновременного использования.
    """

    def __init__(self, config: EvaluatorConfig | None = None):
        """Инициализация evaluator.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or EvaluatorConfig()

    def matches_grammar(self, expression: str) -> bool:
        """
        True если строка допустима по грамматике выражений.

        Правая часть не содержит операторов, поэтому проверяется только
        последний оператор. В default режиме левая часть не проверяется:
        при поиске с привязкой к концу она всегда допускает пустое совпадение.
        """
        split_at = max(expression.rfind(ch) for ch in OPERATOR_CHARS)
        if split_at < 0:
            return False

        if OPERAND_FORM_RE.fullmatch(expression, split_at + 1) is None:
            return False

        if self.config.strict_grammar:
            return OPERAND_FORM_RE.fullmatch(expression, 0, split_at) is not None
        return True

    def parse(self, expression: str) -> BinaryExpression:
        """
        Разбор выражения без вычисления.

        Args:
            expression: Строка вида "a <op> b"

        Returns:
            BinaryExpression с операндами float

        Raises:
            TypeError: Если expression не str
            MalformedExpression: Если строка не соответствует грамматике
            MalformedOperand: Если операнд не разбирается как float
        """
        if not isinstance(expression, str):
            raise TypeError(f"expression must be str, got {type(expression).__name__}")

        if not self.matches_grammar(expression):
            logger.debug("expression rejected by grammar: %r", expression)
            raise MalformedExpression(expression)

        match = OPERATOR_RE.search(expression)
        if match is None:
            # Грамматика требует оператор, поэтому сюда не попадаем
            raise MalformedExpression(expression)

        split_at = match.start()
        left = parse_operand("left", expression[:split_at].strip())
        right = parse_operand("right", expression[split_at + 1 :].strip())

        return BinaryExpression(
            left=left,
            operator=Operator(match.group()),
            right=right,
            source=expression,
        )

    def evaluate(self, expression: str) -> float:
        """
        Разбор и вычисление выражения.

        Raises:
            MalformedExpression, MalformedOperand, UnknownOperator, DivisionByZero

        Examples:
            >>> ExpressionEvaluator().evaluate("3/2")
            1.5
        """
        parsed = self.parse(expression)
        return apply_operator(parsed.operator.value, parsed.left, parsed.right)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_EVALUATOR = ExpressionEvaluator()


def parse_expr(s: str) -> BinaryExpression:
    """Разбор выражения default evaluator'ом."""
    return _DEFAULT_EVALUATOR.parse(s)


def eval_expr(s: str) -> float:
    """
    Вычисление выражения "a <op> b" default evaluator'ом.

    Examples:
        >>> eval_expr("1+2")
        3.0
        >>> eval_expr("2 * 3")
        6.0
    """
    return _DEFAULT_EVALUATOR.evaluate(s)
