"""
Тесты для Expression — Evaluator выражений "a <op> b"

Проверяемые инварианты:
1. Грамматика с привязкой к концу строки отсекает неподдерживаемые операторы
2. Split по первому символу-оператору
3. MalformedOperand для пустых/нечисловых операндов и цепочек
4. DivisionByZero в пути вычисления выражения
5. strict_grammar требует полного совпадения
6. Только ASCII-цифры, проверка грамматики за линейное время
"""

import time

import pytest

from src.core.domain.operation import BinaryExpression, Operator
from src.core.math.errors import (
    CalculatorError,
    DivisionByZero,
    MalformedExpression,
    MalformedOperand,
    UnknownOperator,
)
from src.core.math.expression import (
    EvaluatorConfig,
    ExpressionEvaluator,
    apply_operator,
    eval_expr,
    parse_expr,
    parse_operand,
)


# =============================================================================
# ТЕСТЫ: eval_expr
# =============================================================================


class TestEvalExpr:
    """Тесты eval_expr с default конфигурацией"""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("1+2", 3),
            ("2*3", 6),
            ("3/2", 1.5),
            ("5-7", -2),
            ("1 + 2", 3),
            ("  10   /   4  ", 2.5),
            ("2.5*2", 5),
            ("0.5+.5", 1),
            ("1.5 - 0.5", 1),
            ("3.14+2", 5.14),
        ],
    )
    def test_valid_expressions(self, expression, expected) -> None:
        assert eval_expr(expression) == pytest.approx(expected)

    def test_returns_float(self) -> None:
        assert isinstance(eval_expr("1+2"), float)

    def test_second_minus_is_operand_sign(self) -> None:
        """"3--2": первый '-' — оператор, второй — знак правого операнда"""
        assert eval_expr("3--2") == 5

    def test_leading_minus_is_operator(self) -> None:
        """"-3+2": первый '-' — оператор, левый операнд пуст"""
        with pytest.raises(MalformedOperand) as exc_info:
            eval_expr("-3+2")
        assert exc_info.value.side == "left"
        assert exc_info.value.text == ""

    def test_missing_right_operand(self) -> None:
        with pytest.raises(MalformedOperand) as exc_info:
            eval_expr("3/")
        assert exc_info.value.side == "right"

    def test_missing_left_operand(self) -> None:
        with pytest.raises(MalformedOperand):
            eval_expr("*3")

    def test_chained_expression_rejected(self) -> None:
        """Цепочки не поддерживаются"""
        with pytest.raises(MalformedOperand) as exc_info:
            eval_expr("1+2+3")
        assert exc_info.value.text == "2+3"

    def test_non_numeric_left_operand(self) -> None:
        with pytest.raises(MalformedOperand, match="left operand is not a number"):
            eval_expr("x+2")

    @pytest.mark.parametrize("expression", ["2^2", "", "12", "abc", "1+x", "2 % 3"])
    def test_grammar_mismatch(self, expression) -> None:
        """Неподдерживаемое выражение не доходит до split"""
        with pytest.raises(MalformedExpression) as exc_info:
            eval_expr(expression)
        assert exc_info.value.expression == expression

    def test_inf_literal_rejected(self) -> None:
        """Только десятичные литералы: inf/nan не принимаются"""
        with pytest.raises(MalformedOperand) as exc_info:
            eval_expr("inf+1")
        assert exc_info.value.text == "inf"

    @pytest.mark.parametrize("expression", ["1/0", "0/0", "3 / 0.0"])
    def test_division_by_zero(self, expression) -> None:
        with pytest.raises(DivisionByZero):
            eval_expr(expression)

    def test_errors_share_base_class(self) -> None:
        for expression in ("2^2", "3/", "1/0"):
            with pytest.raises(CalculatorError):
                eval_expr(expression)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(TypeError, match="expression must be str"):
            eval_expr(12)

    def test_trailing_newline_is_whitespace(self) -> None:
        """Перевод строки в конце считается пробельным символом"""
        assert eval_expr("1+2\n") == 3

    @pytest.mark.parametrize("expression", ["\u0663+\u0662", "1+\u0662", "\u0661\u0662*3.\u0665"])
    def test_non_ascii_digits_rejected(self, expression) -> None:
        """Только ASCII-цифры: арабско-индийские цифры не принимаются"""
        with pytest.raises(CalculatorError):
            eval_expr(expression)

    def test_non_ascii_digits_fail_grammar(self) -> None:
        with pytest.raises(MalformedExpression) as exc_info:
            eval_expr("\u0663+\u0662")
        assert exc_info.value.expression == "\u0663+\u0662"

    @pytest.mark.parametrize(
        "expression",
        ["1" * 20_000, "1" * 20_000 + "x", " " * 20_000 + "1", "1+" + "2" * 20_000 + "x"],
    )
    def test_long_input_rejected_quickly(self, expression) -> None:
        """Проверка грамматики линейна по длине строки"""
        started = time.perf_counter()
        with pytest.raises(MalformedExpression):
            eval_expr(expression)
        assert time.perf_counter() - started < 0.5

    def test_long_operand_evaluated_quickly(self) -> None:
        started = time.perf_counter()
        assert eval_expr("1" * 20_000 + "+2") == float("inf")
        assert time.perf_counter() - started < 0.5


# =============================================================================
# ТЕСТЫ: parse_expr
# =============================================================================


class TestParseExpr:
    """Тесты parse_expr"""

    def test_parsed_fields(self) -> None:
        parsed = parse_expr(" 4 * 2.5 ")

        assert isinstance(parsed, BinaryExpression)
        assert parsed.left == 4.0
        assert parsed.operator is Operator.TIMES
        assert parsed.right == 2.5
        assert parsed.source == " 4 * 2.5 "
        assert parsed.operands == (4.0, 2.5)

    def test_division_by_zero_not_checked_when_parsing(self) -> None:
        """Разбор не вычисляет выражение"""
        parsed = parse_expr("1/0")
        assert parsed.right == 0.0

    def test_parsed_expression_frozen(self) -> None:
        parsed = parse_expr("1+2")
        with pytest.raises(Exception):
            parsed.left = 5.0  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ: helpers
# =============================================================================


class TestParseOperand:
    """Тесты parse_operand"""

    @pytest.mark.parametrize(
        "text, expected",
        [("3", 3.0), ("-2", -2.0), ("+2", 2.0), (".5", 0.5), ("5.", 5.0), ("1e3", 1000.0)],
    )
    def test_valid_literals(self, text, expected) -> None:
        assert parse_operand("right", text) == expected

    @pytest.mark.parametrize(
        "text", ["", "nan", "inf", "1_000", "1.2.3", "--2", "0x10", "\u0663", "1\u0662"]
    )
    def test_invalid_literals(self, text) -> None:
        with pytest.raises(MalformedOperand):
            parse_operand("left", text)


class TestApplyOperator:
    """Тесты apply_operator"""

    @pytest.mark.parametrize(
        "symbol, expected",
        [("+", 8.0), ("-", 4.0), ("*", 12.0), ("/", 3.0)],
    )
    def test_known_operators(self, symbol, expected) -> None:
        assert apply_operator(symbol, 6.0, 2.0) == expected

    @pytest.mark.parametrize("symbol", ["^", "%", "", "//"])
    def test_unknown_operator(self, symbol) -> None:
        with pytest.raises(UnknownOperator) as exc_info:
            apply_operator(symbol, 1.0, 2.0)
        assert exc_info.value.operator == symbol

    def test_zero_divisor(self) -> None:
        with pytest.raises(DivisionByZero):
            apply_operator("/", 1.0, 0.0)


# =============================================================================
# ТЕСТЫ: ExpressionEvaluator + EvaluatorConfig
# =============================================================================


class TestExpressionEvaluator:
    """Тесты конфигурации evaluator"""

    def test_default_config(self) -> None:
        evaluator = ExpressionEvaluator()
        assert evaluator.config == EvaluatorConfig(strict_grammar=False)

    def test_config_frozen(self) -> None:
        config = EvaluatorConfig()
        with pytest.raises(Exception):
            config.strict_grammar = True  # type: ignore[misc]

    def test_strict_grammar_accepts_narrow_literals(self) -> None:
        evaluator = ExpressionEvaluator(EvaluatorConfig(strict_grammar=True))
        assert evaluator.evaluate("1.5 + 2") == 3.5
        assert evaluator.evaluate(" 12*3 ") == 36

    @pytest.mark.parametrize("expression", ["3.14+2", "3--2", "1+2+3", "-3+2"])
    def test_strict_grammar_rejects_wider_forms(self, expression) -> None:
        evaluator = ExpressionEvaluator(EvaluatorConfig(strict_grammar=True))
        with pytest.raises(MalformedExpression):
            evaluator.evaluate(expression)

    def test_default_grammar_is_tail_anchored(self) -> None:
        evaluator = ExpressionEvaluator()
        assert evaluator.matches_grammar("3.14+2")
        assert evaluator.matches_grammar("1+2 ")
        assert not evaluator.matches_grammar("1+2x")
        assert evaluator.matches_grammar("1+2\n")
        assert not evaluator.matches_grammar("2^2")

    def test_strict_grammar_rejects_non_ascii_digits(self) -> None:
        evaluator = ExpressionEvaluator(EvaluatorConfig(strict_grammar=True))
        assert not evaluator.matches_grammar("\u0663+2")
        assert evaluator.matches_grammar("3+2")
