"""
Core math modules для калькулятора

Арифметические примитивы, evaluator выражений и таксономия ошибок.
"""

# Errors
from src.core.math.errors import (
    CalculatorError,
    DivisionByZero,
    InsufficientOperands,
    MalformedExpression,
    MalformedOperand,
    NegativeRadicand,
    UnknownOperator,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    MIN_OPERANDS,
    coerce_operand,
    coerce_operands,
    is_exact_zero,
)

# Arithmetic
from src.core.math.arithmetic import (
    add,
    divide,
    multiply,
    sqrt,
    subtract,
)

# Expression Evaluator
from src.core.math.expression import (
    EvaluatorConfig,
    ExpressionEvaluator,
    apply_operator,
    eval_expr,
    parse_expr,
)

__all__ = [
    # Errors
    "CalculatorError",
    "DivisionByZero",
    "InsufficientOperands",
    "MalformedExpression",
    "MalformedOperand",
    "NegativeRadicand",
    "UnknownOperator",
    # Numerical Safeguards — Constants
    "MIN_OPERANDS",
    # Numerical Safeguards — Functions
    "coerce_operand",
    "coerce_operands",
    "is_exact_zero",
    # Arithmetic
    "add",
    "divide",
    "multiply",
    "sqrt",
    "subtract",
    # Expression Evaluator
    "EvaluatorConfig",
    "ExpressionEvaluator",
    "apply_operator",
    "eval_expr",
    "parse_expr",
]
