"""
Domain models and value objects.

Contains the calculator's immutable entities: Operation, Operator,
BinaryExpression and Calculation.
"""

from src.core.domain.calculation import Calculation, encode_float
from src.core.domain.operation import BinaryExpression, Operation, Operator

__all__ = [
    # Operation module
    "Operation",
    "Operator",
    "BinaryExpression",
    # Calculation model
    "Calculation",
    "encode_float",
]
