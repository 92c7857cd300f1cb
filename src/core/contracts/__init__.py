"""
Contract Validation Module

Модуль для валидации JSON контрактов калькулятора.
"""

from .validators import (
    CalculationValidator,
    ContractValidator,
    SchemaLoader,
    validate_calculation,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculationValidator",
    # Functions
    "validate_calculation",
]
