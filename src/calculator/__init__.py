"""Calculator — фасад над арифметическим ядром, возвращающий записи Calculation."""

from .service import (
    Calculator,
    CalculatorConfig,
)

__all__ = [
    "Calculator",
    "CalculatorConfig",
]
