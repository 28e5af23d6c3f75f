"""
Calculator Module
=================
Option profit/loss calculator.
"""

from .profit_loss import (
    FORMULAS,
    CalculatorInputs,
    CalculatorResult,
    calculate_profit_loss,
    reset_inputs,
)

__all__ = [
    "FORMULAS",
    "CalculatorInputs",
    "CalculatorResult",
    "calculate_profit_loss",
    "reset_inputs",
]
