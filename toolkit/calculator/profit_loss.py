"""
Option Profit / Loss Calculator
===============================
Stop loss, target and per-lot P&L from premium, lot size, SL% and
target multiplier.

Invalid or blank inputs never raise: they count as zero and the
percentage figures fall back to zero when the premium is zero.
"""

from dataclasses import asdict, dataclass

from toolkit.constants import (
    DEFAULT_LOT_SIZE,
    DEFAULT_PREMIUM,
    DEFAULT_SL_PERCENT,
    DEFAULT_TARGET_MULTIPLIER,
)
from toolkit.utils import round_half_away, safe_float


FORMULAS = [
    "SL Price = Premium - (SL% of Premium)",
    "TP Price = Premium + (SL% of Premium × Multiplier)",
    "Loss per qty = Premium - SL Price",
    "Total Loss = Loss per qty × Lot Size",
    "Profit per qty = TP Price - Premium",
    "Total Profit = Profit per qty × Lot Size",
    "Amount to Trade = Premium × Lot Size",
    "Total Profit with traded amount = Total Profit + Amount to Trade",
    "Total Loss with traded amount = Amount to Trade - Total Loss",
]


@dataclass
class CalculatorInputs:
    """Calculator inputs as entered by the user."""
    premium: float = DEFAULT_PREMIUM
    lot_size: float = DEFAULT_LOT_SIZE
    sl_percent: float = DEFAULT_SL_PERCENT
    target_multiplier: float = DEFAULT_TARGET_MULTIPLIER

    @classmethod
    def from_raw(
        cls,
        premium=None,
        lot_size=None,
        sl_percent=None,
        target_multiplier=None,
    ) -> "CalculatorInputs":
        """Build inputs from raw form values, coercing anything unusable to 0."""
        return cls(
            premium=safe_float(premium),
            lot_size=safe_float(lot_size),
            sl_percent=safe_float(sl_percent),
            target_multiplier=safe_float(target_multiplier),
        )


@dataclass(frozen=True)
class CalculatorResult:
    """Derived figures, each rounded to 2 decimals."""
    sl_amount: float
    sl_price: float
    tp_price: float
    loss_per_qty: float
    total_loss: float
    profit_per_qty: float
    total_profit: float
    loss_percent: float
    profit_percent: float
    amount_needed: float
    total_profit_with_investment: float
    total_loss_with_investment: float

    def to_dict(self) -> dict:
        return asdict(self)


def reset_inputs() -> CalculatorInputs:
    """Return the default inputs (premium 100, lot 20, SL 2%, multiplier 5)."""
    return CalculatorInputs()


def _percent_of(part: float, whole: float) -> float:
    if whole == 0:
        return 0.0
    return part / whole * 100


def calculate_profit_loss(inputs: CalculatorInputs) -> CalculatorResult:
    """
    Derive every calculator figure in one pass.

    Args:
        inputs: Calculator inputs; fields are coerced again so stray
            strings or None still count as 0

    Returns:
        CalculatorResult with all values rounded to 2 decimals
    """
    premium = safe_float(inputs.premium)
    lot_size = safe_float(inputs.lot_size)
    sl_percent = safe_float(inputs.sl_percent)
    multiplier = safe_float(inputs.target_multiplier)

    sl_amount = (sl_percent / 100) * premium
    sl_price = premium - sl_amount
    tp_price = premium + sl_amount * multiplier

    loss_per_qty = premium - sl_price
    total_loss = loss_per_qty * lot_size

    profit_per_qty = tp_price - premium
    total_profit = profit_per_qty * lot_size

    amount_needed = premium * lot_size

    return CalculatorResult(
        sl_amount=round_half_away(sl_amount),
        sl_price=round_half_away(sl_price),
        tp_price=round_half_away(tp_price),
        loss_per_qty=round_half_away(loss_per_qty),
        total_loss=round_half_away(total_loss),
        profit_per_qty=round_half_away(profit_per_qty),
        total_profit=round_half_away(total_profit),
        loss_percent=round_half_away(_percent_of(loss_per_qty, premium)),
        profit_percent=round_half_away(_percent_of(profit_per_qty, premium)),
        amount_needed=round_half_away(amount_needed),
        total_profit_with_investment=round_half_away(total_profit + amount_needed),
        total_loss_with_investment=round_half_away(amount_needed - total_loss),
    )
