"""
Journal Models
==============
Trade record, status and summary types for the paper trade journal.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum

from toolkit.utils import safe_float, safe_int


class TradeStatus(Enum):
    """Paper trade status enumeration."""
    PENDING = "pending"   # Open, outcome not yet marked
    DONE = "done"         # Target hit
    CLOSE = "close"       # Stopped out

    @property
    def is_terminal(self) -> bool:
        return self is not TradeStatus.PENDING

    @classmethod
    def parse(cls, value: TradeStatus | str) -> TradeStatus:
        """Accept a TradeStatus or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid trade status: {value!r}") from None


@dataclass
class TradeRecord:
    """
    A single paper trade.

    Derived price fields are fixed at creation; only ``status`` changes
    afterwards.
    """
    id: int
    option_type: str
    strike_price: str
    lot_size: int
    premium_price: float
    lot_size_amount: float
    stop_loss_per_qty: float
    target_per_qty: float
    stop_loss_whole: float
    profit_per_qty: float
    profit_whole: float
    loss_per_qty: float
    status: TradeStatus = TradeStatus.PENDING
    created_at: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "option_type": self.option_type,
            "strike_price": self.strike_price,
            "lot_size": self.lot_size,
            "premium_price": self.premium_price,
            "lot_size_amount": self.lot_size_amount,
            "stop_loss_per_qty": self.stop_loss_per_qty,
            "target_per_qty": self.target_per_qty,
            "stop_loss_whole": self.stop_loss_whole,
            "profit_per_qty": self.profit_per_qty,
            "profit_whole": self.profit_whole,
            "loss_per_qty": self.loss_per_qty,
            "status": self.status.value,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> TradeRecord:
        """
        Rebuild a record from its stored form.

        Unknown keys are ignored. Numeric fields stored as strings
        (e.g. "98.00") are accepted.
        """
        known = {f.name for f in fields(cls)}
        data = {k: v for k, v in data.items() if k in known}
        if "id" not in data:
            raise ValueError("Trade record is missing 'id'")

        return cls(
            id=int(data["id"]),
            option_type=str(data.get("option_type", "")),
            strike_price=str(data.get("strike_price", "")),
            lot_size=safe_int(data.get("lot_size")),
            premium_price=safe_float(data.get("premium_price")),
            lot_size_amount=safe_float(data.get("lot_size_amount")),
            stop_loss_per_qty=safe_float(data.get("stop_loss_per_qty")),
            target_per_qty=safe_float(data.get("target_per_qty")),
            stop_loss_whole=safe_float(data.get("stop_loss_whole")),
            profit_per_qty=safe_float(data.get("profit_per_qty")),
            profit_whole=safe_float(data.get("profit_whole")),
            loss_per_qty=safe_float(data.get("loss_per_qty")),
            status=TradeStatus.parse(data.get("status", TradeStatus.PENDING.value)),
            created_at=str(data.get("created_at", "")),
        )


@dataclass(frozen=True)
class JournalSummary:
    """Aggregate totals over the journal."""
    total_invested: float
    total_profit: float
    total_loss: float
    final_adjusted_profit: float
    total_trades: int = 0
    pending_trades: int = 0
    done_trades: int = 0
    closed_trades: int = 0

    @property
    def hit_rate(self) -> float:
        """Share of marked trades that hit target, in percent."""
        marked = self.done_trades + self.closed_trades
        if marked == 0:
            return 0.0
        return self.done_trades / marked * 100
