"""
Paper Trade Journal
===================
Record hypothetical option trades, mark their outcome and total them up.
"""

import json
import logging
import math
from datetime import datetime
from typing import Callable, Iterator, List, Optional, Tuple, Union

import pandas as pd

from toolkit.constants import (
    DATE_DISPLAY_FORMAT,
    JOURNAL_DEFAULT_LOT_SIZE,
    JOURNAL_STOP_LOSS_FACTOR,
    JOURNAL_STORAGE_KEY,
    JOURNAL_TARGET_MULTIPLIER,
)
from toolkit.utils import round_half_away

from .models import JournalSummary, TradeRecord, TradeStatus
from .storage import KeyValueStore

logger = logging.getLogger(__name__)


class TradeValidationError(ValueError):
    """Raised when a new trade is missing required fields or has unparsable numbers."""


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_premium(value) -> float:
    try:
        premium = float(str(value).strip())
    except (TypeError, ValueError):
        raise TradeValidationError(f"Premium price must be a number, got {value!r}") from None
    if not math.isfinite(premium):
        raise TradeValidationError(f"Premium price must be a number, got {value!r}")
    return premium


def _parse_lot_size(value, default: int) -> int:
    if _is_blank(value):
        return default
    try:
        return int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        raise TradeValidationError(f"Lot size must be a whole number, got {value!r}") from None


def build_trade_record(
    trade_id: int,
    option_type: str,
    strike_price: str,
    premium: float,
    lot_size: int,
    created_at: str,
) -> TradeRecord:
    """
    Compute a new pending trade with its fixed stop loss and target.

    Stop loss sits 2% below the premium and the target pays five times
    the stop distance. Each derived field is rounded to 2 decimals from
    unrounded intermediates.
    """
    stop_loss_per_qty = premium * JOURNAL_STOP_LOSS_FACTOR
    stop_distance = premium - stop_loss_per_qty
    stop_loss_whole = stop_distance * lot_size
    target_per_qty = premium + stop_distance * JOURNAL_TARGET_MULTIPLIER
    profit_per_qty = target_per_qty - premium
    profit_whole = profit_per_qty * lot_size

    return TradeRecord(
        id=trade_id,
        option_type=option_type,
        strike_price=strike_price,
        lot_size=lot_size,
        premium_price=premium,
        lot_size_amount=premium * lot_size,
        stop_loss_per_qty=round_half_away(stop_loss_per_qty),
        target_per_qty=round_half_away(target_per_qty),
        stop_loss_whole=round_half_away(stop_loss_whole),
        profit_per_qty=round_half_away(profit_per_qty),
        profit_whole=round_half_away(profit_whole),
        loss_per_qty=round_half_away(stop_distance),
        status=TradeStatus.PENDING,
        created_at=created_at,
    )


class TradeJournal:
    """
    Ordered list of paper trades mirrored to a key-value store.

    Features:
    - Add trades with fixed 2% stop loss / 5x target
    - Mark trades done (target) or close (stopped out)
    - Permanent delete
    - Totals over invested amount, realised profit and loss

    The list is read from the store once, at construction, and the whole
    list is written back after every mutation.
    """

    def __init__(
        self,
        store: KeyValueStore,
        storage_key: str = JOURNAL_STORAGE_KEY,
        default_lot_size: int = JOURNAL_DEFAULT_LOT_SIZE,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the journal.

        Args:
            store: Persistence collaborator
            storage_key: Key holding the serialized trade list
            default_lot_size: Lot size used when the form leaves it blank
            clock: Source of the current time (ids and dates)
        """
        self.store = store
        self.storage_key = storage_key
        self.default_lot_size = default_lot_size
        self._clock = clock
        self._trades: List[TradeRecord] = self._load()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> List[TradeRecord]:
        """Load trades from the store; anything unreadable yields an empty list."""
        raw = self.store.get(self.storage_key)
        if not raw:
            return []

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Error loading trades from '{self.storage_key}': {e}")
            return []

        if not isinstance(payload, list):
            logger.error(f"Stored trades under '{self.storage_key}' are not a list, ignoring")
            return []

        trades = []
        for item in payload:
            try:
                trades.append(TradeRecord.from_dict(item))
            except (AttributeError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed trade record {item!r}: {e}")

        logger.info(f"Loaded {len(trades)} paper trades")
        return trades

    def _save(self) -> None:
        payload = json.dumps([trade.to_dict() for trade in self._trades])
        self.store.set(self.storage_key, payload)

    def _next_id(self, now: datetime) -> int:
        trade_id = int(now.timestamp() * 1000)
        existing = {trade.id for trade in self._trades}
        while trade_id in existing:
            trade_id += 1
        return trade_id

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def trades(self) -> Tuple[TradeRecord, ...]:
        """Trades in insertion order."""
        return tuple(self._trades)

    def __len__(self) -> int:
        return len(self._trades)

    def __iter__(self) -> Iterator[TradeRecord]:
        return iter(tuple(self._trades))

    def get_trade(self, trade_id: int) -> Optional[TradeRecord]:
        """Get single trade by ID."""
        for trade in self._trades:
            if trade.id == trade_id:
                return trade
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_trade(
        self,
        option_type: str,
        strike_price: Union[str, float],
        premium_price: Union[str, float],
        lot_size: Union[str, int, None] = None,
    ) -> TradeRecord:
        """
        Add a new pending trade to the end of the journal.

        Args:
            option_type: Option type, usually CE or PE
            strike_price: Strike price as entered
            premium_price: Premium paid per unit
            lot_size: Quantity; blank uses the default lot size

        Returns:
            The created TradeRecord

        Raises:
            TradeValidationError: If a required field is blank or a number
                cannot be parsed
        """
        missing = [
            name for name, value in (
                ("option type", option_type),
                ("strike price", strike_price),
                ("premium price", premium_price),
            )
            if _is_blank(value)
        ]
        if missing:
            raise TradeValidationError(f"Required field(s) missing: {', '.join(missing)}")

        premium = _parse_premium(premium_price)
        lot = _parse_lot_size(lot_size, self.default_lot_size)

        now = self._clock()
        trade = build_trade_record(
            trade_id=self._next_id(now),
            option_type=str(option_type).strip().upper(),
            strike_price=str(strike_price).strip(),
            premium=premium,
            lot_size=lot,
            created_at=now.strftime(DATE_DISPLAY_FORMAT),
        )

        self._trades.append(trade)
        self._save()

        logger.info(
            f"Added paper trade {trade.id}: {trade.option_type} {trade.strike_price} "
            f"@ {trade.premium_price} x {trade.lot_size}"
        )
        return trade

    def mark_status(self, trade_id: int, status: Union[TradeStatus, str]) -> bool:
        """
        Mark a trade done (target hit) or close (stopped out).

        Args:
            trade_id: Trade ID to update
            status: "done" or "close"

        Returns:
            True if the trade was found and updated
        """
        new_status = TradeStatus.parse(status)
        if not new_status.is_terminal:
            raise ValueError(f"Trades can only be marked done or close, not {new_status.value!r}")

        trade = self.get_trade(trade_id)
        if trade is None:
            logger.warning(f"Cannot mark unknown trade {trade_id}")
            return False

        trade.status = new_status
        self._save()

        logger.info(f"Marked paper trade {trade_id} as {new_status.value}")
        return True

    def delete_trade(self, trade_id: int) -> bool:
        """Delete a trade permanently."""
        remaining = [trade for trade in self._trades if trade.id != trade_id]
        if len(remaining) == len(self._trades):
            return False

        self._trades = remaining
        self._save()

        logger.info(f"Deleted paper trade {trade_id}")
        return True

    def clear(self) -> int:
        """Delete every trade. Returns the number removed."""
        removed = len(self._trades)
        self._trades = []
        self._save()
        logger.info(f"Cleared {removed} paper trades")
        return removed

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def to_dataframe(self) -> pd.DataFrame:
        """Trades as a DataFrame, one row per trade in journal order."""
        columns = list(TradeRecord.__dataclass_fields__)
        if not self._trades:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame([trade.to_dict() for trade in self._trades], columns=columns)

    def summary(self) -> JournalSummary:
        """
        Calculate journal totals.

        Returns:
            JournalSummary where invested counts every trade, profit counts
            done trades and loss counts closed trades
        """
        trades = self.to_dataframe()

        if trades.empty:
            return JournalSummary(
                total_invested=0.0,
                total_profit=0.0,
                total_loss=0.0,
                final_adjusted_profit=0.0,
            )

        done = trades["status"] == TradeStatus.DONE.value
        closed = trades["status"] == TradeStatus.CLOSE.value

        total_invested = float(trades["lot_size_amount"].sum())
        total_profit = float(trades.loc[done, "profit_whole"].sum())
        total_loss = float(trades.loc[closed, "stop_loss_whole"].sum())

        return JournalSummary(
            total_invested=round_half_away(total_invested),
            total_profit=round_half_away(total_profit),
            total_loss=round_half_away(total_loss),
            final_adjusted_profit=round_half_away(total_profit - total_loss),
            total_trades=len(trades),
            pending_trades=int((trades["status"] == TradeStatus.PENDING.value).sum()),
            done_trades=int(done.sum()),
            closed_trades=int(closed.sum()),
        )
