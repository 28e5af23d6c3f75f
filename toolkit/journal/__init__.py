"""
Journal Module
==============
Paper trade journal, its records and storage backends.
"""

from .journal import TradeJournal, TradeValidationError, build_trade_record
from .models import JournalSummary, TradeRecord, TradeStatus
from .storage import InMemoryKeyValueStore, KeyValueStore, SQLiteKeyValueStore

__all__ = [
    "TradeJournal",
    "TradeValidationError",
    "build_trade_record",
    "JournalSummary",
    "TradeRecord",
    "TradeStatus",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "SQLiteKeyValueStore",
]
