"""
AI Company Simulation — News and History Bookkeeping
Bounded, oldest-first eviction for the news feed and the chart history.
"""

import logging

from ..config import LedgerConfig, LEDGER
from .state import CompanyState

logger = logging.getLogger(__name__)


def year_label(time: float, ledger: LedgerConfig = LEDGER) -> str:
    """Prefix for a news line, e.g. 'Year 2025: '."""
    return f"Year {ledger.year_at(time)}: "


def push_news(state: CompanyState, message: str, ledger: LedgerConfig = LEDGER) -> str:
    """Append a dated line to the news feed, evicting the oldest past the limit."""
    entry = year_label(state.time, ledger) + message
    state.news.append(entry)
    overflow = len(state.news) - ledger.news_limit
    if overflow > 0:
        del state.news[:overflow]
    logger.debug(f"News: {entry}")
    return entry


def record_history(state: CompanyState, ledger: LedgerConfig = LEDGER):
    """Sample time, compute capacity, net revenue, and AI power."""
    state.history.append(
        state.time,
        state.compute_capacity,
        state.net_revenue_per_second,
        state.ai_power,
        limit=ledger.history_limit,
    )
