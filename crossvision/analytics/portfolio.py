"""
Transaction log analytics: average-cost holdings per symbol and DCA what-ifs.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List


class TransactionType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


@dataclass
class Transaction:
    """One logged buy or sell."""
    id: str
    symbol: str
    type: TransactionType
    shares: float
    price: float
    date: str


@dataclass
class PortfolioSummary:
    """Holdings for one symbol under the average-cost method."""
    symbol: str
    total_shares: float = 0.0
    avg_cost: float = 0.0
    total_cost: float = 0.0


def summarize_transactions(transactions: Iterable[Transaction]) -> List[PortfolioSummary]:
    """
    Replay transactions in order. Buys update the average cost; sells reduce shares
    at the current average cost. Only symbols with shares left are returned.
    """
    summaries: Dict[str, PortfolioSummary] = {}
    for tx in transactions:
        s = summaries.setdefault(tx.symbol, PortfolioSummary(symbol=tx.symbol))
        if TransactionType(tx.type) == TransactionType.BUY:
            s.total_cost += tx.shares * tx.price
            s.total_shares += tx.shares
            s.avg_cost = s.total_cost / s.total_shares if s.total_shares > 0 else 0.0
        else:
            s.total_shares -= tx.shares
            s.total_cost = s.total_shares * s.avg_cost
    return [s for s in summaries.values() if s.total_shares > 0]


def dca_average_cost(summary: PortfolioSummary, extra_shares: float, price: float) -> float:
    """Average cost after buying extra_shares at price."""
    shares = summary.total_shares + extra_shares
    if shares <= 0:
        return 0.0
    return (summary.total_shares * summary.avg_cost + extra_shares * price) / shares


def unrealized_return_pct(summary: PortfolioSummary, price: float) -> float:
    """Percent gain of price over the average cost; 0 with no cost basis."""
    if summary.avg_cost <= 0:
        return 0.0
    return (price - summary.avg_cost) / summary.avg_cost * 100.0
