"""Analytics: transaction log summaries."""

from crossvision.analytics.portfolio import (
    Transaction,
    TransactionType,
    PortfolioSummary,
    summarize_transactions,
    dca_average_cost,
    unrealized_return_pct,
)

__all__ = [
    "Transaction",
    "TransactionType",
    "PortfolioSummary",
    "summarize_transactions",
    "dca_average_cost",
    "unrealized_return_pct",
]
