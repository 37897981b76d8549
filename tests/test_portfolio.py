"""Unit tests for analytics.portfolio."""

import pytest

from crossvision.analytics.portfolio import (
    Transaction,
    TransactionType,
    PortfolioSummary,
    summarize_transactions,
    dca_average_cost,
    unrealized_return_pct,
)


def tx(symbol, kind, shares, price):
    return Transaction(id=f"{symbol}-{kind}-{shares}", symbol=symbol, type=kind, shares=shares, price=price, date="2024-01-01")


def test_average_cost():
    summaries = summarize_transactions([
        tx("AAPL", TransactionType.BUY, 10, 100.0),
        tx("AAPL", TransactionType.BUY, 10, 120.0),
    ])
    assert len(summaries) == 1
    s = summaries[0]
    assert s.total_shares == 20
    assert s.avg_cost == pytest.approx(110.0)
    assert s.total_cost == pytest.approx(2200.0)


def test_sell_keeps_avg_cost_and_drops_closed():
    summaries = summarize_transactions([
        tx("AAPL", TransactionType.BUY, 10, 100.0),
        tx("AAPL", "SELL", 4, 150.0),
        tx("MSFT", TransactionType.BUY, 5, 300.0),
        tx("MSFT", TransactionType.SELL, 5, 310.0),
    ])
    assert [s.symbol for s in summaries] == ["AAPL"]
    assert summaries[0].total_shares == 6
    assert summaries[0].avg_cost == pytest.approx(100.0)
    assert summaries[0].total_cost == pytest.approx(600.0)


def test_dca_average_cost():
    s = PortfolioSummary(symbol="AAPL", total_shares=10, avg_cost=100.0, total_cost=1000.0)
    assert dca_average_cost(s, 10, 80.0) == pytest.approx(90.0)
    assert dca_average_cost(PortfolioSummary(symbol="X"), 0, 50.0) == 0.0


def test_unrealized_return():
    s = PortfolioSummary(symbol="AAPL", total_shares=10, avg_cost=100.0, total_cost=1000.0)
    assert unrealized_return_pct(s, 125.0) == pytest.approx(25.0)
    assert unrealized_return_pct(PortfolioSummary(symbol="X"), 10.0) == 0.0
