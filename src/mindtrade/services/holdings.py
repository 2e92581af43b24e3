"""Derive holdings from a portfolio's trades and live quotes."""

from collections import OrderedDict
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from mindtrade.domain.models import Trade, TradeAction
from mindtrade.domain.views import Holding, Quote


class _Position:
    __slots__ = ("shares", "cost", "company_name")

    def __init__(self) -> None:
        self.shares = Decimal("0")
        self.cost = Decimal("0")
        self.company_name: Optional[str] = None


def compute_holdings(
    trades: Iterable[Trade],
    quotes: Optional[Mapping[str, Quote]] = None,
) -> list[Holding]:
    """
    Replay trades in chronological order using the average-cost method.

    Sells reduce cost at the running average price; a position sold down to
    zero (or below) is dropped and restarts from scratch on the next buy.
    Tickers without a quote are valued at their average price.
    """
    quotes = quotes or {}
    ordered = sorted(
        trades,
        key=lambda t: (t.trade_date, t.created_at.timestamp() if t.created_at else 0.0),
    )

    positions: "OrderedDict[str, _Position]" = OrderedDict()
    for trade in ordered:
        symbol = trade.ticker_symbol.upper()
        position = positions.setdefault(symbol, _Position())
        if trade.company_name:
            position.company_name = trade.company_name

        if trade.action == TradeAction.BUY:
            position.shares += trade.shares
            position.cost += trade.shares * trade.price_per_share
        else:
            if position.shares <= 0:
                continue
            avg = position.cost / position.shares
            sold = min(trade.shares, position.shares)
            position.shares -= sold
            position.cost -= sold * avg
            if position.shares <= 0:
                position.shares = Decimal("0")
                position.cost = Decimal("0")

    holdings: list[Holding] = []
    for symbol, position in positions.items():
        if position.shares <= 0:
            continue
        avg_price = position.cost / position.shares
        quote = quotes.get(symbol)
        holdings.append(
            Holding(
                ticker_symbol=symbol,
                shares=position.shares,
                avg_price=avg_price,
                current_price=quote.price if quote else avg_price,
                company_name=position.company_name or (quote.name if quote else None),
            )
        )

    holdings.sort(key=lambda h: h.total_value, reverse=True)
    return holdings
