"""Portfolio, trade and holdings endpoints."""

from decimal import Decimal

from fastapi import APIRouter, Depends, Response

from mindtrade.api.deps import get_market_data_service, get_portfolios_store, get_trades_store
from mindtrade.api.schemas import (
    HoldingResponse,
    HoldingsResponse,
    PortfolioCreateRequest,
    PortfolioResponse,
    TradeCreateRequest,
    TradeResponse,
)
from mindtrade.core.exceptions import RemoteCallError
from mindtrade.services import MarketDataService
from mindtrade.stores import PortfoliosStore, TradeCreate, TradesStore

router = APIRouter(prefix="/portfolios", tags=["portfolios"])


@router.get("", response_model=list[PortfolioResponse])
def list_portfolios(store: PortfoliosStore = Depends(get_portfolios_store)) -> list[PortfolioResponse]:
    if store.error:
        raise RemoteCallError("Portfolios", store.error)
    return [PortfolioResponse.model_validate(p) for p in store.portfolios]


@router.post("", response_model=PortfolioResponse, status_code=201)
def create_portfolio(
    data: PortfolioCreateRequest,
    store: PortfoliosStore = Depends(get_portfolios_store),
) -> PortfolioResponse:
    return PortfolioResponse.model_validate(store.create_portfolio(data.name, data.description))


@router.delete("/{portfolio_id}", status_code=204)
def delete_portfolio(
    portfolio_id: str,
    store: PortfoliosStore = Depends(get_portfolios_store),
) -> Response:
    store.delete_portfolio(portfolio_id)
    return Response(status_code=204)


@router.get("/{portfolio_id}/trades", response_model=list[TradeResponse])
def list_trades(store: TradesStore = Depends(get_trades_store)) -> list[TradeResponse]:
    if store.error:
        raise RemoteCallError("Trades", store.error)
    return [TradeResponse.model_validate(t) for t in store.trades]


@router.post("/{portfolio_id}/trades", response_model=TradeResponse, status_code=201)
def create_trade(
    data: TradeCreateRequest,
    store: TradesStore = Depends(get_trades_store),
) -> TradeResponse:
    return TradeResponse.model_validate(store.create_trade(TradeCreate(**data.model_dump())))


@router.delete("/{portfolio_id}/trades/{trade_id}", status_code=204)
def delete_trade(trade_id: str, store: TradesStore = Depends(get_trades_store)) -> Response:
    store.delete_trade(trade_id)
    return Response(status_code=204)


@router.get("/{portfolio_id}/holdings", response_model=HoldingsResponse)
def get_holdings(
    store: TradesStore = Depends(get_trades_store),
    market_data: MarketDataService = Depends(get_market_data_service),
) -> HoldingsResponse:
    """Current holdings valued at live prices (recomputed on every call)."""
    holdings = store.holdings(market_data.get_quotes(store.symbols()))
    return HoldingsResponse(
        holdings=[HoldingResponse.model_validate(h) for h in holdings],
        total_value=sum((h.total_value for h in holdings), Decimal("0")),
    )
