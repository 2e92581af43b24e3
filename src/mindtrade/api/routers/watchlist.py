"""Watchlist endpoints."""

from fastapi import APIRouter, Depends, Response

from mindtrade.api.deps import get_watchlist_store
from mindtrade.api.schemas import WatchlistAddRequest, WatchlistItemResponse
from mindtrade.core.exceptions import RemoteCallError
from mindtrade.stores import WatchlistStore

router = APIRouter(prefix="/watchlist", tags=["watchlist"])


@router.get("", response_model=list[WatchlistItemResponse])
def list_watchlist(store: WatchlistStore = Depends(get_watchlist_store)) -> list[WatchlistItemResponse]:
    if store.error:
        raise RemoteCallError("Watchlist", store.error)
    return [WatchlistItemResponse.model_validate(i) for i in store.watchlist]


@router.post("", response_model=WatchlistItemResponse, status_code=201)
def add_to_watchlist(
    data: WatchlistAddRequest,
    store: WatchlistStore = Depends(get_watchlist_store),
) -> WatchlistItemResponse:
    return WatchlistItemResponse.model_validate(store.add_to_watchlist(data.ticker_symbol))


@router.delete("/{ticker_symbol}", status_code=204)
def remove_from_watchlist(
    ticker_symbol: str,
    store: WatchlistStore = Depends(get_watchlist_store),
) -> Response:
    store.remove_from_watchlist(ticker_symbol)
    return Response(status_code=204)
