"""Market indices, commentary and news sentiment endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from mindtrade.api.deps import get_commentary_service, get_earnings_store, get_indices_store
from mindtrade.api.schemas import (
    ArticleAnalysisResponse,
    CommentaryRequest,
    CommentaryResponse,
    EarningsEventResponse,
    EarningsResponse,
    IndexResponse,
    IndicesResponse,
    SentimentRequest,
    SentimentResponse,
)
from mindtrade.domain.views import NewsArticle
from mindtrade.services import CommentaryService, analyze_articles_fallback
from mindtrade.stores import EarningsStore, IndicesStore

router = APIRouter(prefix="/market", tags=["market"])


@router.get("/indices", response_model=IndicesResponse)
def get_indices(store: IndicesStore = Depends(get_indices_store)) -> IndicesResponse:
    """Latest index snapshot; loads on first call if the refresher is not running."""
    if not store.activated:
        store.activate()
    return IndicesResponse(
        indices=[IndexResponse.model_validate(i) for i in store.indices],
        loading=store.loading,
        error=store.error,
    )


@router.get("/earnings", response_model=EarningsResponse)
def get_earnings(store: EarningsStore = Depends(get_earnings_store)) -> EarningsResponse:
    """Earnings calendar for ?from=YYYY-MM-DD&to=YYYY-MM-DD; empty until both are given."""
    return EarningsResponse(
        earnings=[EarningsEventResponse.model_validate(e) for e in store.earnings],
        error=store.error,
    )


@router.post("/commentary", response_model=CommentaryResponse)
def get_commentary(
    data: CommentaryRequest,
    service: CommentaryService = Depends(get_commentary_service),
) -> CommentaryResponse:
    content = service.get_commentary(
        data.action,
        data.symbol,
        financial_data=data.financial_data,
        news_data=data.news_data,
        transcript=data.transcript,
    )
    return CommentaryResponse(action=data.action, symbol=data.symbol.strip().upper(), content=content)


@router.delete("/commentary/cache", status_code=204)
def clear_commentary_cache(
    action: Optional[str] = Query(None),
    symbol: Optional[str] = Query(None),
    service: CommentaryService = Depends(get_commentary_service),
) -> Response:
    """Drop one cached commentary (action + symbol) or the whole cache."""
    service.invalidate(action, symbol)
    return Response(status_code=204)


@router.post("/news/sentiment", response_model=SentimentResponse)
def news_sentiment(data: SentimentRequest) -> SentimentResponse:
    """Keyword-based sentiment/relevance for a batch of articles."""
    articles = [NewsArticle(**a.model_dump()) for a in data.articles]
    return SentimentResponse(
        results=[
            ArticleAnalysisResponse(id=r.id, sentiment=r.sentiment.value, relevance=r.relevance.value)
            for r in analyze_articles_fallback(articles)
        ]
    )
