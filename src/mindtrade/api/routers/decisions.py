"""Decision journal endpoints."""

from fastapi import APIRouter, Depends

from mindtrade.api.deps import get_decisions_store
from mindtrade.api.schemas import (
    BadgeResponse,
    DecisionCreateRequest,
    DecisionListResponse,
    DecisionResponse,
    WeeklyStatsResponse,
)
from mindtrade.core.exceptions import RemoteCallError
from mindtrade.stores import DecisionCreate, DecisionsStore

router = APIRouter(prefix="/decisions", tags=["decisions"])


def _loaded(store: DecisionsStore) -> DecisionsStore:
    if store.error:
        raise RemoteCallError("Decisions", store.error)
    return store


@router.get("", response_model=DecisionListResponse)
def list_decisions(store: DecisionsStore = Depends(get_decisions_store)) -> DecisionListResponse:
    """List the session user's decisions, newest first (empty when signed out)."""
    decisions = _loaded(store).decisions
    return DecisionListResponse(
        decisions=[DecisionResponse.model_validate(d) for d in decisions],
        count=len(decisions),
    )


@router.post("", response_model=DecisionResponse, status_code=201)
def create_decision(
    data: DecisionCreateRequest,
    store: DecisionsStore = Depends(get_decisions_store),
) -> DecisionResponse:
    """Record a new decision for the session user."""
    decision = store.create_decision(DecisionCreate(**data.model_dump()))
    return DecisionResponse.model_validate(decision)


@router.get("/stats/weekly", response_model=WeeklyStatsResponse)
def weekly_stats(store: DecisionsStore = Depends(get_decisions_store)) -> WeeklyStatsResponse:
    return WeeklyStatsResponse.model_validate(_loaded(store).get_weekly_stats())


@router.get("/badges", response_model=list[BadgeResponse])
def badges(store: DecisionsStore = Depends(get_decisions_store)) -> list[BadgeResponse]:
    return [BadgeResponse.model_validate(b) for b in _loaded(store).achievement_badges()]
