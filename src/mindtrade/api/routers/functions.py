"""HTTP surface of the proxy functions."""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from mindtrade.api.deps import get_context
from mindtrade.app_context import AppContext

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions/v1", tags=["functions"])


@router.options("/{name}")
def preflight(name: str, context: AppContext = Depends(get_context)) -> Response:
    result = context.functions.get(name).handle("OPTIONS", None)
    return Response(status_code=result.status_code, headers=result.headers)


@router.post("/{name}")
async def invoke(name: str, request: Request, context: AppContext = Depends(get_context)) -> Response:
    """Run a proxy function with the raw JSON body."""
    function = context.functions.get(name)
    raw = await request.body()
    try:
        body = json.loads(raw) if raw else {}
    except ValueError:
        logger.warning("%s: request body is not JSON", name)
        body = None
    result = function.handle("POST", body)
    return JSONResponse(status_code=result.status_code, content=result.body, headers=result.headers)
