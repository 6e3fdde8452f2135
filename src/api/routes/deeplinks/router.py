"""Endpoint de entrada de deep links."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from api.routes.dependencies import get_active_runtime
from api.routes.schemas import DeepLinkErrorBody, DeepLinkRequest, DeepLinkResponse
from app.bootstrap import NavigationRuntime

router = APIRouter()


@router.post("", response_model=DeepLinkResponse)
async def receive_deep_link(
    body: DeepLinkRequest,
    runtime: Annotated[NavigationRuntime, Depends(get_active_runtime)],
) -> DeepLinkResponse:
    """Entrega o deep link ao App Coordinator.

    Erros de parsing são respondidos como desfecho `rejected` (200):
    o link é descartado e a navegação não muda.
    """
    result = runtime.coordinator.handle_deep_link(body.uri)
    error = None
    if result.error is not None:
        error = DeepLinkErrorBody(
            kind=result.error.kind.value,
            detail=result.error.detail,
            description=result.error.description,
        )
    return DeepLinkResponse(
        outcome=result.outcome.value,
        route_id=result.route.route_id if result.route else None,
        error=error,
        navigation=runtime.coordinator.snapshot().to_dict(),
    )
