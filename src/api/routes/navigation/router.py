"""Endpoints de estado e comandos de navegação da camada de view."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from fastapi import APIRouter, Depends

from api.routes.dependencies import get_active_runtime, get_runtime
from api.routes.schemas import FeatureViewsResponse, TruncateRequest, ViewHandleBody
from app.bootstrap import NavigationRuntime
from routing.routes.features import AppTab, Feature

if TYPE_CHECKING:
    from routing.types import ViewHandle

router = APIRouter()

Runtime = Annotated[NavigationRuntime, Depends(get_runtime)]
ActiveRuntime = Annotated[NavigationRuntime, Depends(get_active_runtime)]


def _view_body(handle: ViewHandle) -> ViewHandleBody:
    return ViewHandleBody(feature=handle.feature.value, view=handle.view, params=handle.params)


@router.get("")
async def get_navigation(runtime: Runtime) -> dict[str, Any]:
    """Snapshot completo: aba, gate de auth e pilhas das seis features."""
    return runtime.coordinator.snapshot().to_dict()


@router.post("/tabs/{tab}")
async def switch_tab(tab: AppTab, runtime: ActiveRuntime) -> dict[str, Any]:
    runtime.coordinator.switch_tab(tab)
    return runtime.coordinator.snapshot().to_dict()


@router.get("/{feature}/views", response_model=FeatureViewsResponse)
async def get_feature_views(feature: Feature, runtime: Runtime) -> FeatureViewsResponse:
    """Views a renderizar para a feature (raiz + pilha)."""
    coordinator = runtime.coordinator.coordinator_for(feature)
    stack = [coordinator.build(item.route) for item in coordinator.navigation_stack]
    return FeatureViewsResponse(
        feature=feature.value,
        root=_view_body(coordinator.root_view()),
        stack=[_view_body(handle) for handle in stack if handle is not None],
    )


@router.post("/{feature}/pop")
async def pop(feature: Feature, runtime: ActiveRuntime) -> dict[str, Any]:
    coordinator = runtime.coordinator.coordinator_for(feature)
    coordinator.pop()
    return coordinator.snapshot().to_dict()


@router.post("/{feature}/truncate")
async def truncate(
    feature: Feature, body: TruncateRequest, runtime: ActiveRuntime
) -> dict[str, Any]:
    """Sincroniza a pilha com a back-navigation feita na view."""
    coordinator = runtime.coordinator.coordinator_for(feature)
    coordinator.truncate(body.length)
    return coordinator.snapshot().to_dict()


@router.post("/{feature}/dismiss")
async def dismiss(feature: Feature, runtime: ActiveRuntime) -> dict[str, Any]:
    coordinator = runtime.coordinator.coordinator_for(feature)
    coordinator.dismiss()
    return coordinator.snapshot().to_dict()
