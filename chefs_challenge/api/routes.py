from __future__ import annotations

from collections.abc import Callable

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect, status

from chefs_challenge.api.deps import get_controller
from chefs_challenge.api.models import (
    AppendIngredientRequest,
    IngredientDefinitionModel,
    IngredientListResponse,
    SessionState,
)
from chefs_challenge.ingredients import catalog
from chefs_challenge.session import SessionController, SessionStateError
from chefs_challenge.websocket_hub import hub

router = APIRouter()


def _apply(action: Callable[[], SessionState]) -> SessionState:
    try:
        return action()
    except SessionStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.websocket("/ws/session")
async def session_updates_ws(websocket: WebSocket, controller: SessionController = Depends(get_controller)) -> None:
    hub.bind(controller)
    await hub.connect(websocket)

    try:
        await websocket.send_json({"type": "session_snapshot", "session": controller.snapshot().model_dump(mode="json")})
        # Keep the socket open; client can optionally send pings.
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await hub.disconnect(websocket)
    except Exception:
        await hub.disconnect(websocket)
        raise


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/ingredients", response_model=IngredientListResponse)
async def list_ingredients_route() -> IngredientListResponse:
    return IngredientListResponse(
        ingredients=[
            IngredientDefinitionModel(
                kind=d.kind,
                name=d.name,
                color=d.color,
                height=d.height,
                radius=d.radius,
                shape=d.shape,
            )
            for d in catalog()
        ]
    )


@router.get("/session", response_model=SessionState)
async def get_session_route(controller: SessionController = Depends(get_controller)) -> SessionState:
    return controller.snapshot()


@router.post("/session/start", response_model=SessionState)
async def start_route(controller: SessionController = Depends(get_controller)) -> SessionState:
    return _apply(controller.start)


@router.post("/session/ingredients", response_model=SessionState)
async def append_ingredient_route(
    payload: AppendIngredientRequest,
    controller: SessionController = Depends(get_controller),
) -> SessionState:
    return _apply(lambda: controller.append_ingredient(payload.kind))


@router.post("/session/undo", response_model=SessionState)
async def undo_route(controller: SessionController = Depends(get_controller)) -> SessionState:
    return _apply(controller.undo)


@router.post("/session/redo", response_model=SessionState)
async def redo_route(controller: SessionController = Depends(get_controller)) -> SessionState:
    return _apply(controller.redo)


@router.post("/session/reset", response_model=SessionState)
async def reset_route(controller: SessionController = Depends(get_controller)) -> SessionState:
    return _apply(controller.reset_stack)


@router.post("/session/submit", response_model=SessionState)
async def submit_route(controller: SessionController = Depends(get_controller)) -> SessionState:
    return _apply(controller.submit)


@router.post("/session/next-level", response_model=SessionState)
async def next_level_route(controller: SessionController = Depends(get_controller)) -> SessionState:
    return _apply(controller.next_level)


@router.post("/session/menu", response_model=SessionState)
async def return_to_menu_route(controller: SessionController = Depends(get_controller)) -> SessionState:
    return _apply(controller.return_to_menu)
