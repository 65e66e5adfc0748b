from fastapi import FastAPI
import logging

from chefs_challenge.api.deps import init_controller
from chefs_challenge.api.routes import router
from chefs_challenge.config import settings_from_env
from chefs_challenge.websocket_hub import hub

settings = settings_from_env()

app = FastAPI(title="chefs-challenge", version="0.1.0")
app.include_router(router)
# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
logger = logging.getLogger(__name__)


@app.on_event("startup")
async def _startup() -> None:
    controller = init_controller(settings=settings)
    hub.bind(controller)
    logger.info("Session ready (seed=%s)", controller.snapshot().seed)


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "chefs-challenge", "version": "0.1.0"}
