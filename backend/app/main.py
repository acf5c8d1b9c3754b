from fastapi import FastAPI
from contextlib import asynccontextmanager

from backend.app.config import AppConfig
from backend.app.api.routes_graph import router as graph_router
from backend.app.api.routes_traversal import router as traversal_router
from backend.app.dependencies import get_antenna_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle hooks.

    Loads and grows the antenna graph once at startup.
    """
    # Force initialization
    get_antenna_service()

    yield


def create_app(config: AppConfig) -> FastAPI:
    app = FastAPI(
        title=config.app_name,
        lifespan=lifespan,
    )

    app.include_router(
        graph_router,
        prefix=f"{config.api_prefix}/graph",
        tags=["graph"],
    )

    app.include_router(
        traversal_router,
        prefix=f"{config.api_prefix}/traversal",
        tags=["traversal"],
    )

    return app


config = AppConfig()
app = create_app(config)
