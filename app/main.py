"""Main FastAPI application."""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.container import ClientContainer
from app.core.logging import setup_logging
from app.api import auth, cart, health, menu, search


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    container = getattr(app.state, "container", None)
    if container is None:
        container = ClientContainer(settings)
        app.state.container = container
    await container.hydrate()
    yield
    # Shutdown
    await container.dispose()


app = FastAPI(
    title="Food Ordering Client",
    description="Client-side auth, catalog, cart and search state for the food ordering app",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, tags=["auth"])
app.include_router(menu.router, tags=["menu"])
app.include_router(cart.router, tags=["cart"])
app.include_router(search.router, tags=["search"])


@app.get("/")
async def root():
    """Service information."""
    return {
        "message": "Food Ordering Client API",
        "version": "0.1.0",
    }


def run() -> None:
    """Run the API server."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
