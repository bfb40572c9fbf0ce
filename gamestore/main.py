# gamestore/main.py
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from gamestore.api.errors import register_exception_handlers
from gamestore.api.routers import carrito, noticias, usuarios
from gamestore.data.database import Base, engine
from gamestore.services.identity import get_identity_provider
from gamestore.data import models  # noqa: F401  registers every table in Base.metadata
from gamestore.utils.settings import CORS_ORIGIN, IMAGES_DIR, PORT
from gamestore.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # an unknown AUTH_MODE stops startup here instead of failing every request
    get_identity_provider()

    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception:
        logger.exception("Failed to create database tables")
        raise
    logger.info("Database tables ready")
    try:
        yield
    finally:
        engine.dispose()


def create_app(images_dir: str = IMAGES_DIR) -> FastAPI:
    app = FastAPI(
        title="Game Store API",
        version="1.0.0",
        lifespan=lifespan,
    )

    # the one frontend origin allowed to call the API from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[CORS_ORIGIN],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(carrito.router)
    app.include_router(noticias.router)
    app.include_router(usuarios.router)
    os.makedirs(images_dir, exist_ok=True)
    app.mount("/static", StaticFiles(directory=images_dir), name="static")

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()

if __name__ == "__main__":
    logger.info(f"Servidor escuchando en http://localhost:{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
