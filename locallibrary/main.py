from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from locallibrary.api.v1.routers import router as api_router
from locallibrary.core.config import Settings, get_settings
from locallibrary.db.neo4j import close_driver
from locallibrary.routes import diagnostics


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_driver()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(title=settings.app_name, version="0.1.0", debug=settings.debug, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(diagnostics.router, prefix="/api", tags=["diagnostics"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("locallibrary.main:app", host="127.0.0.1", port=8002, reload=True)
