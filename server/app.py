"""Main FastAPI application"""
from typing import Optional

from config.logger import logger, set_log_level
from config.settings import Settings, get_settings
from context.lifespan import lifespan
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from middleware.logging import log_requests
from routes import api_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; settings default to the environment"""
    settings = settings or get_settings()
    set_log_level(settings.log_level)

    app = FastAPI(
        title="Vehicle Telemetry Server",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # Request logging middleware
    app.middleware("http")(log_requests)

    # Include routers
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    logger.info(f"Telemetry server running: http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
