from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from app.core.config import Settings, settings as default_settings
from app.core.database import Database, connect_database
from app.core.handlers import register_exception_handlers
from app.core.logging import logger
from app.api.v1.router import api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Only open (and later close) the database when none was injected
    owned = app.state.database is None
    if owned:
        app.state.database = connect_database(app.state.settings)
    try:
        yield
    finally:
        if owned:
            app.state.database.dispose()
            app.state.database = None


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        """
        Health check endpoint
        """
        return {
            "message": "Welcome to Students API",
            "docs": "/docs",
            "version": settings.APP_VERSION
        }

    return app


app = create_app()


if __name__ == "__main__":
    logger.info(f"Server is running on http://localhost:{default_settings.PORT}")
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
