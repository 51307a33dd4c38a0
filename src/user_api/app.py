"""
User API Server
CRUD operations over the users table, with generated Swagger documentation.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI

from user_api import __version__
from user_api.config.settings import API_PREFIX, DatabaseSettings
from user_api.database.connection import init_database, close_database
from user_api.services.users_service import UsersService
from user_api.api.routes import health, users
from user_api.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


def create_app(settings: Optional[DatabaseSettings] = None) -> FastAPI:
    """Build the application; the database pool is opened by the lifespan"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        db_settings = settings or DatabaseSettings.from_env()
        db_pool = await init_database(db_settings)
        app.state.db_pool = db_pool
        app.state.users_service = UsersService(db_pool)
        try:
            yield
        finally:
            await close_database(db_pool)

    app = FastAPI(
        title="User API",
        description="This is a sample User API with Swagger documentation",
        version=__version__,
        lifespan=lifespan,
        docs_url="/swagger",
        openapi_url="/swagger/doc.json",
        redoc_url=None,
    )

    setup_error_handling(app)

    app.include_router(health.router, prefix="/health", tags=["Health"])
    app.include_router(users.router, prefix=f"{API_PREFIX}/users", tags=["Users"])

    return app


# FastAPI app instance is exported for use by uvicorn
app = create_app()
