from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import asyncpg
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core import settings
from core.db import Database
from core.logs import configure_logging
from recipes import router as recipes_router
from recipes.repository import RecipeRepository, RecipeStore
from recipes.service import RecipeService

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = {"message": "Not Found"}
SERVER_ERROR_BODY = {"message": "Internal Server Error"}


def create_app(store: RecipeStore | None = None) -> FastAPI:
    """
    Build the API. Without `store`, a PostgreSQL pool is opened from the
    environment on startup and the `recipes` table is created if needed.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is not None:
            app.state.recipe_service = RecipeService(store)
            yield
            return

        configure_logging()
        db = Database.from_env()
        await db.connect()
        try:
            repository = RecipeRepository(db)
            try:
                await repository.ensure_schema()
            except Exception:
                logger.exception("schema_init_failed")
                raise
            logger.info("schema_ready table=recipes")
            app.state.recipe_service = RecipeService(repository)
            yield
        finally:
            await db.close()

    # Trailing-slash variants are routed explicitly instead of redirected.
    app = FastAPI(title="Recipe Service", lifespan=lifespan, redirect_slashes=False)

    origins = settings.cors_allow_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(recipes_router.router, tags=["recipes"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and unsupported methods on known paths both read as 404.
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content=NOT_FOUND_BODY)
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(asyncpg.PostgresError)
    @app.exception_handler(asyncpg.InterfaceError)
    @app.exception_handler(OSError)
    async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "storage_failed method=%s path=%s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content=SERVER_ERROR_BODY)

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.host(), port=settings.port())


if __name__ == "__main__":
    run()
