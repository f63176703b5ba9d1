import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import config
from app.database import Database
from app.errors import register_error_handlers
from app.logging_config import setup_logging
from app.routers import user_router, todo_router

logger = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """Build the API bound to ``database_url`` (defaults to ``DATABASE_URL``).

    The database is opened and its schema initialized in the lifespan, so a
    broken storage file stops the server before it accepts any request.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(config.LOG_LEVEL)
        database = None
        try:
            database = Database(database_url or config.DATABASE_URL, echo=config.SQL_ECHO)
            await database.init_schema()
        except Exception:
            logger.exception("Startup failed")
            if database is not None:
                await database.dispose()
            raise
        app.state.database = database
        logger.info("Todo API started")
        yield
        logger.info("Todo API shutting down")
        await database.dispose()

    app = FastAPI(title="Todo API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=config.CORS_METHODS,
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(user_router.router, prefix="/users", tags=["Users"])
    app.include_router(todo_router.router, prefix="/todos", tags=["Todos"])

    # Root health
    @app.get("/")
    async def read_root():
        return {"status": "ok"}

    return app


app = create_app()


def run():
    import uvicorn

    setup_logging(config.LOG_LEVEL)
    logger.info("Server starting on :%d", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
