"""
FastAPI application entry point.

Run with: uvicorn api.main:create_app --factory --reload
or:       python -m api.main
"""
import logging
import time
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load environment variables from backend/.env (optional) before settings are read
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import books
from db import init_store
from domain.errors import PersistenceError
from repositories import BooksRepository
from settings import Settings, get_settings

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("api.access")

OPENAPI_TAGS = [
    {"name": "Books", "description": "The books managing API"},
]


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None, store: Optional[BooksRepository] = None) -> FastAPI:
    """Build the app and load the books store it owns."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Books API",
        description="A REST API to register favourite books, stored in a JSON file",
        version="1.0.0",
        docs_url=settings.DOCS_URL,
        openapi_tags=OPENAPI_TAGS,
        servers=[{"url": settings.SERVER_URL}],
    )
    app.state.settings = settings
    app.state.store = store if store is not None else init_store(settings.BOOKS_DB_PATH)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.REQUEST_LOGGING:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            """One access line per request: method, path, status, duration."""
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            access_logger.info(
                "%s %s %s %.3f ms",
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
            return response

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"message": "Failed to persist books"})

    app.include_router(books.router, prefix="/books", tags=["Books"])

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"name": "Alive"}

    return app


def main() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    app = create_app(settings)
    logger.info("Server running on %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
