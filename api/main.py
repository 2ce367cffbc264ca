from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookmarks import errors as bookmark_errors
from bookmarks import router as bookmarks_router
from core import settings
from core.db import Database
from core.log import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process; an injected handle is reused as-is.
    if app.state.db is None:
        app.state.db = Database()
    await app.state.db.connect()
    try:
        yield
    finally:
        await app.state.db.close()


def create_app(database: Database | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(title="Bookmarks API", lifespan=lifespan)
    app.state.db = database

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )

    app.include_router(
        bookmarks_router.router,
        prefix=settings.bookmarks_prefix(),
        tags=["bookmarks"],
    )
    bookmark_errors.register_error_handlers(app)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "bookmarks api"}

    return app


app = create_app()
