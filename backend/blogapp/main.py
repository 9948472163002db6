"""
Blog API entry point.

    uvicorn --factory blogapp.main:create_app --host 0.0.0.0 --port 5000
"""

import logging
import time
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from blogapp.api.routers import auth, posts, ui, upload
from blogapp.core.config import Settings, get_settings
from blogapp.core.errors import register_error_handlers
from blogapp.core.logging_config import configure_logging
from blogapp.db.session import init_db, make_engine, make_session_factory

log = logging.getLogger("blogapp")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Blog API", version="1.0.0")
    app.state.settings = settings
    app.state.engine = make_engine(settings.DATABASE_URL)
    app.state.session_factory = make_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # eine Zeile pro Request: Methode, Pfad, Status, Dauer
    @app.middleware("http")
    async def _access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        logging.getLogger("blogapp.access").info(
            "%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms
        )
        return response

    register_error_handlers(app)

    upload_dir = Path(settings.UPLOAD_DIR)

    @app.on_event("startup")
    def _on_startup() -> None:
        try:
            init_db(app.state.engine)
        except SQLAlchemyError:
            # Startup bricht ab, uvicorn beendet den Prozess
            log.exception("Database connection failed")
            raise
        upload_dir.mkdir(parents=True, exist_ok=True)
        log.info("Database ready, blog API started")

    @app.on_event("shutdown")
    def _on_shutdown() -> None:
        app.state.engine.dispose()
        log.info("Blog API stopped")

    @app.get("/healthz", tags=["system"])
    def healthz():
        return {"status": "ok"}

    app.mount(settings.UPLOAD_URL_PREFIX.rstrip("/"),
              StaticFiles(directory=upload_dir, check_dir=False), name="uploads")

    app.include_router(auth.router)
    app.include_router(upload.router)
    app.include_router(posts.router)
    app.include_router(ui.router)
    return app


if __name__ == "__main__":
    import uvicorn

    s = get_settings()
    uvicorn.run("blogapp.main:create_app", factory=True, host=s.APP_HOST, port=s.APP_PORT)
