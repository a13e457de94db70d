import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from accounts import router as accounts_router
from core import db
from core.errors import AuthFailed, ValidationRejected
from core.log import setup_logging
from messages import router as messages_router

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"

logger = logging.getLogger(__name__)


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, kept on app.state.
    app.state.db_pool = await db.create_pool()
    try:
        if db.apply_schema_on_startup():
            await db.apply_schema(app.state.db_pool)
        yield
    finally:
        await db.close_pool(app.state.db_pool)
        app.state.db_pool = None


async def validation_rejected_handler(_: Request, exc: ValidationRejected) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": exc.detail})


async def auth_failed_handler(_: Request, exc: AuthFailed) -> JSONResponse:
    return JSONResponse(status_code=401, content={"detail": exc.detail})


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Request rejected by schema validation: %s", exc.errors())
    return JSONResponse(status_code=400, content={"detail": "Invalid request."})


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(lifespan=lifespan)

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allow_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationRejected, validation_rejected_handler)
    app.add_exception_handler(AuthFailed, auth_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(accounts_router.router, tags=["accounts"])
    app.include_router(messages_router.router, tags=["messages"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "message-board api"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8080")),
    )
