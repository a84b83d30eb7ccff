# main.py
import logging
import routes
from contextlib import asynccontextmanager
from util.enums import Environment, Color
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from model.api import HealthResponse
from util.constants import InternalURIs
from util.errors import AppError
from util.logger import init_logger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    init_logger()
    print(f"{Color.GREEN}Initializing...{Color.RESET}")
    logger.info(
        "app.start env=%s upstream=%s session_max_age=%d",
        settings.APP_ENV,
        settings.CF_API_BASE_URL,
        settings.SESSION_MAX_AGE_SECONDS,
    )
    print(f"{Color.BLUE}Server Started{Color.RESET}")
    try:
        yield
    finally:
        print(f"{Color.RED}Server Shutdown{Color.RESET}")


# No docs routes: every unclaimed GET path belongs to the page router.
app: FastAPI = FastAPI(
    lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=True,  # Session lives in cookies
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Accept"],
)


@app.get(InternalURIs.HEALTHZ, response_model=HealthResponse)
async def healthz() -> HealthResponse:
    return HealthResponse(ok=True)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    # Plain-text bodies: "Unauthorized", "Missing namespace ID", ...
    if exc.status_code >= 500:
        logger.error(
            "request.failed path=%s status=%d detail=%s",
            request.url.path,
            exc.status_code,
            exc.detail,
        )
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=reload)
