import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobboard.config import settings
from jobboard.core.rate_limiter import rate_limiter
from jobboard.database import build_engine, build_session_factory, check_connection, init_db
from jobboard.logging_config import setup_logging
from jobboard.routers import admin, auth, jobs, search
from jobboard.services.uploads import UPLOAD_URL_PREFIX

setup_logging()
logger = logging.getLogger(__name__)

PLACEHOLDER_SECRET_KEY = "replace-with-a-long-random-secret-key"
AUTH_PATHS = {"/api/auth/login", "/api/auth/register", "/api/auth/google"}

app = FastAPI(
    title="Job Board API",
    description="Job postings, search, applications and moderation.",
    version="1.0.0",
)

cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(jobs.router)
app.include_router(search.router)
app.include_router(admin.router)
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")


def _validation_message(exc: RequestValidationError) -> str:
    """First validation problem as one readable sentence."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    # Messages raised from our own field validators are already user-facing.
    ctx_error = (err.get("ctx") or {}).get("error")
    if isinstance(ctx_error, Exception):
        return str(ctx_error)
    field = ".".join(str(p) for p in err.get("loc", ()) if p not in {"body", "query", "path", "header", "cookie"})
    msg = err.get("msg", "Invalid request")
    return f"{field}: {msg}" if field else msg


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    message = _validation_message(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.middleware("http")
async def apply_rate_limits(request, call_next):
    path = request.url.path
    if request.method == "OPTIONS":
        return await call_next(request)

    client_ip = request.client.host if request.client else "unknown"
    limit = None
    window = 60
    # Bucket names come from a fixed set; the job id in apply paths is not part of the key.
    bucket = None
    if path in AUTH_PATHS:
        limit = settings.rate_limit_auth_per_min
        bucket = path
    elif request.method == "POST" and path.startswith("/api/jobs/") and path.endswith("/apply"):
        limit = settings.rate_limit_apply_per_min
        bucket = "apply"

    if limit is not None and limit > 0:
        key = f"{client_ip}:{bucket}"
        allowed, retry_after = rate_limiter.allow(key, limit=limit, window_seconds=window)
        if not allowed:
            return JSONResponse(
                status_code=429,
                content={"error": "Too many requests. Please retry shortly."},
                headers={"Retry-After": str(retry_after)},
            )

    return await call_next(request)


@app.get("/health/live")
def health_live():
    return {"status": "ok"}


@app.get("/health/ready")
def health_ready(request: Request):
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        return JSONResponse(status_code=503, content={"status": "not_ready"})
    try:
        check_connection(engine)
        return {"status": "ready"}
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "not_ready"})


def _check_deployment_settings() -> None:
    env = (settings.app_env or "development").lower()
    if env in {"production", "prod"}:
        if settings.secret_key == PLACEHOLDER_SECRET_KEY:
            raise RuntimeError("SECRET_KEY placeholder is not allowed in production")
        if "username:password@" in settings.database_url:
            raise RuntimeError("DATABASE_URL placeholder credentials are not allowed in production")
    else:
        if settings.secret_key == PLACEHOLDER_SECRET_KEY:
            logger.warning("SECRET_KEY is using placeholder default. Set SECRET_KEY in .env for secure deployments.")
        if "username:password@" in settings.database_url:
            logger.warning("DATABASE_URL appears to use placeholder credentials. Set DATABASE_URL in .env.")


@app.on_event("startup")
def on_startup():
    logger.info("Starting Job Board API")
    _check_deployment_settings()
    engine = build_engine(settings.database_url)
    try:
        check_connection(engine)
        init_db(engine)
    except Exception:
        logger.exception("Database unavailable at startup; shutting down")
        engine.dispose()
        raise
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)


@app.on_event("shutdown")
def on_shutdown():
    engine = getattr(app.state, "engine", None)
    if engine is not None:
        engine.dispose()
        logger.info("Database connections closed")


@app.get("/")
def root():
    return {"message": "Job Board API. See /docs for the endpoint list."}
