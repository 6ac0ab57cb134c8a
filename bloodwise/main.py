import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app
import structlog

from bloodwise.core.config import settings
from bloodwise.core.logging import setup_logging
from bloodwise.api.router import api_router

# 1. Initialize Logging
setup_logging()
logger = structlog.get_logger()

# 2. Lifecycle (Startup/Shutdown)
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "system_startup",
        env=settings.ENVIRONMENT,
        simulate_latency=settings.SIMULATE_LATENCY
    )
    yield
    logger.info("system_shutdown")

# 3. Create App
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan
)

# 4. Middleware: CORS (the browser front-end is served separately)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# 5. Middleware: Request logging
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or f"req_{uuid.uuid4().hex[:12]}"

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path
    )

    start_time = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(
            "http_request_failed",
            error=str(e),
            duration=time.perf_counter() - start_time
        )
        raise

    logger.info(
        "http_request_completed",
        status_code=response.status_code,
        duration=time.perf_counter() - start_time
    )
    response.headers["X-Request-ID"] = request_id
    return response

# 6. Mount Routes
app.include_router(api_router, prefix=settings.API_V1_STR)

# 7. Mount Metrics Endpoint (Prometheus)
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

# Health Check
@app.get("/health")
async def health_check():
    return {"status": "ok", "version": settings.PROJECT_VERSION}
