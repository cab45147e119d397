"""
Main FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.dependencies import get_clock
from app.api.routes import contacts, health, metrics, professionals
from app.components.contracts import ApiResponse
from app.components.validation import VALIDATION_ERRORS_PREFIX
from app.core.config import get_settings
from app.core.exceptions import ExceptionResponse, ResourceNotFoundError
from app.core.logging_config import LoggingConfig
from app.core.middleware import LoggingContextMiddleware
from app.core.middleware_metrics import MetricsMiddleware

# Configure logging first
LoggingConfig.configure()

logger = LoggingConfig.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI app"""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode...")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


_settings = get_settings()
app = FastAPI(
    title=_settings.app_name,
    description="Registry of professionals and their contacts",
    version="0.1.0",
    lifespan=lifespan,
)

# Add logging context middleware (before CORS to capture all requests)
app.add_middleware(LoggingContextMiddleware)
app.add_middleware(MetricsMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ResourceNotFoundError)
async def not_found_handler(request: Request, exc: ResourceNotFoundError):
    """Missing or inactive records"""
    body = ExceptionResponse.for_request(exc.message, request.url.path, get_clock().now())
    return JSONResponse(status_code=404, content=body.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed payloads get the same envelope as rejected records"""
    violations = []
    for error in exc.errors():
        # Drop the "body" / "path" / "query" origin
        path = ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        violations.append(f"{path} - {error['msg']}.")
    body = ApiResponse.fail(VALIDATION_ERRORS_PREFIX + "".join(violations))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler to log all unhandled errors"""
    logger.error(
        "Unhandled exception",
        exc_info=True,
        extra={
            "error": str(exc),
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        }
    )
    body = ExceptionResponse.for_request(str(exc), request.url.path, get_clock().now())
    return JSONResponse(status_code=500, content=body.to_dict())


# Include routers
app.include_router(professionals.router)
app.include_router(contacts.router)
app.include_router(health.router)
app.include_router(metrics.router)

