"""Supplier Directory FastAPI Application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from api.config import get_settings
from api.routers import catalogue, engagement, suppliers
from api.services.database import close_db
from config.logging_config import get_logger, setup_logging

settings = get_settings()
setup_logging(log_level="DEBUG" if settings.debug else "INFO", log_to_console=True)
logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name} {settings.version}")
    yield
    close_db()


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="API for browsing, comparing and submitting moving-industry suppliers",
    lifespan=lifespan,
)


class CacheHeaderMiddleware(BaseHTTPMiddleware):
    """Middleware to add Cache-Control headers to responses."""

    # Endpoints that can be cached
    CACHEABLE_PATHS = {
        "/api/categories": 1800,  # 30 minutes
        "/api/feature-flags": 300,  # 5 minutes
        "/api/suppliers": 60,  # 1 minute
    }

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        if request.method != "GET" or response.status_code >= 400:
            response.headers["Cache-Control"] = "no-cache"
            return response

        path = request.url.path
        for cacheable_path, max_age in self.CACHEABLE_PATHS.items():
            if path.startswith(cacheable_path):
                response.headers["Cache-Control"] = f"public, max-age={max_age}"
                break
        else:
            response.headers["Cache-Control"] = "no-cache"

        return response


app.add_middleware(CacheHeaderMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Wrap HTTP errors in the response envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and parameters."""
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last resort: log the failure and answer with a generic message."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Something went wrong"},
    )


app.include_router(suppliers.router, prefix="/api/suppliers", tags=["Suppliers"])
app.include_router(catalogue.router, prefix="/api", tags=["Catalogue"])
app.include_router(engagement.router, prefix="/api", tags=["Engagement"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "endpoints": {
            "suppliers": "/api/suppliers",
            "categories": "/api/categories",
            "feature_flags": "/api/feature-flags/{flag_id}",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    from api.services.database import get_db

    try:
        db = get_db()
        count = db.fetch_one("SELECT COUNT(*) FROM suppliers WHERE status = 'approved'")[0]
        return {
            "status": "healthy",
            "database": "connected",
            "approved_suppliers": count,
            "caches": db.cache_stats(),
        }
    except Exception as e:
        logger.warning(f"Health check failed: {e}")
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e),
        }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
