from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
from hangar.config import settings
from hangar.database import db_service
from hangar.routes import health, ships, stat

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info("Starting Hangar API service...")

    try:
        await db_service.initialize()
        await db_service.create_tables()
        logger.info("Database initialized")
    except Exception as e:
        logger.error(f"Failed to start service: {e}")
        raise

    logger.info("Hangar API service started successfully")

    yield

    # Shutdown
    logger.info("Shutting down Hangar API service...")
    await db_service.close()
    logger.info("Database connection closed")


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report unparseable query, path or body values as a bad request"""
    logger.info(f"Bad request on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Malformed request", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


def create_app() -> FastAPI:
    """Create FastAPI application"""
    app = FastAPI(
        title="Hangar API",
        description="Ship registry service",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(ships.router, tags=["ships"])
    app.include_router(stat.router, tags=["stat"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hangar.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info",
    )
