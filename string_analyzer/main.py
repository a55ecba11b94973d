from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
import logging
import time

from string_analyzer import config
from string_analyzer.api.routes import router
from string_analyzer.exceptions import StringAnalyzerError
from string_analyzer.store import RecordStore

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

if config.ENV_FILE_LOADED:
    logger.info("Loaded configuration from .env file (local development)")
else:
    logger.info("Loaded configuration from environment (production)")


def create_app(store: RecordStore = None) -> FastAPI:
    """Build the application around a record store (a fresh one by default)."""
    app = FastAPI(
        title=config.APP_NAME,
        description="Analyze, store and query string properties",
        version=config.APP_VERSION,
    )
    app.state.store = store if store is not None else RecordStore()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response

    app.include_router(router, tags=["strings"])

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": config.APP_NAME,
            "version": config.APP_VERSION,
            "endpoints": {
                "POST /strings": "Analyze and store a string",
                "GET /strings/{string_value}": "Get specific string analysis",
                "GET /strings": "Get all strings with optional filters",
                "GET /strings/filter-by-natural-language": "Filter using natural language",
                "DELETE /strings/{string_value}": "Delete a string",
                "GET /health": "Service health",
                "GET /docs": "API documentation",
            },
        }

    register_exception_handlers(app)
    return app


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StringAnalyzerError)
    async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # Validation error handler
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = {}
        wrong_type = False
        for error in exc.errors():
            field = error["loc"][-1]
            errors[field] = error["msg"]
            if error["loc"][0] == "body" and error["type"] == "string_type":
                wrong_type = True

        if wrong_type:
            return JSONResponse(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                content={"error": "Invalid data type for 'value' (must be string)", "details": errors},
            )

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation failed", "details": errors},
        )

    # HTTPException handler
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        # If detail is already a dict with 'error' key, return as is
        if isinstance(exc.detail, dict) and "error" in exc.detail:
            return JSONResponse(status_code=exc.status_code, content=exc.detail)
        # Otherwise wrap it
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    # Generic error handler
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=config.HOST, port=config.PORT, reload=config.RELOAD)
