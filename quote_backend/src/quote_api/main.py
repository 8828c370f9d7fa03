import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import DuplicateName, InvalidInput, NotFound, StoreError
from .logging_config import setup_logging
from .repositories import Repository, get_repository
from .routers import quotes as quotes_router
from .settings import get_settings

_settings = get_settings()
setup_logging(_settings.log_level, _settings.log_file)
logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "quotes",
        "description": "CRUD operations and name search for quotes with unique names.",
    },
]

app = FastAPI(
    title="Quote Backend",
    description="Backend API service for managing named quotes held in memory.",
    version="0.1.0",
    openapi_tags=openapi_tags,
)

# Configure CORS based on settings (.env -> CORS_ALLOW_ORIGINS), with '*' fallback
allow_all = (_settings.cors_allow_origins == ["*"]) or (len(_settings.cors_allow_origins) == 0)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if allow_all else _settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

STORE_ERROR_STATUS_MAP: dict[type[StoreError], int] = {
    InvalidInput: 400,
    NotFound: 404,
    DuplicateName: 409,
}


def _jsonable_errors(exc: RequestValidationError) -> list:
    # ctx may hold the raw exception object, which is not JSON serializable
    return [{k: v for k, v in err.items() if k != "ctx"} for err in exc.errors()]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for malformed requests.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    return JSONResponse(
        status_code=400,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": _jsonable_errors(exc),
        },
    )


@app.exception_handler(StoreError)
async def store_exception_handler(request: Request, exc: StoreError) -> JSONResponse:
    """
    Map store failures to HTTP responses.

    Response format:
        {"error": "<code>", "message": "<human readable>", "field": "<optional>"}
    """
    status_code = STORE_ERROR_STATUS_MAP.get(type(exc), 400)
    logger.debug("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    content = {"error": exc.code, "message": exc.message}
    if exc.field is not None:
        content["field"] = exc.field
    return JSONResponse(status_code=status_code, content=content)


# PUBLIC_INTERFACE
@app.get("/", summary="Health Check", tags=["health"])
def health_check(repo: Repository = Depends(get_repository)):
    """
    Health check endpoint.

    Returns:
        A JSON object indicating service health and the number of stored quotes.
    """
    return {"message": "Healthy", "count": repo.count()}


# Include routers
app.include_router(quotes_router.router)
