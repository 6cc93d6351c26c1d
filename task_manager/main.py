import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from task_manager.api import auth_api, task_api
from task_manager.configs.database import init_db
from task_manager.configs.logging_config import setup_logging
from task_manager.configs.settings import settings
from task_manager.errors import ValidationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    init_db()
    logger.info("Task Management API started")
    yield

app = FastAPI(
    title="Task Management API",
    description="A simple Task Management API with JWT authentication",
    version="1.0.0",
    lifespan=lifespan,
)

# Tokens travel in the Authorization header, no cookies
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_api.router, prefix="/api")
app.include_router(task_api.router, prefix="/api")


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) or "body"


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    if exc.errors:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail, "errors": exc.errors})
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [{"field": _field_name(err.get("loc", ())), "message": err.get("msg")} for err in exc.errors()]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": "Server error"})


@app.get("/")
def root():
    return {"message": "Welcome to Task Management API"}
