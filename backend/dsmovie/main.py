from datetime import datetime, timezone
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from dsmovie.config import VERSION, API_TITLE, API_DESCRIPTION
from dsmovie.config.logging import setup_logging
from dsmovie.db.database import engine, Base
from dsmovie.db import models  # noqa: F401  registers the tables on Base
from dsmovie.controllers.auth_controller import router as auth_router
from dsmovie.controllers.movie_controller import router as movie_router
from dsmovie.controllers.score_controller import router as score_router
from dsmovie.controllers.user_controller import router as user_router
from dsmovie.exceptions.auth import (
    ForbiddenException,
    InvalidCredentialsException,
    UsernameNotFoundException
)
from dsmovie.exceptions.service import DatabaseException, ResourceNotFoundException

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=VERSION
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# include controllers
app.include_router(auth_router)
app.include_router(user_router)
app.include_router(movie_router)
app.include_router(score_router)


def _error_response(request: Request, status_code: int, message: str, **extra) -> JSONResponse:
    body = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": message,
        "path": request.url.path,
    }
    body.update(extra)
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(ResourceNotFoundException)
async def resource_not_found_handler(request: Request, exc: ResourceNotFoundException):
    return _error_response(request, status.HTTP_404_NOT_FOUND, str(exc))


@app.exception_handler(DatabaseException)
async def database_handler(request: Request, exc: DatabaseException):
    return _error_response(request, status.HTTP_400_BAD_REQUEST, str(exc))


@app.exception_handler(UsernameNotFoundException)
@app.exception_handler(InvalidCredentialsException)
async def unauthorized_handler(request: Request, exc: Exception):
    response = _error_response(request, status.HTTP_401_UNAUTHORIZED, str(exc))
    response.headers["WWW-Authenticate"] = "Bearer"
    return response


@app.exception_handler(ForbiddenException)
async def forbidden_handler(request: Request, exc: ForbiddenException):
    return _error_response(request, status.HTTP_403_FORBIDDEN, str(exc))


@app.exception_handler(RequestValidationError)
async def validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field_name": ".".join(str(part) for part in error["loc"][1:]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return _error_response(request, 422, "Invalid data", errors=errors)


def init_db():
    Base.metadata.create_all(bind=engine)


@app.on_event("startup")
async def startup_event():
    init_db()
    logger.info("Database tables ready")


@app.get("/health")
def health_check():
    return {"status": "healthy"}
