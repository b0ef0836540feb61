# app/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from tortoise.exceptions import BaseORMException

# Your configuration and DB
from app.config import settings
from app.core.db import init_db, close_db
from app.core.errors import BoardError
from app.core.security import TokenService
from app.core.storage import ensure_upload_dir

from app.api.v1.routers import auth, posts, comments

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# Signing secret is read once here and never changes while the process runs
app.state.token_service = TokenService(
    settings.jwt_secret,
    ttl_minutes=settings.access_token_expire_minutes,
    algorithm=settings.jwt_algorithm,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(BoardError)
async def board_error_handler(request: Request, exc: BoardError):
    if exc.status_code >= 500:
        logger.error("[api] %s %s -> %s %s", request.method, request.url.path, exc.code, exc.detail or exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "code": "BAD_REQUEST", "error": str(exc.errors())},
    )

@app.exception_handler(BaseORMException)
async def orm_error_handler(request: Request, exc: BaseORMException):
    logger.error("[api] %s %s -> database error: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error", "code": "INTERNAL_ERROR", "error": str(exc)},
    )

@app.on_event("startup")
async def on_startup():
    ensure_upload_dir()
    await init_db()
    logger.info("[startup] %s ready (env=%s)", settings.APP_NAME, settings.env)

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
app.include_router(auth.router, prefix="/api")
app.include_router(posts.router, prefix="/api")
app.include_router(comments.router, prefix="/api")

# Uploaded images
app.mount(
    settings.upload_url_prefix,
    StaticFiles(directory=settings.upload_dir, check_dir=False),
    name="uploads",
)

@app.get("/healthz")
def healthz():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
