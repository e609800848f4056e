import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from compete_api.config import settings
from compete_api.database import DatabaseSessionManager
from compete_api.exceptions import ApiError, ValidationFailed
from compete_api.routers.user import router as user_router
from compete_api.routers.competition import router as competition_router
from compete_api.routers.team import router as team_router
from compete_api.routers.message import router as message_router
from compete_api.routers.image import router as image_router
from compete_api.routers.blog import router as blog_router
from compete_api.routers.comment import router as comment_router
from compete_api.storage import create_storage
from compete_api.utils.validation import collect_field_errors

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("compete_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    db_manager = DatabaseSessionManager()
    db_manager.init(settings.DATABASE_URL)
    app.state.db_manager = db_manager
    app.state.storage = create_storage(settings)
    logger.info("Using %s object storage", settings.STORAGE_BACKEND)
    yield
    await db_manager.close()


app = FastAPI(lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.body)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    error = ValidationFailed(collect_field_errors(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.body)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500, content={"message": "Internal Server Error"}
    )


API_PREFIX = "/api/v1"

app.include_router(user_router, prefix=API_PREFIX)
app.include_router(competition_router, prefix=API_PREFIX)
app.include_router(team_router, prefix=API_PREFIX)
app.include_router(message_router, prefix=API_PREFIX)
app.include_router(image_router, prefix=API_PREFIX)
app.include_router(blog_router, prefix=API_PREFIX)
app.include_router(comment_router, prefix=API_PREFIX)


if settings.STORAGE_BACKEND == "local":
    if not os.path.exists(settings.IMAGES_FOLDER):
        os.makedirs(settings.IMAGES_FOLDER)

    app.mount(
        settings.IMAGES_BASE_URL,
        StaticFiles(directory=settings.IMAGES_FOLDER),
        name="image",
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
