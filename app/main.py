from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from pathlib import Path
from app.exceptions import CatalogError
from app.routers import games
from app.services.file_intake import FileIntake
from app.services.game_service import GameService
from app.settings import settings
from app.stores.factory import create_store
import logging
import time
import uvicorn
from app.logging_conf import configure_logging

# Configure logging before app startup
configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Application starting up...")
    if settings.STORE_BACKEND.lower() == "database":
        from app.database import init_db

        await init_db()

    file_intake = FileIntake(
        Path(settings.PUBLIC_DIR) / settings.IMAGES_SUBDIR,
        reference_prefix=settings.IMAGES_SUBDIR,
        timeout=settings.IO_TIMEOUT_SECONDS,
    )
    app.state.game_service = GameService(
        create_store(settings),
        file_intake,
        default_img_reference=settings.DEFAULT_IMG_REFERENCE,
    )

    yield
    # Shutdown
    logger.info("Application shutting down...")
    if settings.STORE_BACKEND.lower() == "database":
        from app.database import engine

        await engine.dispose()


async def catalog_error_handler(request: Request, exc: CatalogError):
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        exc.message,
        extra={
            "code": exc.code,
            "status_code": exc.status_code,
            "url": str(request.url),
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def logging_middleware(request: Request, call_next):
    start_time = time.time()

    # Process request
    try:
        response = await call_next(request)
        process_time = time.time() - start_time

        logger.info(
            "Incoming Request",
            extra={
                "method": request.method,
                "url": str(request.url),
                "status_code": response.status_code,
                "duration": f"{process_time:.4f}s",
                "client": request.client.host if request.client else None,
            },
        )
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(
            "Request Failed",
            exc_info=True,
            extra={
                "method": request.method,
                "url": str(request.url),
                "duration": f"{process_time:.4f}s",
                "client": request.client.host if request.client else None,
            },
        )
        raise e


def create_app() -> FastAPI:
    app = FastAPI(title="Game Catalog", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(logging_middleware)
    app.add_exception_handler(CatalogError, catalog_error_handler)

    app.include_router(games.router)

    @app.get("/health")
    async def health():
        return {"message": "Game Catalog is running"}

    # Mounted last so API routes win; serves images/<name> references
    Path(settings.PUBLIC_DIR).mkdir(parents=True, exist_ok=True)
    app.mount(
        "/",
        StaticFiles(directory=settings.PUBLIC_DIR, html=True),
        name="public",
    )
    return app


app = create_app()


def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
