# Main application file

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from kitchen.core.config import Settings, settings as default_settings
from kitchen.core.errors import InternalError, KitchenError
from kitchen.core.rate_limiter import limiter
from kitchen.database import init_store
from kitchen.routers import (
    items,
    locations,
    openfoodfacts,
    products,
    tags,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("kitchen")


# ERROR HANDLERS

async def kitchen_error_handler(request: Request, exc: KitchenError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Store error on {request.method} {request.url.path}: {exc}")
    error = InternalError("Unable to access the store")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": f"{location}: {message}" if location else message,
            "errors": [
                {"loc": list(error.get("loc", ())), "msg": error.get("msg")}
                for error in errors
            ],
        },
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    logger.setLevel(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            app.state.store = init_store(settings.DATABASE_URL, settings.DEFAULT_LOCATIONS)
        except RuntimeError as e:
            logger.critical(f"Error initializing database schema: {e}")
            raise
        yield
        app.state.store.dispose()

    # APP INIT

    app = FastAPI(
        title="Kitchen Inventory API",
        description="Track what is stored where in a household kitchen",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["Content-Type"],
    )

    # RATE LIMITING

    app.state.limiter = limiter
    app.add_exception_handler(
        RateLimitExceeded,
        _rate_limit_exceeded_handler
    )

    app.add_exception_handler(KitchenError, kitchen_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # REQUEST LOGGING MIDDLEWARE

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        duration = round((time.time() - start_time) * 1000, 2)

        logger.info(
            f"{request.method} {request.url.path} "
            f"Status: {response.status_code} "
            f"Time: {duration}ms"
        )

        return response

    # ROUTERS

    app.include_router(locations.router)
    app.include_router(tags.router)
    app.include_router(products.router)
    app.include_router(items.router)
    app.include_router(openfoodfacts.router)

    # ROOT

    @app.get("/")
    def root():
        logger.info("Health check endpoint called")
        return {"message": "Kitchen Inventory API is running"}

    return app


app = create_app()


def run():
    uvicorn.run(
        "kitchen.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
