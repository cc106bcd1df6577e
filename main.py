from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from app import database
from app.config import settings
from app.routers import api_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await database.init_db()
    logger.info(f"Soldier tables ready, biometric device mode: {settings.DEVICE_MODE}")

    yield

    # Cleanup
    await database.engine.dispose()


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Same taxonomy as any other failure: 500 with the raw error text
    logger.error(f"Error in {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app(api_prefix: str = settings.API_PREFIX) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="Soldier personnel records, fingerprint verification and payroll API",
        version=settings.APP_VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(api_router, prefix=api_prefix.rstrip("/"))
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.APP_ENV != "production"
    )
