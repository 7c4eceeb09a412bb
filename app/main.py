import logging
import logging.config

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.models.response import FAILURE_MESSAGE, ErrorResponse
from app.routers.scrape import router as scrape_router

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": settings.log_level.upper(), "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Page Metadata Scraper",
    description="Renders a URL in a headless browser and returns its title, description, first heading and status.",
    version="1.0.0",
)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content=ErrorResponse(error=FAILURE_MESSAGE).model_dump())


app.include_router(scrape_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from Page Metadata Scraper"}
