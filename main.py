import logging
import os

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app import config
from app.errors import ExtractionError, InternalError
from app.schemas import ErrorResponse, ExtractRequest, HealthResponse, PropertyData
from app.service import handle
from app.utils.http import Http, get_http
from app.utils.logging import configure_logging

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def create_app() -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    app = FastAPI(title="Immobilien Rendite-Rechner API", version="1.0.0")
    origins = [o.strip() for o in config.ALLOW_ORIGINS.split(",") if o.strip()] or ["*"]
    app.add_middleware(CORSMiddleware, allow_origins=origins, allow_methods=["*"], allow_headers=["*"])

    @app.exception_handler(ExtractionError)
    async def extraction_error_handler(request: Request, exc: ExtractionError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": InternalError().message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected request body: %s", exc.errors())
        return JSONResponse(
            status_code=400,
            content={"error": 'Ungültige Anfrage. Erwartet wird ein JSON-Objekt mit "url".'},
        )

    @app.post("/api/extract", response_model=PropertyData,
              response_model_exclude_none=True, responses=ERROR_RESPONSES)
    async def extract(body: ExtractRequest, http: Http = Depends(get_http)):
        return await handle(body, http)

    @app.get("/api/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", message="Backend API läuft")

    # Frontend, if one is deployed next to the API
    if os.path.isdir(config.STATIC_DIR):
        app.mount("/", StaticFiles(directory=config.STATIC_DIR, html=True), name="static")

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Backend-Server läuft auf Port %s", config.PORT)
    logger.info("API verfügbar unter: http://localhost:%s/api/extract", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
