import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings
from .core.errors import ServiceError
from .routers.ai import cors_headers, router as ai_router

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(title=settings.app_name, version="0.1.0")


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Method not allowed" if exc.status_code == 405 else exc.detail
    headers = {**(exc.headers or {}), **cors_headers(get_settings())}
    return JSONResponse({"error": message}, status_code=exc.status_code, headers=headers)


@app.exception_handler(ServiceError)
async def service_error(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code, headers=cors_headers(get_settings()))


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(ai_router)
