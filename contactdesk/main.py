from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging
import json

from contactdesk.api.endpoints import contact, messages
from contactdesk.core.config import settings
from contactdesk.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info(f"{settings.PROJECT_NAME} starting")
    yield
    logger.info(f"{settings.PROJECT_NAME} shutting down")


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        description="API for managing contact methods and the contact form inbox",
        routes=app.routes,
    )

    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "bearerAuth": {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"}
    }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API for managing contact methods and the contact form inbox",
    version="0.1.0",
    lifespan=lifespan,
    debug=settings.DEBUG,
)

app.openapi = custom_openapi

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    contact.router,
    prefix=f"{settings.API_PREFIX}/contact",
    tags=["contact"],
)

app.include_router(
    messages.router,
    prefix=f"{settings.API_PREFIX}/messages",
    tags=["messages"],
)


@app.get("/", tags=["status"])
async def root():
    return {"status": "online", "service": settings.PROJECT_NAME}


def _error_field(loc) -> str:
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    field = ""
    for part in parts:
        if part.isdigit():
            field += f"[{part}]"
        else:
            field += f".{part}" if field else part
    return field


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": _error_field(error.get("loc", ())),
            "message": error.get("msg", "Invalid value"),
            "location": str(error["loc"][0]) if error.get("loc") else None,
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Validation failed", "errors": errors},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )


if __name__ == "__main__":
    import uvicorn
    from pathlib import Path

    with open(Path(__file__).with_name("log_config.json"), "r") as file:
        LOGGING_CONFIG = json.load(file)

    uvicorn.run(
        "contactdesk.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_config=LOGGING_CONFIG,
    )
