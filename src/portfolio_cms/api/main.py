"""FastAPI application entry point for the Portfolio CMS API."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portfolio_cms.api.routes import (
    awards,
    certifications,
    education,
    experiences,
    health,
    projects,
    resumes,
    site,
    skills,
    social_links,
)
from portfolio_cms.services.errors import (
    ForbiddenError,
    NotFoundError,
    PortfolioError,
    RenderError,
    StoreError,
    UnauthorizedError,
    ValidationError,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[type[PortfolioError], int] = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    RenderError: status.HTTP_502_BAD_GATEWAY,
}


def get_cors_origins() -> list[str]:
    """Return allowed CORS origins from ``PORTFOLIO_CORS_ORIGINS`` (default ``*``)."""
    raw = os.getenv("PORTFOLIO_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from portfolio_cms.data.db import init_db

    init_db()
    yield


app = FastAPI(
    title="Portfolio CMS API",
    description="API for managing personal portfolio content and building resumes",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PortfolioError)
async def portfolio_error_handler(request: Request, exc: PortfolioError) -> JSONResponse:
    """Map service errors to ``{"detail", "reason"}`` responses."""
    status_code = next(
        (code for error_type, code in _STATUS_CODES.items() if isinstance(exc, error_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "reason": exc.reason},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(exc.errors()), "reason": ValidationError.reason},
    )


app.include_router(health.router)
app.include_router(site.router, prefix="/api")
app.include_router(skills.router, prefix="/api")
app.include_router(social_links.router, prefix="/api")
app.include_router(projects.router, prefix="/api")
app.include_router(experiences.router, prefix="/api")
app.include_router(education.router, prefix="/api")
app.include_router(awards.router, prefix="/api")
app.include_router(certifications.router, prefix="/api")
app.include_router(resumes.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "portfolio_cms.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
