"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from textcase_api.config import settings
from textcase_api.routes import convert, styles
from textcase_core.errors import InputTooLargeError
from textcase_core.logging_config import setup_logging
from textcase_core.settings import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging("DEBUG" if settings.debug else get_settings().log_level)
    yield


app = FastAPI(
    title="Textcase API",
    description="Style-guide aware title case, sentence case, lowercase and uppercase conversion",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(styles.router, prefix="/api/styles", tags=["styles"])
app.include_router(convert.router, prefix="/api/convert", tags=["convert"])


@app.exception_handler(InputTooLargeError)
async def input_too_large_handler(request: Request, exc: InputTooLargeError) -> JSONResponse:
    return JSONResponse(status_code=413, content={"detail": str(exc)})


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


def serve() -> None:
    """Run the API under uvicorn (installed with the `api` extra)."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level="debug" if settings.debug else "info")
