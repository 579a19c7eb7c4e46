"""FastAPI application setup."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from app.config import settings
from app.evidence import get_evidence_provider
from .routes import router

logger = logging.getLogger(__name__)

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail startup on an unknown evidence provider
    get_evidence_provider(settings.evidence_provider)

    mode = "live" if settings.openai_api_key else "stub"
    logger.info(
        f"RobCo qualifier ready in {mode} mode "
        f"(model={settings.openai_model}, evidence={settings.evidence_provider})"
    )
    yield


# Create FastAPI app
app = FastAPI(
    title="RobCo Qualification Service",
    description="Screen acquisition targets against the RobCo criteria",
    version="0.1.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Answer every OPTIONS request before routing or CORS preflight handling
@app.middleware("http")
async def options_no_content(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=PREFLIGHT_HEADERS)
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError):
    logger.info(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "invalid request"})


app.include_router(router)
