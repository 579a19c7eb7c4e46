"""API routes for RobCo qualification."""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.config import settings
from app.evidence import get_evidence_provider
from app.qualify import (
    AnalysisError,
    InputError,
    OpenAIResponsesAdapter,
    QualificationService,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class AnalyzeRequest(BaseModel):
    """Request body for a qualification."""
    url: Optional[str] = None
    company_name: Optional[str] = None


@lru_cache()
def get_qualification_service() -> QualificationService:
    """Build the service from settings; the credential decides stub or live mode."""
    adapter = None
    if settings.openai_api_key:
        adapter = OpenAIResponsesAdapter(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            timeout=settings.provider_timeout,
        )
    return QualificationService(
        api_key=settings.openai_api_key,
        adapter=adapter,
        evidence_provider=get_evidence_provider(settings.evidence_provider),
    )


@router.get("/healthz")
async def healthz():
    """Liveness probe."""
    return {"ok": True}


@router.post("/analyze")
async def analyze(
    payload: Optional[AnalyzeRequest] = None,
    service: QualificationService = Depends(get_qualification_service),
):
    """Screen a company against the RobCo criteria."""
    payload = payload or AnalyzeRequest()

    try:
        return await service.analyze(payload.url, payload.company_name)
    except InputError as e:
        logger.info(f"Rejected analyze request: {e}")
        return JSONResponse(status_code=400, content={"error": str(e)})
    except AnalysisError as e:
        return JSONResponse(
            status_code=500,
            content={"error": "analysis_failed", "message": str(e)},
        )
