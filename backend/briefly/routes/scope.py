"""Scope routes: generate a technical scope from a client brief.

Endpoints:
  POST /scope/generate   - Generate the scope document for a brief
  POST /scope/export     - Export placeholder (501, not implemented yet)
  GET  /scope/stacks     - Preferred stack options offered by the form
  GET  /scope/health     - Service health check
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from ..agents.scope_agent import (
    GenerationFailure,
    ValidationError,
    export_scope_document,
    generate_scope_with_archetype,
)
from ..config import get_simulated_latency
from ..constants import EXPORT_PLACEHOLDER_MESSAGE
from ..schemas.scope_schema import ScopeRequest, ScopeResponse, TechStackListResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/scope",
    tags=["Scope"],
    responses={
        500: {"description": "Internal server error during scope generation"}
    },
)


@router.post(
    "/generate",
    response_model=ScopeResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate Technical Scope",
    response_description="Technical scope document with stack, timeline and sprint plan",
)
async def generate_scope(
    request: ScopeRequest,
    latency_seconds: float = Depends(get_simulated_latency),
) -> ScopeResponse:
    """Turn a client brief into a technical scope document.

    Requests are not persisted; submitting the same brief twice returns the
    same scope.
    """
    start_time = time.perf_counter()
    print("[TIMING] scope_generate_endpoint: START")

    client_input = request.to_client_input()
    try:
        archetype, scope = await generate_scope_with_archetype(
            client_input, latency_seconds=latency_seconds
        )
    except ValidationError as exc:
        print(f"❌ [SCOPE] Rejected brief: {exc}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except GenerationFailure as exc:
        logger.error("Scope generation failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Scope generation failed: {exc}. Please try again.",
        ) from exc

    total_duration = (time.perf_counter() - start_time) * 1000
    print(f"[TIMING] scope_generate_endpoint: END — duration={total_duration:.0f}ms")

    return ScopeResponse(
        client_name=client_input.client_name,
        archetype=archetype,
        scope=scope,
    )


@router.post(
    "/export",
    status_code=status.HTTP_501_NOT_IMPLEMENTED,
    summary="Export Scope Document",
    response_description="Placeholder notice; no document is produced",
)
async def export_scope():
    """Export is not implemented yet. Always answers 501 with a notice."""
    export_scope_document()
    return JSONResponse(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        content={"success": False, "detail": EXPORT_PLACEHOLDER_MESSAGE},
    )


@router.get(
    "/stacks",
    response_model=TechStackListResponse,
    summary="List Preferred Stack Options",
)
async def list_stacks() -> TechStackListResponse:
    return TechStackListResponse()


@router.get(
    "/health",
    summary="Health Check",
    description="Check if the scope service is running",
    response_description="Health status",
)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "healthy", "service": "scope-generator"}
