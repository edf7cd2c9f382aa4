"""Health and version endpoints."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..models import ErrorResponse, HealthResponse, VersionResponse
from ..services.compiler import CompilerService, get_compiler

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy")


@router.get(
    "/version",
    response_model=VersionResponse,
    responses={500: {"model": ErrorResponse, "description": "solc unavailable"}},
)
def compiler_version(compiler: CompilerService = Depends(get_compiler)):
    """Report the solc version requests are compiled with.

    GET /version
    """
    try:
        version = compiler.version()
    except Exception as e:
        logger.exception("Unable to determine solc version")
        return JSONResponse(status_code=500, content={"error": str(e)})

    return VersionResponse(solc_version=version, source_name=compiler.source_name)
