"""Compile endpoint."""

import logging
from typing import Optional

from anyio import to_thread
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..models import CompileRequest, ContractArtifacts, ErrorResponse
from ..services.compiler import (
    CompilationError,
    CompilerService,
    SolcServerError,
    get_compiler,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/compile",
    response_model=ContractArtifacts,
    responses={
        400: {"model": ErrorResponse, "description": "Missing source or compiler diagnostic"},
        500: {"model": ErrorResponse, "description": "Compiler invocation failed"},
    },
)
async def compile_source(
    http_request: Request,
    request: Optional[CompileRequest] = None,
    compiler: CompilerService = Depends(get_compiler),
):
    """Compile a Solidity source and return its contracts.

    POST /compile - {"source": "..."} -> {"<ContractName>": {...artifact...}}
    """
    source = request.source if request is not None else None

    try:
        # solc is blocking and CPU-bound; keep it off the event loop
        contracts = await to_thread.run_sync(
            compiler.compile,
            source,
            limiter=http_request.app.state.compile_limiter,
        )
    except CompilationError as e:
        logger.info("Compilation rejected with %d diagnostic(s)", len(e.diagnostics))
        return JSONResponse(status_code=400, content={"error": e.message})
    except SolcServerError as e:
        return JSONResponse(status_code=400, content={"error": e.message})
    except Exception as e:
        logger.exception("Compilation failed unexpectedly")
        return JSONResponse(status_code=500, content={"error": str(e)})

    return contracts
