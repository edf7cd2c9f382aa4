from typing import Any, Dict, Optional

from pydantic import BaseModel


# Compile models

class CompileRequest(BaseModel):
    """Compilation request."""
    source: Optional[str] = None  # Solidity source text


# Contract name -> compiler artifact (abi, evm, metadata, ...)
ContractArtifacts = Dict[str, Dict[str, Any]]


class ErrorResponse(BaseModel):
    """Error body returned for any failed request."""
    error: str


# Meta models

class HealthResponse(BaseModel):
    """Health check response."""
    status: str


class VersionResponse(BaseModel):
    """Compiler version in use."""
    solc_version: str
    source_name: str
