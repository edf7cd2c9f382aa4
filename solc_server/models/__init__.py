"""Pydantic models for the compile server API."""

from .schemas import (
    CompileRequest,
    ContractArtifacts,
    ErrorResponse,
    HealthResponse,
    VersionResponse,
)

__all__ = [
    "CompileRequest",
    "ContractArtifacts",
    "ErrorResponse",
    "HealthResponse",
    "VersionResponse",
]
