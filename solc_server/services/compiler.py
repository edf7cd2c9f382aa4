"""Compiler service wrapping solc's standard-JSON interface."""

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from fastapi import Request

from solcx.install import get_executable
from solcx.wrapper import solc_wrapper

from ..config import Settings
from ..models import ContractArtifacts

MISSING_SOURCE_MESSAGE = "Missing Solidity source code"


class SolcServerError(Exception):
    """Base error whose message is safe to hand back to the client."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingSourceError(SolcServerError):
    """The request carried no source text."""

    def __init__(self):
        super().__init__(MISSING_SOURCE_MESSAGE)


class CompilationError(SolcServerError):
    """solc reported a diagnostic that fails the request."""

    def __init__(self, message: str, diagnostics: List[Dict[str, Any]]):
        super().__init__(message)
        self.diagnostics = diagnostics


class CompilerService:
    """Service for compiling a single Solidity source through solc."""

    VERSION_PATTERN = re.compile(r"Version:\s*(\S+)")

    def __init__(
        self,
        solc_binary: Optional[Union[Path, str]] = None,
        solc_version: Optional[str] = None,
        source_name: str = "contract.sol",
        warnings_as_errors: bool = True,
    ):
        self.solc_binary = solc_binary
        self.solc_version = solc_version
        self.source_name = source_name
        self.warnings_as_errors = warnings_as_errors

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompilerService":
        """Build a compiler service from application settings."""
        return cls(
            solc_binary=settings.solc_binary,
            solc_version=settings.solc_version,
            source_name=settings.source_name,
            warnings_as_errors=settings.warnings_as_errors,
        )

    def build_input(self, source: str) -> Dict[str, Any]:
        """Build the standard-JSON input document for one source file."""
        return {
            "language": "Solidity",
            "sources": {
                self.source_name: {
                    "content": source,
                },
            },
            "settings": {
                "outputSelection": {
                    "*": {
                        "*": ["*"],
                    },
                },
            },
        }

    def executable(self) -> Union[Path, str]:
        """Resolve the solc binary to invoke."""
        if self.solc_binary is not None:
            return self.solc_binary
        return get_executable(self.solc_version)

    def run_solc(self, input_document: Dict[str, Any]) -> str:
        """Run solc --standard-json on the document and return its raw stdout."""
        stdout, _stderr, _command, _proc = solc_wrapper(
            solc_binary=self.executable(),
            stdin=json.dumps(input_document),
            standard_json=True,
        )
        return stdout

    def compile(self, source: Optional[str]) -> ContractArtifacts:
        """Compile source and return its contracts keyed by contract name.

        Raises MissingSourceError before touching solc when source is empty,
        and CompilationError when solc reports a failing diagnostic. Anything
        else raised along the way (solc not installed, bad exit status,
        unparsable output) propagates unchanged.
        """
        if not source:
            raise MissingSourceError()

        output = json.loads(self.run_solc(self.build_input(source)))

        failures = self._failing_diagnostics(output.get("errors") or [])
        if failures:
            first = failures[0]
            message = first.get("formattedMessage") or first.get("message") or ""
            raise CompilationError(message, failures)

        contracts = output.get("contracts") or {}
        return contracts.get(self.source_name, {})

    def version(self) -> str:
        """Return the version string reported by the solc binary."""
        stdout, _stderr, _command, _proc = solc_wrapper(
            solc_binary=self.executable(),
            version=True,
        )
        match = self.VERSION_PATTERN.search(stdout)
        if match is None:
            raise ValueError(f"Unable to read solc version from output: {stdout!r}")
        return match.group(1)

    def _failing_diagnostics(
        self, diagnostics: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """Select the diagnostics that fail the request under the current policy."""
        if self.warnings_as_errors:
            return list(diagnostics)
        return [d for d in diagnostics if d.get("severity") == "error"]


def get_compiler(request: Request) -> CompilerService:
    """Get the compiler service attached to the running application."""
    return request.app.state.compiler
