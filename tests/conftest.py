import json

import pytest
from fastapi.testclient import TestClient
from solcx.exceptions import SolcNotInstalled

from solc_server.config import Settings
from solc_server.main import create_app
from solc_server.services.compiler import CompilerService


class FakeCompiler(CompilerService):
    """Compiler service answering every solc call with canned output."""

    def __init__(self, output, **kwargs):
        super().__init__(**kwargs)
        self.output = output
        self.inputs = []

    def run_solc(self, input_document):
        self.inputs.append(input_document)
        if isinstance(self.output, Exception):
            raise self.output
        if isinstance(self.output, str):
            return self.output
        return json.dumps(self.output)


@pytest.fixture
def fake_compiler():
    """FakeCompiler class, built with canned output plus CompilerService kwargs."""
    return FakeCompiler


@pytest.fixture
def artifact():
    """Build a minimal stand-in for a compiled contract artifact."""

    def _artifact(name):
        return {
            "abi": [],
            "evm": {"bytecode": {"object": f"6080{name.encode().hex()}"}},
            "metadata": "{}",
        }

    return _artifact


@pytest.fixture
def make_client():
    """Build a test client whose app compiles through a FakeCompiler."""

    def _make(output, **kwargs):
        app = create_app(Settings())
        compiler = FakeCompiler(output, **kwargs)
        app.state.compiler = compiler
        return TestClient(app), compiler

    return _make


@pytest.fixture
def solc_client():
    """Test client backed by a real solc binary; skipped when none is installed."""
    app = create_app(Settings())
    try:
        app.state.compiler.executable()
    except SolcNotInstalled:
        pytest.skip("no solc binary available to py-solc-x")
    with TestClient(app) as c:
        yield c
