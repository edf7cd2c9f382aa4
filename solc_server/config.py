"""Server configuration."""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables with SOLC_SERVER_ prefix.
    Example: SOLC_SERVER_SOLC_VERSION=0.8.24 SOLC_SERVER_PORT=5000 solc-server
    """

    model_config = SettingsConfigDict(env_prefix="SOLC_SERVER_")

    # Server
    host: str = "0.0.0.0"
    port: int = 4000

    # Name the submitted source is compiled under
    source_name: str = "contract.sol"

    # Compiler binary. solc_binary wins over solc_version; with neither set,
    # py-solc-x picks `solc` from PATH or its newest installed version.
    solc_binary: Optional[Path] = None
    solc_version: Optional[str] = None

    # When true, any diagnostic (warnings included) fails the request.
    warnings_as_errors: bool = True

    # Upper bound on simultaneous solc processes (None = anyio default)
    max_concurrent_compiles: Optional[int] = None


settings = Settings()
