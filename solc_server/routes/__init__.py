"""API routers."""

from .compile import router as compile_router
from .meta import router as meta_router

__all__ = ["compile_router", "meta_router"]
