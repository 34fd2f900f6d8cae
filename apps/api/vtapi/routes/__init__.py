"""Route modules."""

from .jobs import router as jobs_router
from .providers import router as providers_router

__all__ = ["jobs_router", "providers_router"]
