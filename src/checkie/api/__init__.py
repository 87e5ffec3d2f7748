"""HTTP transport: FastAPI application and wire schemas."""

from checkie.api.main import app, create_app

__all__ = ["app", "create_app"]
