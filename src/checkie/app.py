"""Application entry point."""

from __future__ import annotations

import logging

from checkie.config import ServerSettings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main() -> None:
    """Launch the Checkie HTTP server."""
    import uvicorn

    settings = ServerSettings.from_env()
    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)

    uvicorn.run(
        "checkie.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
