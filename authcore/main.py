"""
Application entry point.

Run with:
    uvicorn authcore.main:app
or:
    python -m authcore.main
"""

import uvicorn

from authcore.infrastructure.adapters.inbound.api.app import create_app
from authcore.infrastructure.config.settings import get_settings

app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "authcore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
