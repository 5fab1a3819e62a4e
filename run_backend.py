#!/usr/bin/env python3
"""Start the Dust Container Configurator API server."""

import uvicorn

from configurator.settings import Settings

if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(
        "configurator.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        reload_dirs=["configurator"],
    )
