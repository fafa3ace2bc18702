"""Launcher serving the validator app with uvicorn."""

from __future__ import annotations

import uvicorn

from dollar.settings import Settings, get_settings

APP_FACTORY = "dollar.main:create_app"


def main(settings: Settings | None = None) -> None:
    """Serve the app; host, port and reload come from the settings."""

    settings = settings or get_settings()
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.dev_reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":  # pragma: no cover - manual run helper
    main()
