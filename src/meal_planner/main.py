"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn meal_planner.main:app --reload

    # Installed console script
    meal-planner
"""

from __future__ import annotations

import uvicorn

from meal_planner.core.config import get_settings
from meal_planner.factory import create_app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()

    uvicorn.run(
        "meal_planner.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    run()
