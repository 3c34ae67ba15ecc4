"""Run the API with uvicorn: `python -m cynova` or `cynova-api`."""

import uvicorn

from cynova.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "cynova.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
    )


if __name__ == "__main__":
    run()
