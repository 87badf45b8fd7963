"""
ASGI Entry Point for the TimeLines API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads environment variables from `.env` before the application factory
runs so the settings singleton sees them.

Usage
-----
Run via the console script:
    $ timelines-api

Or via uvicorn directly:
    $ uvicorn timelines.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(".env"))

from timelines.api.app import create_app  # noqa: E402
from timelines.core.settings import load_settings  # noqa: E402

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    settings = load_settings()
    print(f"[Server] Settings file: {settings.settings_path}")

    uvicorn.run(
        "timelines.api.server:app",
        host="127.0.0.1",
        port=8000,
        reload=settings.is_dev,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
