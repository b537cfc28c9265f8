"""Main entry point for Aurora."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from aurora.api import create_fastapi_app
from aurora.logging_config import setup_logging
from sim import Sim


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    setup_logging()

    api_host = os.getenv("API_HOST", "localhost")
    api_port = int(os.getenv("API_PORT", "8000"))

    app = create_fastapi_app(sim=Sim(api_url=f"http://{api_host}:{api_port}"))

    uvicorn.run(
        app,
        host=api_host,
        port=api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
