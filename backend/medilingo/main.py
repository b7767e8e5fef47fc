"""
MediLingo+ API

Medicine identification by photo or name: Google Cloud Vision + openFDA +
IBM watsonx.ai, with a server-side dashboard session.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the backend directory
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import build_container, collaborator_router, session_router
from .config.settings import AppConfig, get_default_config
from .cross_cutting.logging import get_logger, setup_logging


def create_app(config: Optional[AppConfig] = None, **overrides) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        config: Application configuration (default: from environment)
        **overrides: Adapters replacing configured ones
            (vision, drug_records, generator, storage)
    """
    config = config or get_default_config()
    setup_logging(
        level=config.logging.level,
        log_file=config.logging.log_file,
        format_string=config.logging.format,
    )
    logger = get_logger("main")

    app = FastAPI(
        title="MediLingo+ API",
        description="Medicine identification and plain-language label explanations",
        version=__version__,
    )

    # NOTE: restrict allow_origins in production
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.container = build_container(config, **overrides)
    app.include_router(collaborator_router)
    app.include_router(session_router)

    @app.get("/")
    async def root():
        return {
            "message": "MediLingo+ API is running",
            "version": __version__,
            "flow": "IMAGE / SEARCH → VISION → CONFIRM → LABEL → GENERATION",
        }

    logger.info(f"MediLingo+ API {__version__} ready")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
