import logging
import os
from typing import Literal, Optional

from fastapi import FastAPI
from pydantic import BaseModel

from healthcheck.version import VersionInfo, load_version_info

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"
DEFAULT_PORT = 3000


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    version: str
    commit: str


def build_health_response(info: VersionInfo) -> HealthResponse:
    return HealthResponse(
        version=info.version or UNKNOWN,
        commit=info.commit or UNKNOWN,
    )


def create_app(version_info: Optional[VersionInfo] = None) -> FastAPI:
    if version_info is None:
        version_info = load_version_info()
    # built once; the route only hands back this value
    response = build_health_response(version_info)

    app = FastAPI()

    @app.get("/health", response_model=HealthResponse)
    def health_check():
        return response

    return app


def get_port() -> int:
    try:
        return int(os.getenv("PORT", DEFAULT_PORT))
    except ValueError:
        logger.warning("Ignoring invalid PORT %r, using %d", os.getenv("PORT"), DEFAULT_PORT)
        return DEFAULT_PORT


def get_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def main():
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = create_app(load_version_info())
    port = get_port()
    logger.info("Server is running on http://localhost:%d", port)
    uvicorn.run(app, host=get_host(), port=port)


if __name__ == "__main__":
    main()
