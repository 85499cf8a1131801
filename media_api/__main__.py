"""Run the API with uvicorn: python -m media_api"""

import logging

import uvicorn

from media_api.config import get_settings


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(
        "media_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
