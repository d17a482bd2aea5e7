# petstore/__main__.py
"""
Usage:
    python -m petstore
"""

import uvicorn

from petstore.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "petstore.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
