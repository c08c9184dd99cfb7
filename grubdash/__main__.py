"""
Run the API with uvicorn.

    python -m grubdash
"""

import uvicorn

from grubdash.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "grubdash.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
