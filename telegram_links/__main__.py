"""Run the API with uvicorn: ``python -m telegram_links``.

Host and port come from settings (HOST / PORT environment variables).
"""

import uvicorn

from telegram_links.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "telegram_links.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
