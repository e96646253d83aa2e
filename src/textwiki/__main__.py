"""Run the wiki server: ``python -m textwiki``."""

import uvicorn

from textwiki.config import settings
from textwiki.logging_config import setup_logging


def main() -> None:
    setup_logging(settings.log_level)
    uvicorn.run(
        "textwiki.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
