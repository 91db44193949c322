"""Run the API with uvicorn: ``python -m scoreboard``."""

import uvicorn

from scoreboard.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "scoreboard.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
