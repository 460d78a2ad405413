"""Run the API: ``python -m conference``."""

import logging

import uvicorn

from conference.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "conference.main:app",
        host=settings.host,
        port=settings.port,
        # logging already setup
        log_config=None,
    )


if __name__ == "__main__":
    main()
