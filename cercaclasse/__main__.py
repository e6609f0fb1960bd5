"""Run the search service: ``python -m cercaclasse``."""

import uvicorn

from cercaclasse.config import settings


def main() -> None:
    uvicorn.run("cercaclasse.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
