"""Run the API server: ``python -m contact_scraper``."""

import uvicorn

from contact_scraper.config import settings


def main() -> None:
    uvicorn.run("contact_scraper.api.app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
