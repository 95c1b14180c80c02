"""Run the service with uvicorn on the configured host and port."""

import uvicorn

from app.core.config import settings


def run() -> None:
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
