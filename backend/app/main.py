import uvicorn

from backend.app.core.config import settings


def main() -> None:
    uvicorn.run(
        "backend.app.api.main:app",
        host=settings.uvicorn_host,
        port=settings.uvicorn_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
