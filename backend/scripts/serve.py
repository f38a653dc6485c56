import uvicorn

from clanboard.core.config import settings


def main(host: str = "0.0.0.0", port: int = 8000):
    uvicorn.run(
        "clanboard.main:app",
        host=host,
        port=port,
        workers=settings.API_WORKERS,
    )


if __name__ == "__main__":
    main()
