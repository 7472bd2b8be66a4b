import uvicorn

from storefront.config import Settings


def main():
    settings = Settings()
    uvicorn.run(
        "storefront.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.SERVICE_PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
