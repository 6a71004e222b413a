import uvicorn

from app.config import Config
from app.logs import setup_logging


def main() -> None:
    config = Config()
    setup_logging(config.log_level)
    uvicorn.run(
        "app.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
