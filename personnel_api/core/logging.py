import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

    # requests are logged by the middleware in main
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
