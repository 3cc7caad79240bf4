import logging


def configure_logging(level: int = logging.INFO) -> None:
    """Simple console logging for command-line runs."""
    # reports go to stdout; log lines go to stderr (basicConfig default)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
