import logging


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the API process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    # Keep SQL echo under control unless explicitly asked for
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
