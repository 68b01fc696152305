import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "INFO"):
    """Send all records to one stream handler on the root logger."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.handlers = [handler]
    # keep per-request client chatter out of INFO output
    logging.getLogger("httpx").setLevel(logging.WARNING)
