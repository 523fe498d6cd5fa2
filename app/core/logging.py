"""Logging setup shared by the API entrypoint and the CLI scripts."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger (idempotent)."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    logging.getLogger().setLevel(level)
    # SQL echo is controlled by DEBUG on the engine, keep the logger itself quiet otherwise.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
