import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure stdout logging for the application."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    # No-op when the root logger is already configured (uvicorn, pytest).
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("app").setLevel(numeric_level)
