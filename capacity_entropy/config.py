# ==================================================
# capacity_entropy/config.py
# ==================================================
import logging
import os

from .const import HASH_ITERATIONS_PER_BLOCK

# ───────────────────────── configuration ──────────────────────
ENTROPY_PACKING_ITERATIONS = os.getenv("ENTROPY_PACKING_ITERATIONS",
                                       str(HASH_ITERATIONS_PER_BLOCK))
LOG_LEVEL = os.getenv("CAPACITY_ENTROPY_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def packing_iterations() -> int:
    """Default packing depth for callers; re-reads the environment."""
    raw = os.getenv("ENTROPY_PACKING_ITERATIONS", ENTROPY_PACKING_ITERATIONS)
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"ENTROPY_PACKING_ITERATIONS must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"ENTROPY_PACKING_ITERATIONS must be >= 0, got {value}")
    return value


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stderr handler to the package logger (idempotent)."""
    logger = logging.getLogger("capacity_entropy")
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
