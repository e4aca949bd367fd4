from __future__ import annotations
import logging
import os

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

# Client libraries that log every request at INFO
NOISY_LOGGERS = ("urllib3", "httpx", "google", "grpc")


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_console_logging(level: int | str | None = None) -> None:
    """
    Call once at process start (server, CLI). Prints logs to stderr.

    ``level`` accepts a number or a name; LOG_LEVEL is used when omitted.
    """
    resolved = _resolve_level(level)
    root = logging.getLogger()
    root.setLevel(resolved)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))

    if root.handlers:
        # uvicorn or pytest already installed a handler
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)
