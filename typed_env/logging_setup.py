from __future__ import annotations

import logging
from collections.abc import Mapping
from contextlib import suppress

from typed_env.env import env_bool, env_str

LOGGER_NAME = "typed_env"


def configure_logging(*, environ: Mapping[str, str] | None = None) -> logging.Logger:
    """Attach a stream handler to the ``typed_env`` logger (idempotent).

    The logger stops propagating once the handler is attached, so records are
    not printed a second time by handlers on the root logger.

    Reads TYPED_ENV_LOG_LEVEL (default WARNING) and skips the handler entirely
    when TYPED_ENV_DISABLE_LOG is truthy.
    """

    logger = logging.getLogger(LOGGER_NAME)
    if env_bool("TYPED_ENV_DISABLE_LOG", environ=environ):
        return logger

    for h in logger.handlers:
        if getattr(h, "_typed_env_log", False):
            return logger

    handler = logging.StreamHandler()
    handler._typed_env_log = True  # type: ignore[attr-defined]
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.propagate = False

    lvl = env_str("TYPED_ENV_LOG_LEVEL", "", environ=environ)
    with suppress(ValueError):
        logger.setLevel((lvl or "WARNING").upper())

    return logger
