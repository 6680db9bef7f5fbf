from __future__ import annotations

import logging
import os
from collections.abc import Container, Iterable

from typed_env.errors import MissingRequiredVariablesError

logger = logging.getLogger(__name__)


def mandatory_variables(required: Iterable[str], source: Container[str] | None = None) -> None:
    """Check that every name in ``required`` is present in ``source``.

    ``source`` defaults to ``os.environ``. Only presence is checked, so a
    variable set to an empty string counts as present.
    """

    if source is None:
        source = os.environ
    missing = [name for name in required if name not in source]
    if missing:
        logger.debug("missing required env variables: %s", missing)
        raise MissingRequiredVariablesError(missing)
