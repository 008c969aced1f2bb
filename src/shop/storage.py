"""Running commands against the configured store."""

from contextlib import contextmanager

import structlog
from protean.utils.globals import current_domain
from sqlalchemy.exc import SQLAlchemyError

from shop.exceptions import StorageError

logger = structlog.get_logger(__name__)


@contextmanager
def storage_errors():
    """Surface database driver failures as `StorageError`, chained to the driver error."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Store operation failed", error=str(exc), error_type=type(exc).__name__)
        raise StorageError({"storage": [f"{type(exc).__name__}: {exc}"]}) from exc


def process(command):
    """Process `command` synchronously.

    Protean runs each command handler inside its own unit of work, so every
    write the handler makes is committed together or not at all.
    """
    with storage_errors():
        return current_domain.process(command, asynchronous=False)
